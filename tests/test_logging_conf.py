# tests/test_logging_conf.py
"""
Logging Configuration Tests

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- dojo.shared.logging_conf (setup_logging)
"""
import logging
from logging.handlers import RotatingFileHandler

import pytest  # Testing framework for writing and running tests

from dojo.shared.logging_conf import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestSetupLogging:
    def test_log_dir_creates_rotating_file(self, tmp_path, restore_root_logger):
        log_dir = tmp_path / "logs"
        setup_logging(level=logging.DEBUG, log_dir=log_dir, log_stdout=False, max_bytes=1024, backup_count=2)

        file_handlers = [h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 1024
        assert file_handlers[0].backupCount == 2
        assert restore_root_logger.level == logging.DEBUG

        logging.getLogger("dojo.test").warning("written to file")
        file_handlers[0].flush()
        assert "WARNING dojo.test :: written to file" in (log_dir / "dojo.log").read_text(encoding="utf-8")

    def test_stdout_only(self, restore_root_logger):
        setup_logging(level=logging.WARNING)
        assert len(restore_root_logger.handlers) == 1
        assert not isinstance(restore_root_logger.handlers[0], RotatingFileHandler)
        assert restore_root_logger.level == logging.WARNING
