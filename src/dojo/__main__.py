# src/dojo/__main__.py
"""Allow ``python -m dojo``."""

import sys

from dojo.app import main

if __name__ == "__main__":
    sys.exit(main())
