# src/dojo/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a .env file) with validation.

Files that USE this module:
- dojo.app (logging options)
- dojo.adapters.providers.open_er_api (default exchange-rate URL)

Files that this module USES:
- dojo.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for LOG_LEVEL validation
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from dojo.shared.validators import validate_url  # Validate exchange-rate URL format

DEFAULT_EXCHANGE_RATE_URL = "https://open.er-api.com/v6/latest/EUR"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Exchange-rate source ---
    exchange_rate_url: str = Field(default=DEFAULT_EXCHANGE_RATE_URL, alias="EXCHANGE_RATE_URL")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="DOJO_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES", ge=1)  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT", ge=0)

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for LOG_LEVEL."""
        return logging.getLevelName(self.log_level)

    @field_validator("exchange_rate_url")
    @classmethod
    def validate_exchange_rate_url(cls, v: str) -> str:
        """Validate exchange-rate URL format."""
        if not validate_url(v):
            raise ValueError("EXCHANGE_RATE_URL must be an absolute http(s) URL")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalise the log level name."""
        name = v.upper()
        if name not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return name


# Global settings instance
settings = Settings()
