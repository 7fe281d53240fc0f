"""
Application configuration.

Values come from environment variables or an optional .env file at the
repository root, loaded via pydantic-settings into the singleton `settings`.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_config_logger = logging.getLogger("mortgage.config")

_REPO_ROOT = Path(__file__).resolve().parent.parent  # config/settings.py → repo root
_ENV_FILE = _REPO_ROOT / ".env"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    # ── General ──────────────────────────────────────────────
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # ── Database / history ───────────────────────────────────
    database_url: str = Field(default="sqlite:///./mortgage_calculations.db")
    history_enabled: bool = Field(
        default=True,
        description="Record every successful calculation in the history table",
    )
    history_page_size: int = Field(default=20, ge=1)
    history_max_page_size: int = Field(default=100, ge=1)

    # ── CORS ─────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    model_config = {
        "env_file": str(_ENV_FILE),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
_config_logger.debug("Loaded settings for environment=%s", settings.environment)
