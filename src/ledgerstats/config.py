"""Runtime configuration.

Values come from ``LEDGERSTATS_*`` environment variables, with defaults
suitable for running from the project directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_PATH = Path("data/ledgerstats.db")
DEFAULT_SEED_FILE = Path("transaction.json")
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_prefix="LEDGERSTATS_", env_ignore_empty=True)

    db_path: Path = DEFAULT_DB_PATH
    seed_file: Path = DEFAULT_SEED_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
