"""Sentinel settings (conventional Pydantic v2)."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---- Defaults ---------------------------------------------------------------

MODULE_DIR = Path(__file__).resolve().parent

DEFAULT_STORAGE_ROOT = Path("./data")
DEFAULT_DB_FILENAME = "sentinel.sqlite"
DEFAULT_SQLITE_PATH = DEFAULT_STORAGE_ROOT / "db" / DEFAULT_DB_FILENAME
DEFAULT_DATABASE_URL = f"sqlite:///{DEFAULT_SQLITE_PATH.as_posix()}"
DEFAULT_MIGRATIONS_DIR = MODULE_DIR / "migrations"

DEFAULT_FIND_MAX_LIMIT = 1000


# ---- Settings ---------------------------------------------------------------

class Settings(BaseSettings):
    """Runtime settings loaded from SENTINEL_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SENTINEL_",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )

    # Database
    database_url: str = DEFAULT_DATABASE_URL
    database_echo: bool = False
    database_pool_size: int = Field(5, ge=1)
    database_max_overflow: int = Field(10, ge=0)
    database_pool_timeout: int = Field(30, gt=0)
    database_pool_recycle: int = Field(1800, ge=-1)
    database_sqlite_journal_mode: str = "WAL"
    database_sqlite_busy_timeout_ms: int = Field(30_000, ge=0)

    # Logging
    logging_level: str = "INFO"

    # Repository listing
    find_max_limit: int = Field(DEFAULT_FIND_MAX_LIMIT, ge=1)

    @field_validator("database_url")
    @classmethod
    def _strip_database_url(cls, value: str) -> str:
        candidate = value.strip()
        if not candidate:
            raise ValueError("database_url must not be blank")
        return candidate

    @field_validator("logging_level")
    @classmethod
    def _normalise_logging_level(cls, value: str) -> str:
        candidate = value.strip().upper()
        if candidate not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown logging level {value!r}")
        return candidate

    @field_validator("database_sqlite_journal_mode")
    @classmethod
    def _normalise_journal_mode(cls, value: str) -> str:
        return value.strip().upper() or "WAL"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""

    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and load a fresh instance."""

    get_settings.cache_clear()
    return get_settings()


__all__ = [
    "DEFAULT_DATABASE_URL",
    "DEFAULT_FIND_MAX_LIMIT",
    "DEFAULT_MIGRATIONS_DIR",
    "Settings",
    "get_settings",
    "reload_settings",
]
