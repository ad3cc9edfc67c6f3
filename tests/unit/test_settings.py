from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from pydantic import ValidationError

from sentinel_api import Settings, get_settings, reload_settings


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Ensure settings cache and env overrides are cleared between tests."""

    for var in (
        "SENTINEL_DATABASE_URL",
        "SENTINEL_DATABASE_ECHO",
        "SENTINEL_DATABASE_POOL_SIZE",
        "SENTINEL_DATABASE_SQLITE_JOURNAL_MODE",
        "SENTINEL_LOGGING_LEVEL",
        "SENTINEL_FIND_MAX_LIMIT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reload_settings()
    yield
    get_settings.cache_clear()


def test_settings_defaults() -> None:
    settings = get_settings()

    assert isinstance(settings, Settings)
    assert settings.database_url == "sqlite:///data/db/sentinel.sqlite"
    assert settings.database_echo is False
    assert settings.database_sqlite_journal_mode == "WAL"
    assert settings.logging_level == "INFO"
    assert settings.find_max_limit == 1000


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_settings_env_var_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SENTINEL_DATABASE_URL", " postgresql://app@db:5432/sentinel ")
    monkeypatch.setenv("SENTINEL_LOGGING_LEVEL", "debug")
    monkeypatch.setenv("SENTINEL_FIND_MAX_LIMIT", "25")

    settings = reload_settings()

    assert settings.database_url == "postgresql://app@db:5432/sentinel"
    assert settings.logging_level == "DEBUG"
    assert settings.find_max_limit == 25


def test_settings_reads_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("SENTINEL_FIND_MAX_LIMIT=50\nSENTINEL_DATABASE_ECHO=true\n")

    settings = reload_settings()

    assert settings.find_max_limit == 50
    assert settings.database_echo is True


@pytest.mark.parametrize(
    ("var", "value"),
    [
        ("SENTINEL_LOGGING_LEVEL", "chatty"),
        ("SENTINEL_FIND_MAX_LIMIT", "0"),
    ],
)
def test_settings_reject_invalid_values(
    monkeypatch: pytest.MonkeyPatch, var: str, value: str
) -> None:
    monkeypatch.setenv(var, value)

    with pytest.raises(ValidationError):
        reload_settings()
