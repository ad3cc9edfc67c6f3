"""Programmatic Alembic runner.

Migrations normally run as a separate deploy step (``alembic upgrade head``
with the repository's ``alembic.ini``); these helpers run the same scripts
in-process for tests and for "migrate on startup".
"""

from __future__ import annotations

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Connection

from sentinel_api.settings import DEFAULT_MIGRATIONS_DIR

from .database import Database, DatabaseConfig, build_sync_url

__all__ = [
    "alembic_config",
    "run_migrations",
    "run_migrations_async",
    "upgrade_connection",
]


def alembic_config(url: str | None = None) -> Config:
    """Return an Alembic config pointing at the packaged migration scripts."""

    config = Config()
    config.set_main_option("script_location", str(DEFAULT_MIGRATIONS_DIR))
    # Preserve the application's logging configuration when running in-process.
    config.attributes["configure_logger"] = False
    if url is not None:
        config.set_main_option("sqlalchemy.url", url)
    return config


def run_migrations(cfg: DatabaseConfig, *, revision: str = "head") -> None:
    """Upgrade the database described by ``cfg`` to ``revision``."""

    command.upgrade(alembic_config(build_sync_url(cfg)), revision)


def upgrade_connection(connection: Connection, *, revision: str = "head") -> None:
    """Upgrade using an already-open *sync* connection."""

    config = alembic_config()
    config.attributes["connection"] = connection
    command.upgrade(config, revision)


async def run_migrations_async(database: Database, *, revision: str = "head") -> None:
    """Upgrade through the database's own engine.

    Required for in-memory SQLite, where a second engine would see a different
    (empty) database.
    """

    async with database.engine.begin() as connection:
        await connection.run_sync(lambda sync_conn: upgrade_connection(sync_conn, revision=revision))
