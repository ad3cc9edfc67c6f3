"""Shared pytest fixtures for repository tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID

import pytest_asyncio

from sentinel_api.db import Database, DatabaseConfig
from sentinel_api.db.migrations import run_migrations_async
from sentinel_api.features.project_scopes import ProjectScope, ProjectScopeRepository
from sentinel_api.features.projects import Project
from sentinel_api.features.service_accounts import ServiceAccount, ServiceAccountRepository

ALPHA_PROJECT_ID = UUID("123e4567-e89b-12d3-a456-426614174000")
BETA_PROJECT_ID = UUID("223e4567-e89b-12d3-a456-426614174000")
MISSING_PROJECT_ID = UUID("923e4567-e89b-12d3-a456-426614174000")

MAX_LIMIT = 1000


def seeded_id(number: int) -> UUID:
    """Return a predictable id; seeded rows sort by this number."""

    return UUID(f"00000000-0000-0000-0000-{number:012d}")


SERVICE_ACCOUNT_ROWS = [
    (seeded_id(1), "ci-runner", "ci-runner@service.local", "Runs CI pipelines", True),
    (seeded_id(2), "deploy-bot", "deploy@service.local", "Deploys releases to production", True),
    (seeded_id(3), "backup-agent", "backup@service.local", "Nightly backups", False),
    (seeded_id(4), "metrics-exporter", "metrics@service.local", "Exports pipeline metrics", True),
]

PROJECT_SCOPE_ROWS = [
    (seeded_id(11), ALPHA_PROJECT_ID, "testa:read", "Read access to testa project", True),
    (seeded_id(12), ALPHA_PROJECT_ID, "testa:write", "Write access to testa project", True),
    (seeded_id(13), ALPHA_PROJECT_ID, "testb:read", "Read access to testb project", True),
    (seeded_id(14), ALPHA_PROJECT_ID, "testb:write", "Write access to testb project", False),
    (seeded_id(15), BETA_PROJECT_ID, "testc:read", "Read access to testc project", True),
    (seeded_id(16), BETA_PROJECT_ID, "testc:admin", "Admin access to testc project", False),
]


@pytest_asyncio.fixture()
async def database() -> AsyncIterator[Database]:
    """Provide an isolated, migrated in-memory SQLite database."""

    db = Database(DatabaseConfig(url="sqlite:///:memory:"))
    await run_migrations_async(db)
    try:
        yield db
    finally:
        await db.dispose()


@pytest_asyncio.fixture()
async def projects(database: Database) -> dict[str, UUID]:
    """Insert the two projects that scopes can reference."""

    async with database.session() as session:
        session.add_all(
            [
                Project(id=ALPHA_PROJECT_ID, name="alpha", description="Alpha project"),
                Project(id=BETA_PROJECT_ID, name="beta", description="Beta project"),
            ]
        )
        await session.commit()
    return {"alpha": ALPHA_PROJECT_ID, "beta": BETA_PROJECT_ID}


@pytest_asyncio.fixture()
async def seeded_service_accounts(database: Database) -> list[UUID]:
    async with database.session() as session:
        session.add_all(
            [
                ServiceAccount(
                    id=row_id,
                    name=name,
                    email=email,
                    description=description,
                    enabled=enabled,
                )
                for row_id, name, email, description, enabled in SERVICE_ACCOUNT_ROWS
            ]
        )
        await session.commit()
    return [row[0] for row in SERVICE_ACCOUNT_ROWS]


@pytest_asyncio.fixture()
async def seeded_project_scopes(database: Database, projects: dict[str, UUID]) -> list[UUID]:
    async with database.session() as session:
        session.add_all(
            [
                ProjectScope(
                    id=row_id,
                    project_id=project_id,
                    scope=scope,
                    description=description,
                    enabled=enabled,
                )
                for row_id, project_id, scope, description, enabled in PROJECT_SCOPE_ROWS
            ]
        )
        await session.commit()
    return [row[0] for row in PROJECT_SCOPE_ROWS]


@pytest_asyncio.fixture()
async def service_account_repository(database: Database) -> ServiceAccountRepository:
    return ServiceAccountRepository(database, max_limit=MAX_LIMIT)


@pytest_asyncio.fixture()
async def project_scope_repository(database: Database) -> ProjectScopeRepository:
    return ProjectScopeRepository(database, max_limit=MAX_LIMIT)
