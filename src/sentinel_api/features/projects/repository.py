"""Lookups against the externally owned ``projects`` table."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Project


class ProjectsRepository:
    """Existence checks used by repositories that reference projects."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, project_id: UUID) -> bool:
        stmt = select(exists().where(Project.id == project_id))
        return bool(await self._session.scalar(stmt))


__all__ = ["ProjectsRepository"]
