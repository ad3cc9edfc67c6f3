"""Persistence for ``ProjectScope`` records."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from sentinel_api.common.errors import (
    NO_CHANGES_TO_UPDATE,
    ConflictError,
    NotFoundError,
    ValidationFailure,
)
from sentinel_api.common.logging import log_context
from sentinel_api.common.pagination import Pagination
from sentinel_api.common.repository import Repository
from sentinel_api.common.sorting import SortOrder
from sentinel_api.features.projects.repository import ProjectsRepository

from .filters import ProjectScopeFilter, apply_project_scope_filters
from .models import ProjectScope
from .schemas import ProjectScopeCreatePayload, ProjectScopeOut, ProjectScopeUpdatePayload
from .sorting import ID_FIELD, SORT_FIELDS

PROJECT_NOT_FOUND = "Project not found"
PROJECT_SCOPE_NOT_FOUND = "Project scope not found"
SCOPE_ALREADY_EXISTS = "Project Id, scope combination already exists"

logger = logging.getLogger(__name__)


class ProjectScopeRepository(
    Repository[
        ProjectScope,
        ProjectScopeCreatePayload,
        ProjectScopeUpdatePayload,
        ProjectScopeFilter,
        ProjectScopeOut,
    ]
):
    """Project scopes, unique per ``(project_id, scope)``.

    Creation requires the referenced project to exist. ``read``, ``update``
    and ``delete`` are keyed by the scope's own id, and ``delete`` raises
    :class:`NotFoundError` for a missing row.
    """

    model = ProjectScope
    out_schema = ProjectScopeOut
    sort_fields = SORT_FIELDS
    id_field = ID_FIELD

    async def create(self, payload: ProjectScopeCreatePayload) -> ProjectScopeOut:
        async with self._unit_of_work("project_scopes.create") as session:

            async def _check() -> None:
                await self._ensure_project_exists(session, payload.project_id)
                await self._ensure_available(session, payload.project_id, payload.scope)

            await _check()
            record = ProjectScope(
                project_id=payload.project_id,
                scope=payload.scope,
                description=payload.description,
                enabled=payload.enabled,
            )
            session.add(record)
            await self._commit(session, recheck=_check)
            await session.refresh(record)

            logger.info(
                "project_scopes.create.success",
                extra=log_context(
                    project_id=str(record.project_id),
                    project_scope_id=str(record.id),
                ),
            )
            return self._to_out(record)

    async def read(self, id: UUID) -> ProjectScopeOut:
        async with self._unit_of_work("project_scopes.read") as session:
            record = await self._get(session, id)
            if record is None:
                raise NotFoundError(PROJECT_SCOPE_NOT_FOUND)
            return self._to_out(record)

    async def update(self, id: UUID, payload: ProjectScopeUpdatePayload) -> ProjectScopeOut:
        changes = payload.changes()
        if not changes:
            raise ValidationFailure(NO_CHANGES_TO_UPDATE)

        async with self._unit_of_work("project_scopes.update") as session:
            record = await self._get(session, id)
            if record is None:
                raise NotFoundError(PROJECT_SCOPE_NOT_FOUND)

            project_id = record.project_id
            new_scope = changes.get("scope")
            if new_scope == record.scope:
                new_scope = None

            async def _check() -> None:
                if new_scope is not None:
                    await self._ensure_available(session, project_id, new_scope, exclude_id=id)

            await _check()
            for field, value in changes.items():
                setattr(record, field, value)
            await self._commit(session, recheck=_check)
            await session.refresh(record)

            logger.info(
                "project_scopes.update.success",
                extra=log_context(
                    project_id=str(project_id),
                    project_scope_id=str(record.id),
                    fields=",".join(sorted(changes)),
                ),
            )
            return self._to_out(record)

    async def delete(self, id: UUID) -> bool:
        async with self._unit_of_work("project_scopes.delete") as session:
            result = await session.execute(delete(ProjectScope).where(ProjectScope.id == id))
            if not result.rowcount:
                raise NotFoundError(PROJECT_SCOPE_NOT_FOUND)
            await session.commit()

            logger.info(
                "project_scopes.delete.success",
                extra=log_context(project_scope_id=str(id)),
            )
            return True

    async def find(
        self,
        filters: ProjectScopeFilter | None = None,
        sort: Sequence[SortOrder] | None = None,
        pagination: Pagination | None = None,
    ) -> list[ProjectScopeOut]:
        stmt = apply_project_scope_filters(select(ProjectScope), filters or ProjectScopeFilter())
        stmt = self._window(stmt, sort, pagination)

        async with self._unit_of_work("project_scopes.find") as session:
            records = (await session.scalars(stmt)).all()

        logger.debug(
            "project_scopes.find.success",
            extra=log_context(count=len(records)),
        )
        return [self._to_out(record) for record in records]

    # ------------------------------------------------------------------ #
    # Referential and uniqueness checks
    # ------------------------------------------------------------------ #
    async def _ensure_project_exists(self, session: AsyncSession, project_id: UUID) -> None:
        if not await ProjectsRepository(session).exists(project_id):
            logger.info(
                "project_scopes.project_missing",
                extra=log_context(project_id=str(project_id)),
            )
            raise NotFoundError(PROJECT_NOT_FOUND)

    async def _ensure_available(
        self,
        session: AsyncSession,
        project_id: UUID,
        scope: str,
        *,
        exclude_id: UUID | None = None,
    ) -> None:
        clause = exists().where(ProjectScope.project_id == project_id, ProjectScope.scope == scope)
        if exclude_id is not None:
            clause = clause.where(ProjectScope.id != exclude_id)
        if await session.scalar(select(clause)):
            logger.info(
                "project_scopes.conflict",
                extra=log_context(project_id=str(project_id), scope=scope),
            )
            raise ConflictError(SCOPE_ALREADY_EXISTS)


__all__ = [
    "PROJECT_NOT_FOUND",
    "PROJECT_SCOPE_NOT_FOUND",
    "SCOPE_ALREADY_EXISTS",
    "ProjectScopeRepository",
]
