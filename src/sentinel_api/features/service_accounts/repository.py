"""Persistence for ``ServiceAccount`` records."""

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

from .filters import ServiceAccountFilter, apply_service_account_filters
from .models import ServiceAccount
from .schemas import ServiceAccountCreatePayload, ServiceAccountOut, ServiceAccountUpdatePayload
from .sorting import ID_FIELD, SORT_FIELDS

SERVICE_ACCOUNT_NOT_FOUND = "Service account not found"
NAME_ALREADY_EXISTS = "Service account name already exists"
EMAIL_ALREADY_EXISTS = "Service account email already exists"

logger = logging.getLogger(__name__)


class ServiceAccountRepository(
    Repository[
        ServiceAccount,
        ServiceAccountCreatePayload,
        ServiceAccountUpdatePayload,
        ServiceAccountFilter,
        ServiceAccountOut,
    ]
):
    """Service accounts with globally unique names and emails.

    ``delete`` reports a missing row by returning ``False``.
    """

    model = ServiceAccount
    out_schema = ServiceAccountOut
    sort_fields = SORT_FIELDS
    id_field = ID_FIELD

    async def create(self, payload: ServiceAccountCreatePayload) -> ServiceAccountOut:
        async with self._unit_of_work("service_accounts.create") as session:

            async def _check() -> None:
                await self._ensure_available(session, name=payload.name, email=payload.email)

            await _check()
            record = ServiceAccount(
                name=payload.name,
                email=payload.email,
                description=payload.description,
                enabled=payload.enabled,
            )
            session.add(record)
            await self._commit(session, recheck=_check)
            await session.refresh(record)

            logger.info(
                "service_accounts.create.success",
                extra=log_context(service_account_id=str(record.id)),
            )
            return self._to_out(record)

    async def read(self, id: UUID) -> ServiceAccountOut:
        async with self._unit_of_work("service_accounts.read") as session:
            record = await self._get(session, id)
            if record is None:
                raise NotFoundError(SERVICE_ACCOUNT_NOT_FOUND)
            return self._to_out(record)

    async def update(self, id: UUID, payload: ServiceAccountUpdatePayload) -> ServiceAccountOut:
        changes = payload.changes()
        if not changes:
            raise ValidationFailure(NO_CHANGES_TO_UPDATE)

        async with self._unit_of_work("service_accounts.update") as session:
            record = await self._get(session, id)
            if record is None:
                raise NotFoundError(SERVICE_ACCOUNT_NOT_FOUND)

            # Only values that actually change are checked; an unchanged name
            # or email never conflicts with its own row.
            new_name = changes.get("name")
            if new_name == record.name:
                new_name = None
            new_email = changes.get("email")
            if new_email == record.email:
                new_email = None

            async def _check() -> None:
                await self._ensure_available(
                    session, name=new_name, email=new_email, exclude_id=id
                )

            await _check()
            for field, value in changes.items():
                setattr(record, field, value)
            await self._commit(session, recheck=_check)
            await session.refresh(record)

            logger.info(
                "service_accounts.update.success",
                extra=log_context(
                    service_account_id=str(record.id),
                    fields=",".join(sorted(changes)),
                ),
            )
            return self._to_out(record)

    async def delete(self, id: UUID) -> bool:
        async with self._unit_of_work("service_accounts.delete") as session:
            result = await session.execute(delete(ServiceAccount).where(ServiceAccount.id == id))
            await session.commit()
            deleted = (result.rowcount or 0) > 0

            logger.info(
                "service_accounts.delete.success",
                extra=log_context(service_account_id=str(id), deleted=deleted),
            )
            return deleted

    async def find(
        self,
        filters: ServiceAccountFilter | None = None,
        sort: Sequence[SortOrder] | None = None,
        pagination: Pagination | None = None,
    ) -> list[ServiceAccountOut]:
        stmt = apply_service_account_filters(
            select(ServiceAccount), filters or ServiceAccountFilter()
        )
        stmt = self._window(stmt, sort, pagination)

        async with self._unit_of_work("service_accounts.find") as session:
            records = (await session.scalars(stmt)).all()

        logger.debug(
            "service_accounts.find.success",
            extra=log_context(count=len(records)),
        )
        return [self._to_out(record) for record in records]

    # ------------------------------------------------------------------ #
    # Uniqueness checks
    # ------------------------------------------------------------------ #
    async def _ensure_available(
        self,
        session: AsyncSession,
        *,
        name: str | None = None,
        email: str | None = None,
        exclude_id: UUID | None = None,
    ) -> None:
        if name is not None and await self._taken(session, ServiceAccount.name == name, exclude_id):
            logger.info(
                "service_accounts.conflict",
                extra=log_context(field="name", service_account_id=_str_or_none(exclude_id)),
            )
            raise ConflictError(NAME_ALREADY_EXISTS)
        if email is not None and await self._taken(
            session, ServiceAccount.email == email, exclude_id
        ):
            logger.info(
                "service_accounts.conflict",
                extra=log_context(field="email", service_account_id=_str_or_none(exclude_id)),
            )
            raise ConflictError(EMAIL_ALREADY_EXISTS)

    @staticmethod
    async def _taken(session: AsyncSession, condition, exclude_id: UUID | None) -> bool:
        clause = exists().where(condition)
        if exclude_id is not None:
            clause = clause.where(ServiceAccount.id != exclude_id)
        return bool(await session.scalar(select(clause)))


def _str_or_none(value: UUID | None) -> str | None:
    return None if value is None else str(value)


__all__ = [
    "EMAIL_ALREADY_EXISTS",
    "NAME_ALREADY_EXISTS",
    "SERVICE_ACCOUNT_NOT_FOUND",
    "ServiceAccountRepository",
]
