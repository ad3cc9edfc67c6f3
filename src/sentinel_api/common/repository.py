"""Generic repository contract shared by every entity repository.

A repository wraps a :class:`~sentinel_api.db.Database` handle and nothing
else. Each operation opens its own short-lived session, so one instance can be
shared freely across concurrent callers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Awaitable, Callable, Mapping, Sequence
from contextlib import asynccontextmanager
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from sentinel_api.common.errors import InternalFailure, RepositoryError
from sentinel_api.common.logging import log_context
from sentinel_api.common.pagination import Pagination, apply_window
from sentinel_api.common.sorting import OrderPair, SortOrder, resolve_sort
from sentinel_api.db import Base, Database
from sentinel_api.settings import get_settings

ModelT = TypeVar("ModelT", bound=Base)
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)
FilterT = TypeVar("FilterT", bound=BaseModel)
OutT = TypeVar("OutT", bound=BaseModel)

logger = logging.getLogger(__name__)


class Repository(ABC, Generic[ModelT, CreateT, UpdateT, FilterT, OutT]):
    """Create/read/update/delete/find over one entity type.

    Failures are always raised as :class:`RepositoryError` subclasses; raw
    driver errors never escape.
    """

    model: ClassVar[type[Base]]
    out_schema: ClassVar[type[BaseModel]]
    sort_fields: ClassVar[Mapping[Any, OrderPair]]
    id_field: ClassVar[OrderPair]

    def __init__(self, database: Database, *, max_limit: int | None = None) -> None:
        self._database = database
        self._max_limit = max_limit if max_limit is not None else get_settings().find_max_limit

    @property
    def max_limit(self) -> int:
        return self._max_limit

    # ------------------------------------------------------------------ #
    # Contract
    # ------------------------------------------------------------------ #
    @abstractmethod
    async def create(self, payload: CreateT) -> OutT: ...

    @abstractmethod
    async def read(self, id: UUID) -> OutT: ...

    @abstractmethod
    async def update(self, id: UUID, payload: UpdateT) -> OutT: ...

    @abstractmethod
    async def delete(self, id: UUID) -> bool: ...

    @abstractmethod
    async def find(
        self,
        filters: FilterT | None = None,
        sort: Sequence[SortOrder] | None = None,
        pagination: Pagination | None = None,
    ) -> list[OutT]: ...

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    @asynccontextmanager
    async def _unit_of_work(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Open a session for one operation and classify store failures."""

        async with self._database.session() as session:
            try:
                yield session
            except RepositoryError:
                await session.rollback()
                raise
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception(
                    "repository.failure",
                    extra=log_context(
                        operation=operation,
                        exception_type=type(exc).__name__,
                    ),
                )
                raise InternalFailure() from exc

    async def _commit(
        self,
        session: AsyncSession,
        *,
        recheck: Callable[[], Awaitable[None]],
    ) -> None:
        """Commit, mapping a late constraint violation onto its precise kind.

        ``recheck`` re-runs the pre-checks after rollback and raises the same
        error they would have raised up front. A violation no pre-check
        explains is an internal failure.
        """

        try:
            await session.commit()
        except IntegrityError as exc:
            await session.rollback()
            await recheck()
            raise InternalFailure() from exc

    def _window(
        self,
        stmt: Select,
        sort: Sequence[SortOrder] | None,
        pagination: Pagination | None,
    ) -> Select:
        """Order then paginate ``stmt``; filters must already be applied."""

        order_by = resolve_sort(sort, allowed=self.sort_fields, id_field=self.id_field)
        return apply_window(stmt.order_by(*order_by), pagination, max_limit=self._max_limit)

    async def _get(self, session: AsyncSession, id: UUID) -> ModelT | None:
        return await session.get(self.model, id)

    def _to_out(self, record: ModelT) -> OutT:
        return self.out_schema.model_validate(record)  # type: ignore[return-value]


__all__ = ["Repository"]
