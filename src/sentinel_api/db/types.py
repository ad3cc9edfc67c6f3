"""Portable column types for identifiers and timestamps."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.types import CHAR, DateTime, TypeDecorator

__all__ = ["UUIDType", "UTCDateTime"]

_POSTGRES_DIALECTS = frozenset({"postgresql", "postgres"})


def _as_uuid(value: Any) -> uuid.UUID:
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


def _as_utc(value: Any) -> Any:
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class UUIDType(TypeDecorator):
    """Row id stored as native ``UUID`` on PostgreSQL, ``CHAR(36)`` on SQLite."""

    impl = CHAR
    cache_ok = True

    def load_dialect_impl(self, dialect: Any):
        if dialect.name in _POSTGRES_DIALECTS:
            from sqlalchemy.dialects.postgresql import UUID

            return dialect.type_descriptor(UUID(as_uuid=True))
        return dialect.type_descriptor(CHAR(36))

    def process_bind_param(self, value: Any, dialect: Any):
        if value is None:
            return None
        parsed = _as_uuid(value)
        return parsed if dialect.name in _POSTGRES_DIALECTS else str(parsed)

    def process_result_value(self, value: Any, dialect: Any):
        return None if value is None else _as_uuid(value)

    @property
    def python_type(self) -> type[uuid.UUID]:
        return uuid.UUID


class UTCDateTime(TypeDecorator):
    """``created_at``/``updated_at`` column; naive values are read as UTC."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any):
        return None if value is None else _as_utc(value)

    def process_result_value(self, value: Any, dialect: Any):
        return None if value is None else _as_utc(value)
