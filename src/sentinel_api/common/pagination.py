"""Offset/limit windowing for listing queries."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field
from sqlalchemy.sql import Select

from sentinel_api.common.schema import BaseSchema


class Pagination(BaseSchema):
    """Skip ``offset`` rows, then take at most ``limit`` rows.

    Both fields are optional; an absent offset starts at the first row and an
    absent limit returns everything up to the repository's safety cap.
    """

    offset: int | None = Field(None, ge=0, description="Rows to skip.")
    limit: int | None = Field(None, ge=0, description="Maximum rows to return.")


@dataclass(frozen=True, slots=True)
class Window:
    offset: int
    limit: int


def resolve_window(pagination: Pagination | None, *, max_limit: int) -> Window:
    """Return the concrete offset/limit, clamping the limit to ``max_limit``."""

    if pagination is None:
        return Window(offset=0, limit=max_limit)
    offset = pagination.offset or 0
    limit = max_limit if pagination.limit is None else min(pagination.limit, max_limit)
    return Window(offset=offset, limit=limit)


def apply_window(stmt: Select, pagination: Pagination | None, *, max_limit: int) -> Select:
    """Apply ``OFFSET``/``LIMIT`` to an already ordered statement."""

    window = resolve_window(pagination, max_limit=max_limit)
    return stmt.offset(window.offset).limit(window.limit)


__all__ = ["Pagination", "Window", "apply_window", "resolve_window"]
