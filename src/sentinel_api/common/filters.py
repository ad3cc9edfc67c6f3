"""Filter payloads and the predicate builder used by listing queries."""

from __future__ import annotations

from typing import Any

from sqlalchemy import and_
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import ColumnElement

from sentinel_api.common.schema import BaseSchema


class FilterBase(BaseSchema):
    """Base model for listing filters.

    Every field is optional; ``None`` means "no constraint on this column".
    Unknown fields are rejected to surface typos quickly.
    """


class PredicateBuilder:
    """Fold present filter values into an AND-combined list of predicates.

    Values are always bound as parameters. ``contains`` escapes ``%`` and
    ``_`` so they match literally.
    """

    def __init__(self) -> None:
        self._predicates: list[ColumnElement[bool]] = []

    def __len__(self) -> int:
        return len(self._predicates)

    def contains(self, column: Any, value: str | None) -> PredicateBuilder:
        if value is not None:
            self._predicates.append(column.contains(value, autoescape=True))
        return self

    def equals(self, column: Any, value: Any) -> PredicateBuilder:
        if value is not None:
            self._predicates.append(column == value)
        return self

    def apply(self, stmt: Select) -> Select:
        if not self._predicates:
            return stmt
        return stmt.where(and_(*self._predicates))


__all__ = ["FilterBase", "PredicateBuilder"]
