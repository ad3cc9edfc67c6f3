"""Sort specifications and their translation into ``ORDER BY`` clauses."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, TypeVar

from sentinel_api.common.errors import ValidationFailure

FieldT = TypeVar("FieldT", bound=StrEnum)

# (ascending, descending) ordering pair for a sortable field.
OrderPair = tuple[Any, Any]
OrderBy = tuple[Any, ...]


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortOrder(Generic[FieldT]):
    """Order by ``field`` in ``direction``."""

    field: FieldT
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC


def _dedupe_preserve_order(sort: Sequence[SortOrder]) -> list[SortOrder]:
    seen: set[str] = set()
    out: list[SortOrder] = []
    for order in sort:
        if order.field not in seen:
            seen.add(order.field)
            out.append(order)
    return out


def resolve_sort(
    sort: Sequence[SortOrder] | None,
    *,
    allowed: Mapping[Any, OrderPair],
    id_field: OrderPair,
    id_name: str = "id",
) -> OrderBy:
    """Resolve a sort specification into SQLAlchemy order-by columns.

    An empty or absent specification orders by primary key ascending. The
    primary key is appended as a tiebreaker, following the direction of the
    first key, so offset/limit windows are deterministic.
    """

    materialized = _dedupe_preserve_order(sort or [])
    if not materialized:
        return (id_field[0],)

    order: list[Any] = []
    names: list[str] = []
    for item in materialized:
        columns = allowed.get(item.field)
        if columns is None:
            allowed_list = ", ".join(sorted(str(key) for key in allowed))
            raise ValidationFailure(
                f"Unsupported sort field '{item.field}'. Allowed: {allowed_list}"
            )
        names.append(str(item.field))
        order.append(columns[1] if item.descending else columns[0])

    if id_name not in names:
        order.append(id_field[1] if materialized[0].descending else id_field[0])

    return tuple(order)


__all__ = ["OrderBy", "OrderPair", "SortDirection", "SortOrder", "resolve_sort"]
