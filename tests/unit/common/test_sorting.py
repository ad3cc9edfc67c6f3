from __future__ import annotations

import pytest
from sqlalchemy.dialects import sqlite

from sentinel_api.common.errors import ValidationFailure
from sentinel_api.common.sorting import SortDirection, SortOrder, resolve_sort
from sentinel_api.features.service_accounts.sorting import (
    ID_FIELD,
    SORT_FIELDS,
    ServiceAccountSortField,
)


def _render(order_by) -> list[str]:
    return [str(clause.compile(dialect=sqlite.dialect())) for clause in order_by]


def _resolve(sort):
    return _render(resolve_sort(sort, allowed=SORT_FIELDS, id_field=ID_FIELD))


def test_absent_sort_orders_by_id_ascending() -> None:
    assert _resolve(None) == ["service_accounts.id ASC"]
    assert _resolve([]) == ["service_accounts.id ASC"]


def test_id_tiebreaker_is_appended() -> None:
    assert _resolve([SortOrder(ServiceAccountSortField.NAME)]) == [
        "service_accounts.name ASC",
        "service_accounts.id ASC",
    ]


def test_tiebreaker_follows_first_key_direction() -> None:
    assert _resolve(
        [
            SortOrder(ServiceAccountSortField.CREATED_AT, SortDirection.DESC),
            SortOrder(ServiceAccountSortField.NAME),
        ]
    ) == [
        "service_accounts.created_at DESC",
        "service_accounts.name ASC",
        "service_accounts.id DESC",
    ]


def test_explicit_id_is_not_repeated() -> None:
    assert _resolve([SortOrder(ServiceAccountSortField.ID, SortDirection.DESC)]) == [
        "service_accounts.id DESC",
    ]


def test_duplicate_fields_keep_first_occurrence() -> None:
    assert _resolve(
        [
            SortOrder(ServiceAccountSortField.EMAIL, SortDirection.DESC),
            SortOrder(ServiceAccountSortField.EMAIL),
        ]
    ) == ["service_accounts.email DESC", "service_accounts.id DESC"]


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(ValidationFailure) as excinfo:
        _resolve([SortOrder("priority")])

    assert "Unsupported sort field 'priority'" in str(excinfo.value)
    assert "name" in str(excinfo.value)


def test_sort_order_descending_property() -> None:
    assert SortOrder(ServiceAccountSortField.NAME, SortDirection.DESC).descending is True
    assert SortOrder(ServiceAccountSortField.NAME).descending is False
