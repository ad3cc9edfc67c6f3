from __future__ import annotations

from pydantic import Field
from sqlalchemy.sql import Select

from sentinel_api.common.filters import FilterBase, PredicateBuilder

from .models import ServiceAccount


class ServiceAccountFilter(FilterBase):
    """Optional predicates for listing service accounts."""

    name: str | None = Field(None, description="Substring of the account name.")
    email: str | None = Field(None, description="Substring of the account email.")
    description: str | None = Field(None, description="Substring of the description.")
    enabled: bool | None = Field(None, description="Filter by enabled/disabled state.")


def apply_service_account_filters(stmt: Select, filters: ServiceAccountFilter) -> Select:
    """Apply ``filters`` to a service account query."""

    return (
        PredicateBuilder()
        .contains(ServiceAccount.name, filters.name)
        .contains(ServiceAccount.email, filters.email)
        .contains(ServiceAccount.description, filters.description)
        .equals(ServiceAccount.enabled, filters.enabled)
        .apply(stmt)
    )


__all__ = ["ServiceAccountFilter", "apply_service_account_filters"]
