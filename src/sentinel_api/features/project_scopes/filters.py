from __future__ import annotations

from uuid import UUID

from pydantic import Field
from sqlalchemy.sql import Select

from sentinel_api.common.filters import FilterBase, PredicateBuilder

from .models import ProjectScope


class ProjectScopeFilter(FilterBase):
    """Optional predicates for listing project scopes."""

    project_id: UUID | None = Field(None, description="Exact owning project.")
    scope: str | None = Field(None, description="Substring of the scope token.")
    description: str | None = Field(None, description="Substring of the description.")
    enabled: bool | None = Field(None, description="Filter by enabled/disabled state.")


def apply_project_scope_filters(stmt: Select, filters: ProjectScopeFilter) -> Select:
    """Apply ``filters`` to a project scope query."""

    return (
        PredicateBuilder()
        .equals(ProjectScope.project_id, filters.project_id)
        .contains(ProjectScope.scope, filters.scope)
        .contains(ProjectScope.description, filters.description)
        .equals(ProjectScope.enabled, filters.enabled)
        .apply(stmt)
    )


__all__ = ["ProjectScopeFilter", "apply_project_scope_filters"]
