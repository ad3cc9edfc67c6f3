from __future__ import annotations

from enum import StrEnum

from sentinel_api.common.sorting import SortOrder

from .models import ProjectScope


class ProjectScopeSortField(StrEnum):
    ID = "id"
    PROJECT_ID = "project_id"
    SCOPE = "scope"
    DESCRIPTION = "description"
    ENABLED = "enabled"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


ProjectScopeSortOrder = SortOrder[ProjectScopeSortField]

SORT_FIELDS = {
    ProjectScopeSortField.ID: (ProjectScope.id.asc(), ProjectScope.id.desc()),
    ProjectScopeSortField.PROJECT_ID: (
        ProjectScope.project_id.asc(),
        ProjectScope.project_id.desc(),
    ),
    ProjectScopeSortField.SCOPE: (ProjectScope.scope.asc(), ProjectScope.scope.desc()),
    ProjectScopeSortField.DESCRIPTION: (
        ProjectScope.description.asc(),
        ProjectScope.description.desc(),
    ),
    ProjectScopeSortField.ENABLED: (ProjectScope.enabled.asc(), ProjectScope.enabled.desc()),
    ProjectScopeSortField.CREATED_AT: (
        ProjectScope.created_at.asc(),
        ProjectScope.created_at.desc(),
    ),
    ProjectScopeSortField.UPDATED_AT: (
        ProjectScope.updated_at.asc(),
        ProjectScope.updated_at.desc(),
    ),
}

ID_FIELD = SORT_FIELDS[ProjectScopeSortField.ID]

__all__ = ["ID_FIELD", "SORT_FIELDS", "ProjectScopeSortField", "ProjectScopeSortOrder"]
