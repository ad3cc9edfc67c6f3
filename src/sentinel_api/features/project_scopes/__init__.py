"""Project scopes: permission grants attached to projects."""

from .filters import ProjectScopeFilter
from .models import ProjectScope
from .repository import ProjectScopeRepository
from .schemas import ProjectScopeCreatePayload, ProjectScopeOut, ProjectScopeUpdatePayload
from .sorting import ProjectScopeSortField, ProjectScopeSortOrder

__all__ = [
    "ProjectScope",
    "ProjectScopeCreatePayload",
    "ProjectScopeFilter",
    "ProjectScopeOut",
    "ProjectScopeRepository",
    "ProjectScopeSortField",
    "ProjectScopeSortOrder",
    "ProjectScopeUpdatePayload",
]
