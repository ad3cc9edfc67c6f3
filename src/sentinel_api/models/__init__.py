"""Import every ORM model so ``metadata`` is complete."""

from sentinel_api.features.project_scopes.models import ProjectScope
from sentinel_api.features.projects.models import Project
from sentinel_api.features.service_accounts.models import ServiceAccount

__all__ = ["Project", "ProjectScope", "ServiceAccount"]
