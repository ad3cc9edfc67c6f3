"""Projects referenced by project scopes."""

from .models import Project
from .repository import ProjectsRepository

__all__ = ["Project", "ProjectsRepository"]
