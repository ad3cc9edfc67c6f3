"""Pydantic schemas for project scope payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import Field, StringConstraints

from sentinel_api.common.schema import BaseSchema, PartialUpdateSchema

ScopeToken = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class ProjectScopeCreatePayload(BaseSchema):
    """Fields accepted when granting a scope to a project."""

    project_id: UUID = Field(description="Existing project the scope belongs to.")
    scope: ScopeToken = Field(description="Permission token, e.g. ``documents:read``.")
    description: str = Field("", max_length=2000)
    enabled: bool = True


class ProjectScopeUpdatePayload(PartialUpdateSchema):
    """Partial update; the owning project cannot be changed."""

    scope: ScopeToken | None = None
    description: str | None = Field(None, max_length=2000)
    enabled: bool | None = None


class ProjectScopeOut(BaseSchema):
    """Stored representation of a project scope."""

    id: UUID
    project_id: UUID
    scope: str
    description: str
    enabled: bool
    created_at: datetime
    updated_at: datetime


__all__ = ["ProjectScopeCreatePayload", "ProjectScopeOut", "ProjectScopeUpdatePayload"]
