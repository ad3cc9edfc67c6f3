"""Pydantic schemas for service account payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import Field, StringConstraints

from sentinel_api.common.schema import BaseSchema, PartialUpdateSchema

AccountName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
AccountEmail = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$"),
]


class ServiceAccountCreatePayload(BaseSchema):
    """Fields accepted when creating a service account."""

    name: AccountName = Field(description="Unique service account name.")
    email: AccountEmail = Field(description="Unique contact email.")
    description: str = Field("", max_length=2000)
    enabled: bool = True


class ServiceAccountUpdatePayload(PartialUpdateSchema):
    """Partial update; omitted fields keep their stored value."""

    name: AccountName | None = None
    email: AccountEmail | None = None
    description: str | None = Field(None, max_length=2000)
    enabled: bool | None = None


class ServiceAccountOut(BaseSchema):
    """Stored representation of a service account."""

    id: UUID
    name: str
    email: str
    description: str
    enabled: bool
    created_at: datetime
    updated_at: datetime


__all__ = [
    "ServiceAccountCreatePayload",
    "ServiceAccountOut",
    "ServiceAccountUpdatePayload",
]
