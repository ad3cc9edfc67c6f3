"""Shared Pydantic schema utilities."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base class for all Sentinel schemas."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        extra="forbid",
    )


class PartialUpdateSchema(BaseSchema):
    """Update payload where every field is optional.

    ``None`` means "leave this column unchanged".
    """

    def changes(self) -> dict[str, Any]:
        """Return only the fields that carry a value."""

        return self.model_dump(exclude_none=True)


__all__ = ["BaseSchema", "PartialUpdateSchema"]
