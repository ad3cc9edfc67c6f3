from __future__ import annotations

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Text, UniqueConstraint, true
from sqlalchemy.orm import Mapped, mapped_column

from sentinel_api.db import Base, TimestampMixin, UUIDPrimaryKeyMixin, UUIDType


class ProjectScope(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Permission grant (``resource:action``) attached to a project."""

    __tablename__ = "project_scopes"
    __table_args__ = (UniqueConstraint("project_id", "scope"),)

    project_id: Mapped[UUID] = mapped_column(
        UUIDType(),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    scope: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default=""
    )
    enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )


__all__ = ["ProjectScope"]
