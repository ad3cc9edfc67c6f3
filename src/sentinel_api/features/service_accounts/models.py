from __future__ import annotations

from sqlalchemy import Boolean, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column

from sentinel_api.db import Base, TimestampMixin, UUIDPrimaryKeyMixin


class ServiceAccount(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Non-human identity with its own name, email and enabled state."""

    __tablename__ = "service_accounts"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default=""
    )
    enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )


__all__ = ["ServiceAccount"]
