"""Initial Sentinel schema: projects, service accounts and project scopes.

Identifiers are UUIDs generated in the application layer; timestamps are
application-managed UTC values.
"""

from __future__ import annotations

from typing import Optional

import sqlalchemy as sa
from alembic import op

from sentinel_api.db.types import UTCDateTime, UUIDType

# Revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision: Optional[str] = None
branch_labels: Optional[str] = None
depends_on: Optional[str] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", UUIDType(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="projects_pkey"),
        sa.UniqueConstraint("name", name="projects_name_key"),
    )

    op.create_table(
        "service_accounts",
        sa.Column("id", UUIDType(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="service_accounts_pkey"),
        sa.UniqueConstraint("name", name="service_accounts_name_key"),
        sa.UniqueConstraint("email", name="service_accounts_email_key"),
    )

    op.create_table(
        "project_scopes",
        sa.Column("id", UUIDType(), nullable=False),
        sa.Column("project_id", UUIDType(), nullable=False),
        sa.Column("scope", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="project_scopes_pkey"),
        sa.ForeignKeyConstraint(
            ["project_id"],
            ["projects.id"],
            name="project_scopes_project_id_fkey",
            ondelete="CASCADE",
        ),
        sa.UniqueConstraint(
            "project_id",
            "scope",
            name="project_scopes_project_id_scope_key",
        ),
    )
    op.create_index("project_scopes_project_id_idx", "project_scopes", ["project_id"])


def downgrade() -> None:
    op.drop_index("project_scopes_project_id_idx", table_name="project_scopes")
    op.drop_table("project_scopes")
    op.drop_table("service_accounts")
    op.drop_table("projects")
