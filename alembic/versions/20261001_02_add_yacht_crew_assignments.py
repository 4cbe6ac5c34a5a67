"""add yacht crew assignments

Revision ID: 20261001_02
Revises: 20261001_01
Create Date: 2026-10-01 10:05:00

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261001_02"
down_revision = "20261001_01"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "yacht_crew_assignments",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("tenant_id", sa.String(length=36), nullable=False),
        sa.Column("yacht_id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("role_name", sa.String(length=80), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("assigned_by_user_id", sa.String(length=36), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("yacht_id", "user_id", name="uq_yacht_crew_assignments_yacht_user"),
    )
    op.create_index(
        "ix_yacht_crew_assignments_tenant_id", "yacht_crew_assignments", ["tenant_id"], unique=False
    )
    op.create_index(
        "ix_yacht_crew_assignments_yacht_id", "yacht_crew_assignments", ["yacht_id"], unique=False
    )
    op.create_index(
        "ix_yacht_crew_assignments_user_id", "yacht_crew_assignments", ["user_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_yacht_crew_assignments_user_id", table_name="yacht_crew_assignments")
    op.drop_index("ix_yacht_crew_assignments_yacht_id", table_name="yacht_crew_assignments")
    op.drop_index("ix_yacht_crew_assignments_tenant_id", table_name="yacht_crew_assignments")
    op.drop_table("yacht_crew_assignments")
