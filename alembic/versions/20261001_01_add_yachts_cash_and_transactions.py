"""add yachts, cash balances, transactions and flags

Revision ID: 20261001_01
Revises: 20261001_00
Create Date: 2026-10-01 09:40:00

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261001_01"
down_revision = "20261001_00"
branch_labels = None
depends_on = None


def _scoped_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("tenant_id", sa.String(length=36), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "yachts",
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("registration_number", sa.String(length=80), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_scoped_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_yachts_tenant_id", "yachts", ["tenant_id"], unique=False)

    op.create_table(
        "cash_balances",
        sa.Column("yacht_id", sa.String(length=36), nullable=False),
        sa.Column("currency_code", sa.String(length=3), nullable=False),
        sa.Column("amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("updated_by_user_id", sa.String(length=36), nullable=True),
        *_scoped_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("yacht_id", "currency_code", name="uq_cash_balances_yacht_currency"),
    )
    op.create_index("ix_cash_balances_tenant_id", "cash_balances", ["tenant_id"], unique=False)
    op.create_index("ix_cash_balances_yacht_id", "cash_balances", ["yacht_id"], unique=False)

    op.create_table(
        "transactions",
        sa.Column("yacht_id", sa.String(length=36), nullable=False),
        sa.Column("created_by_user_id", sa.String(length=36), nullable=False),
        sa.Column("amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("currency_code", sa.String(length=3), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("transaction_date", sa.DateTime(timezone=True), nullable=False),
        *_scoped_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_transactions_tenant_id", "transactions", ["tenant_id"], unique=False)
    op.create_index("ix_transactions_yacht_id", "transactions", ["yacht_id"], unique=False)
    op.create_index(
        "ix_transactions_created_by_user_id", "transactions", ["created_by_user_id"], unique=False
    )
    op.create_index("ix_transactions_status", "transactions", ["status"], unique=False)

    op.create_table(
        "transaction_flags",
        sa.Column("transaction_id", sa.String(length=36), nullable=False),
        sa.Column("flagged_by_user_id", sa.String(length=36), nullable=False),
        sa.Column("reason", sa.String(length=500), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        *_scoped_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_transaction_flags_tenant_id", "transaction_flags", ["tenant_id"], unique=False)
    op.create_index(
        "ix_transaction_flags_transaction_id", "transaction_flags", ["transaction_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_transaction_flags_transaction_id", table_name="transaction_flags")
    op.drop_index("ix_transaction_flags_tenant_id", table_name="transaction_flags")
    op.drop_table("transaction_flags")

    op.drop_index("ix_transactions_status", table_name="transactions")
    op.drop_index("ix_transactions_created_by_user_id", table_name="transactions")
    op.drop_index("ix_transactions_yacht_id", table_name="transactions")
    op.drop_index("ix_transactions_tenant_id", table_name="transactions")
    op.drop_table("transactions")

    op.drop_index("ix_cash_balances_yacht_id", table_name="cash_balances")
    op.drop_index("ix_cash_balances_tenant_id", table_name="cash_balances")
    op.drop_table("cash_balances")

    op.drop_index("ix_yachts_tenant_id", table_name="yachts")
    op.drop_table("yachts")
