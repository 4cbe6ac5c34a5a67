from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from yachtcash.models.base import TenantScopedBase


class CashBalance(TenantScopedBase):
    __tablename__ = "cash_balances"
    __table_args__ = (
        UniqueConstraint("yacht_id", "currency_code", name="uq_cash_balances_yacht_currency"),
    )

    yacht_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    currency_code: Mapped[str] = mapped_column(String(3), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, default=Decimal("0"))
    updated_by_user_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
