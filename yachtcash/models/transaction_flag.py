from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from yachtcash.models.base import TenantScopedBase


class TransactionFlag(TenantScopedBase):
    __tablename__ = "transaction_flags"

    transaction_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    flagged_by_user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    reason: Mapped[str] = mapped_column(String(500), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="open")
