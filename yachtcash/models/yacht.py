from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from yachtcash.models.base import TenantScopedBase


class Yacht(TenantScopedBase):
    __tablename__ = "yachts"

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    registration_number: Mapped[str | None] = mapped_column(String(80), nullable=True)
    is_active: Mapped[bool] = mapped_column(nullable=False, default=True)
