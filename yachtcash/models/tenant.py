from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from yachtcash.models.base import TimestampedBase


class Tenant(TimestampedBase):
    __tablename__ = "tenants"

    subdomain: Mapped[str] = mapped_column(String(63), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="trial", index=True)
    subscription_plan: Mapped[str] = mapped_column(String(50), nullable=False, default="basic")
    trial_ends_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
