from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from yachtcash.models.base import TenantScopedBase


class YachtCrewAssignment(TenantScopedBase):
    __tablename__ = "yacht_crew_assignments"
    __table_args__ = (
        UniqueConstraint("yacht_id", "user_id", name="uq_yacht_crew_assignments_yacht_user"),
    )

    yacht_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    role_name: Mapped[str] = mapped_column(String(80), nullable=False)
    is_active: Mapped[bool] = mapped_column(nullable=False, default=True)
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    assigned_by_user_id: Mapped[str] = mapped_column(String(36), nullable=False)
