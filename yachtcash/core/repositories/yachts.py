from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.repositories.base import TenantRepository
from yachtcash.models.yacht import Yacht
from yachtcash.models.yacht_crew import YachtCrewAssignment


class YachtRepository(TenantRepository[Yacht]):
    def __init__(self, session: AsyncSession, tenant_id: str | None) -> None:
        super().__init__(session=session, model=Yacht, tenant_id=tenant_id)


class YachtCrewRepository(TenantRepository[YachtCrewAssignment]):
    def __init__(self, session: AsyncSession, tenant_id: str | None) -> None:
        super().__init__(session=session, model=YachtCrewAssignment, tenant_id=tenant_id)

    async def list_for_yacht(self, yacht_id: str) -> list[YachtCrewAssignment]:
        await self._apply_rls()
        result = await self.session.execute(
            self._scoped_select()
            .where(YachtCrewAssignment.yacht_id == yacht_id)
            .order_by(YachtCrewAssignment.created_at)
        )
        return list(result.scalars().all())

    async def find_assignment(self, yacht_id: str, user_id: str) -> YachtCrewAssignment | None:
        await self._apply_rls()
        result = await self.session.execute(
            self._scoped_select()
            .where(YachtCrewAssignment.yacht_id == yacht_id)
            .where(YachtCrewAssignment.user_id == user_id)
        )
        return result.scalar_one_or_none()
