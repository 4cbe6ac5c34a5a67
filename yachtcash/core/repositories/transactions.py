from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.repositories.base import TenantRepository
from yachtcash.models.transaction import Transaction
from yachtcash.models.transaction_flag import TransactionFlag


class TransactionRepository(TenantRepository[Transaction]):
    def __init__(self, session: AsyncSession, tenant_id: str | None) -> None:
        super().__init__(session=session, model=Transaction, tenant_id=tenant_id)

    async def list_filtered(
        self,
        *,
        yacht_id: str | None = None,
        status: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Transaction]:
        await self._apply_rls()
        stmt = self._scoped_select()
        if yacht_id:
            stmt = stmt.where(Transaction.yacht_id == yacht_id)
        if status:
            stmt = stmt.where(Transaction.status == status)
        result = await self.session.execute(
            stmt.order_by(Transaction.transaction_date.desc()).limit(limit).offset(offset)
        )
        return list(result.scalars().all())


class TransactionFlagRepository(TenantRepository[TransactionFlag]):
    def __init__(self, session: AsyncSession, tenant_id: str | None) -> None:
        super().__init__(session=session, model=TransactionFlag, tenant_id=tenant_id)
