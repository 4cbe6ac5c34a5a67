from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.repositories.base import TenantRepository
from yachtcash.models.cash_balance import CashBalance


def totals_by_currency(balances: Iterable[CashBalance]) -> dict[str, Decimal]:
    totals: dict[str, Decimal] = {}
    for balance in balances:
        totals[balance.currency_code] = totals.get(balance.currency_code, Decimal("0")) + balance.amount
    return dict(sorted(totals.items()))


class CashBalanceRepository(TenantRepository[CashBalance]):
    def __init__(self, session: AsyncSession, tenant_id: str | None) -> None:
        super().__init__(session=session, model=CashBalance, tenant_id=tenant_id)

    async def list_for_yacht(self, yacht_id: str) -> list[CashBalance]:
        await self._apply_rls()
        result = await self.session.execute(
            self._scoped_select()
            .where(CashBalance.yacht_id == yacht_id)
            .order_by(CashBalance.currency_code)
        )
        return list(result.scalars().all())

    async def list_all(self) -> list[CashBalance]:
        await self._apply_rls()
        result = await self.session.execute(self._scoped_select())
        return list(result.scalars().all())

    async def get_for_yacht(self, yacht_id: str, currency_code: str) -> CashBalance | None:
        await self._apply_rls()
        result = await self.session.execute(
            self._scoped_select()
            .where(CashBalance.yacht_id == yacht_id)
            .where(CashBalance.currency_code == currency_code)
        )
        return result.scalar_one_or_none()
