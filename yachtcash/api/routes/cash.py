from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.auth import RequireTenantPermissions, TenantAccess
from yachtcash.core.db import get_db_session
from yachtcash.core.repositories.cash_balances import CashBalanceRepository, totals_by_currency
from yachtcash.schemas.yacht import CashSummaryResponse

router = APIRouter(prefix="/tenant/cash", tags=["cash"])


@router.get("/summary", response_model=CashSummaryResponse)
async def cash_summary(
    access: TenantAccess = Depends(RequireTenantPermissions("cash.view")),
    session: AsyncSession = Depends(get_db_session),
) -> CashSummaryResponse:
    balances = await CashBalanceRepository(session, access.tenant_id).list_all()
    return CashSummaryResponse(totals=totals_by_currency(balances))
