from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.auth import RequireTenantPermissions, TenantAccess
from yachtcash.core.db import get_db_session
from yachtcash.core.repositories.cash_balances import CashBalanceRepository
from yachtcash.core.repositories.roles import RoleRepository
from yachtcash.core.repositories.users import TenantUserRepository
from yachtcash.core.repositories.yachts import YachtCrewRepository, YachtRepository
from yachtcash.models.yacht import Yacht
from yachtcash.schemas.yacht import (
    CashBalanceResponse,
    CashBalanceUpdateRequest,
    CrewAssignmentRequest,
    CrewAssignmentResponse,
    YachtCreateRequest,
    YachtResponse,
    YachtUpdateRequest,
)

router = APIRouter(prefix="/tenant/yachts", tags=["yachts"])


async def _get_yacht_or_404(session: AsyncSession, tenant_id: str, yacht_id: str) -> Yacht:
    yacht = await YachtRepository(session, tenant_id).get(yacht_id)
    if yacht is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Yacht not found",
        )
    return yacht


@router.get("", response_model=list[YachtResponse])
async def list_yachts(
    limit: int = 100,
    offset: int = 0,
    access: TenantAccess = Depends(RequireTenantPermissions("yachts.view")),
    session: AsyncSession = Depends(get_db_session),
) -> list[YachtResponse]:
    yachts = await YachtRepository(session, access.tenant_id).list(
        limit=min(limit, 500), offset=max(offset, 0)
    )
    return [YachtResponse.model_validate(yacht) for yacht in yachts]


@router.post("", response_model=YachtResponse, status_code=status.HTTP_201_CREATED)
async def create_yacht(
    payload: YachtCreateRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("yachts.create")),
    session: AsyncSession = Depends(get_db_session),
) -> YachtResponse:
    yacht = await YachtRepository(session, access.tenant_id).create(
        name=payload.name,
        registration_number=payload.registration_number,
    )
    await session.commit()
    return YachtResponse.model_validate(yacht)


@router.get("/{yacht_id}", response_model=YachtResponse)
async def get_yacht(
    yacht_id: str,
    access: TenantAccess = Depends(RequireTenantPermissions("yachts.view")),
    session: AsyncSession = Depends(get_db_session),
) -> YachtResponse:
    yacht = await _get_yacht_or_404(session, access.tenant_id, yacht_id)
    return YachtResponse.model_validate(yacht)


@router.patch("/{yacht_id}", response_model=YachtResponse)
async def update_yacht(
    yacht_id: str,
    payload: YachtUpdateRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("yachts.edit")),
    session: AsyncSession = Depends(get_db_session),
) -> YachtResponse:
    yacht = await YachtRepository(session, access.tenant_id).update(
        yacht_id, **payload.model_dump(exclude_unset=True, exclude_none=True)
    )
    if yacht is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Yacht not found",
        )

    await session.commit()
    return YachtResponse.model_validate(yacht)


@router.get("/{yacht_id}/balances", response_model=list[CashBalanceResponse])
async def list_yacht_balances(
    yacht_id: str,
    access: TenantAccess = Depends(RequireTenantPermissions("cash.view")),
    session: AsyncSession = Depends(get_db_session),
) -> list[CashBalanceResponse]:
    await _get_yacht_or_404(session, access.tenant_id, yacht_id)
    balances = await CashBalanceRepository(session, access.tenant_id).list_for_yacht(yacht_id)
    return [CashBalanceResponse.model_validate(balance) for balance in balances]


@router.put("/{yacht_id}/balances/{currency_code}", response_model=CashBalanceResponse)
async def set_yacht_balance(
    yacht_id: str,
    currency_code: str,
    payload: CashBalanceUpdateRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("cash.manage")),
    session: AsyncSession = Depends(get_db_session),
) -> CashBalanceResponse:
    await _get_yacht_or_404(session, access.tenant_id, yacht_id)

    currency = currency_code.strip().upper()
    if len(currency) != 3 or not currency.isascii() or not currency.isalpha():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Currency code must have three letters",
        )

    repository = CashBalanceRepository(session, access.tenant_id)
    existing = await repository.get_for_yacht(yacht_id, currency)
    if existing is None:
        balance = await repository.create(
            yacht_id=yacht_id,
            currency_code=currency,
            amount=payload.amount,
            updated_by_user_id=access.actor.id,
        )
    else:
        balance = await repository.update(
            existing.id,
            amount=payload.amount,
            updated_by_user_id=access.actor.id,
        )
        if balance is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update cash balance",
            )

    await session.commit()
    return CashBalanceResponse.model_validate(balance)


@router.get("/{yacht_id}/crew", response_model=list[CrewAssignmentResponse])
async def list_yacht_crew(
    yacht_id: str,
    access: TenantAccess = Depends(RequireTenantPermissions("yachts.view")),
    session: AsyncSession = Depends(get_db_session),
) -> list[CrewAssignmentResponse]:
    await _get_yacht_or_404(session, access.tenant_id, yacht_id)
    assignments = await YachtCrewRepository(session, access.tenant_id).list_for_yacht(yacht_id)
    return [CrewAssignmentResponse.model_validate(item) for item in assignments]


@router.post(
    "/{yacht_id}/crew",
    response_model=CrewAssignmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def assign_crew_member(
    yacht_id: str,
    payload: CrewAssignmentRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("yachts.edit")),
    session: AsyncSession = Depends(get_db_session),
) -> CrewAssignmentResponse:
    await _get_yacht_or_404(session, access.tenant_id, yacht_id)

    if await TenantUserRepository(session, access.tenant_id).get(payload.user_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    if not await RoleRepository(session).visible_names([payload.role_name], access.tenant_id):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown role: {payload.role_name}",
        )

    crew = YachtCrewRepository(session, access.tenant_id)
    if await crew.find_assignment(yacht_id, payload.user_id) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User is already assigned to this yacht",
        )

    assignment = await crew.create(
        yacht_id=yacht_id,
        user_id=payload.user_id,
        role_name=payload.role_name,
        is_active=True,
        expires_at=payload.expires_at,
        assigned_by_user_id=access.actor.id,
    )
    await session.commit()
    return CrewAssignmentResponse.model_validate(assignment)
