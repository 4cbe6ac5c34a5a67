from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.auth import RequirePermissions, require_super_admin
from yachtcash.core.authorization import Actor
from yachtcash.core.config import settings
from yachtcash.core.db import get_db_session
from yachtcash.core.repositories.roles import RoleRepository
from yachtcash.core.repositories.tenants import TenantDirectory
from yachtcash.core.tenancy import is_valid_subdomain
from yachtcash.models.tenant import Tenant
from yachtcash.models.transaction import Transaction
from yachtcash.models.user import User
from yachtcash.schemas.admin import InitializeResponse, SystemStatsResponse
from yachtcash.schemas.tenant import TenantCreateRequest, TenantResponse, TenantStatusUpdateRequest

router = APIRouter(
    prefix="/super-admin",
    tags=["super-admin"],
    dependencies=[Depends(require_super_admin)],
)


@router.get("/tenants", response_model=list[TenantResponse])
async def list_tenants(
    limit: int = 100,
    offset: int = 0,
    _: Actor = Depends(RequirePermissions("system.configure")),
    session: AsyncSession = Depends(get_db_session),
) -> list[TenantResponse]:
    tenants = await TenantDirectory(session).list(limit=min(limit, 500), offset=max(offset, 0))
    return [TenantResponse.model_validate(tenant) for tenant in tenants]


@router.post("/tenants", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
async def create_tenant(
    payload: TenantCreateRequest,
    _: Actor = Depends(RequirePermissions("system.configure")),
    session: AsyncSession = Depends(get_db_session),
) -> TenantResponse:
    subdomain = payload.subdomain.strip().lower()
    if not is_valid_subdomain(subdomain) or subdomain in settings.reserved_subdomains():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Subdomain must be a valid, unreserved DNS label",
        )

    directory = TenantDirectory(session)
    if await directory.find_by_subdomain(subdomain) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Subdomain is already taken",
        )

    tenant = await directory.create(
        subdomain=subdomain,
        name=payload.name,
        status=payload.status,
        subscription_plan=payload.subscription_plan,
        trial_ends_at=payload.trial_ends_at,
    )
    await session.commit()
    return TenantResponse.model_validate(tenant)


@router.patch("/tenants/{tenant_id}/status", response_model=TenantResponse)
async def update_tenant_status(
    tenant_id: str,
    payload: TenantStatusUpdateRequest,
    _: Actor = Depends(RequirePermissions("system.configure")),
    session: AsyncSession = Depends(get_db_session),
) -> TenantResponse:
    tenant = await TenantDirectory(session).set_status(tenant_id, payload.status)
    if tenant is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tenant not found",
        )

    await session.commit()
    return TenantResponse.model_validate(tenant)


@router.post("/initialize", response_model=InitializeResponse)
async def initialize_system(
    _: Actor = Depends(RequirePermissions("system.configure")),
    session: AsyncSession = Depends(get_db_session),
) -> InitializeResponse:
    created = await RoleRepository(session).seed_system_roles()
    await session.commit()
    return InitializeResponse(roles_created=created)


@router.get("/stats", response_model=SystemStatsResponse)
async def system_stats(
    _: Actor = Depends(RequirePermissions("system.monitor")),
    session: AsyncSession = Depends(get_db_session),
) -> SystemStatsResponse:
    total_tenants = await session.scalar(select(func.count(Tenant.id)))
    total_users = await session.scalar(select(func.count(User.id)))
    active_users = await session.scalar(
        select(func.count(User.id)).where(User.status == "active")
    )
    total_transactions = await session.scalar(select(func.count(Transaction.id)))
    flagged_transactions = await session.scalar(
        select(func.count(Transaction.id)).where(Transaction.status == "flagged")
    )
    return SystemStatsResponse(
        total_tenants=int(total_tenants or 0),
        total_users=int(total_users or 0),
        active_users=int(active_users or 0),
        total_transactions=int(total_transactions or 0),
        flagged_transactions=int(flagged_transactions or 0),
    )
