from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.auth import issue_access_token, require_actor
from yachtcash.core.authorization import Actor
from yachtcash.core.config import settings
from yachtcash.core.context import RequestContext
from yachtcash.core.db import get_db_session
from yachtcash.core.dependencies import get_tenant_context, legacy_tenant_id, require_tenant_id
from yachtcash.core.errors import AccountInactiveError, ForbiddenError, UnauthenticatedError
from yachtcash.core.permissions import DEFAULT_PERMISSIONS, PermissionSet
from yachtcash.core.repositories.tenants import TenantDirectory
from yachtcash.core.repositories.users import TenantUserRepository, UserRepository
from yachtcash.core.security.passwords import hash_password, verify_password
from yachtcash.models.tenant import Tenant
from yachtcash.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    SessionResponse,
    TenantSummary,
    UserSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tenant/auth", tags=["auth"])

_INVALID_LOGIN = "Invalid email or password"


async def _login_tenant_id(
    context: RequestContext, payload: LoginRequest, directory: TenantDirectory
) -> str | None:
    if context.tenant_id is not None:
        return context.tenant_id
    if payload.subdomain:
        tenant = await directory.find_by_subdomain(payload.subdomain.strip().lower())
        if tenant is None:
            raise UnauthenticatedError(_INVALID_LOGIN)
        return tenant.id
    return legacy_tenant_id()


def _tenant_summary(tenant: Tenant | None) -> TenantSummary | None:
    return TenantSummary.model_validate(tenant) if tenant is not None else None


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    context: RequestContext = Depends(get_tenant_context),
    session: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    directory = TenantDirectory(session)
    users = UserRepository(session)

    target_tenant_id = await _login_tenant_id(context, payload, directory)
    user = await users.find_by_email(payload.email)
    if user is None or not verify_password(payload.password, user.password_hash):
        raise UnauthenticatedError(_INVALID_LOGIN)

    if user.tenant_id is not None and target_tenant_id is not None and user.tenant_id != target_tenant_id:
        logger.info("Login rejected for user=%s outside tenant=%s", user.id, target_tenant_id)
        raise UnauthenticatedError(_INVALID_LOGIN)

    if user.status != "active":
        raise AccountInactiveError("Account is not active")

    tenant = await directory.get(user.tenant_id) if user.tenant_id else None
    if tenant is not None and tenant.status == "suspended":
        raise AccountInactiveError("Tenant account is suspended")

    await users.touch_last_login(user)
    await session.commit()

    return LoginResponse(
        token=issue_access_token(user),
        user=UserSummary.model_validate(user),
        tenant=_tenant_summary(tenant),
    )


async def _session_response(actor: Actor, session: AsyncSession) -> SessionResponse:
    user = await UserRepository(session).get(actor.id)
    if user is None:
        raise UnauthenticatedError()

    tenant = await TenantDirectory(session).get(user.tenant_id) if user.tenant_id else None
    if isinstance(actor.capabilities, PermissionSet):
        permissions = sorted(actor.capabilities.permissions)
    else:
        permissions = list(DEFAULT_PERMISSIONS)

    return SessionResponse(
        user=UserSummary.model_validate(user),
        tenant=_tenant_summary(tenant),
        permissions=permissions,
    )


@router.post("/verify", response_model=SessionResponse)
async def verify(
    actor: Actor = Depends(require_actor),
    session: AsyncSession = Depends(get_db_session),
) -> SessionResponse:
    return await _session_response(actor, session)


@router.get("/me", response_model=SessionResponse)
async def me(
    actor: Actor = Depends(require_actor),
    session: AsyncSession = Depends(get_db_session),
) -> SessionResponse:
    return await _session_response(actor, session)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    tenant_id: str = Depends(require_tenant_id),
    session: AsyncSession = Depends(get_db_session),
) -> RegisterResponse:
    if not settings.allow_self_registration:
        raise ForbiddenError("Self registration is disabled")

    email = payload.email.strip().lower()
    if await UserRepository(session).find_by_email(email) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists",
        )

    user = await TenantUserRepository(session, tenant_id).create(
        email=email,
        password_hash=hash_password(payload.password),
        status="active",
        assigned_roles=[settings.self_registration_role],
        permissions=[],
    )
    await session.commit()
    logger.info("User registered user=%s tenant=%s", user.id, tenant_id)
    return RegisterResponse.model_validate(user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(_: Actor = Depends(require_actor)) -> Response:
    # Tokens are stateless; the client discards its copy.
    return Response(status_code=status.HTTP_204_NO_CONTENT)
