from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.auth import RequireTenantPermissions, TenantAccess, ensure_can_grant
from yachtcash.core.db import get_db_session
from yachtcash.core.permissions import normalize_permissions, unknown_permissions
from yachtcash.core.repositories.roles import RoleRepository
from yachtcash.core.repositories.users import TenantUserRepository, UserRepository
from yachtcash.core.security.passwords import hash_password
from yachtcash.models.user import User
from yachtcash.schemas.user import (
    PasswordResetRequest,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tenant/users", tags=["users"])


async def _check_grants(
    session: AsyncSession,
    access: TenantAccess,
    roles: list[str],
    permissions: list[str],
) -> None:
    unknown = unknown_permissions(permissions)
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown permissions: {', '.join(unknown)}",
        )

    ensure_can_grant(access.actor, roles, permissions)

    missing = set(roles) - await RoleRepository(session).visible_names(roles, access.tenant_id)
    if missing:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown roles: {', '.join(sorted(missing))}",
        )


async def _get_user_or_404(users: TenantUserRepository, user_id: str) -> User:
    user = await users.get(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


@router.get("", response_model=list[UserResponse])
async def list_users(
    status_filter: str | None = Query(default=None, alias="status"),
    limit: int = 100,
    offset: int = 0,
    access: TenantAccess = Depends(RequireTenantPermissions("users.view")),
    session: AsyncSession = Depends(get_db_session),
) -> list[UserResponse]:
    users = await TenantUserRepository(session, access.tenant_id).list_filtered(
        status=status_filter.lower() if status_filter else None,
        limit=min(limit, 500),
        offset=max(offset, 0),
    )
    return [UserResponse.model_validate(user) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    access: TenantAccess = Depends(RequireTenantPermissions("users.view")),
    session: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    user = await _get_user_or_404(TenantUserRepository(session, access.tenant_id), user_id)
    return UserResponse.model_validate(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreateRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("users.create")),
    session: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    email = payload.email.strip().lower()
    roles = normalize_permissions(payload.assigned_roles)
    permissions = normalize_permissions(payload.permissions)
    await _check_grants(session, access, roles, permissions)

    if await UserRepository(session).find_by_email(email) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists",
        )

    user = await TenantUserRepository(session, access.tenant_id).create(
        email=email,
        password_hash=hash_password(payload.password),
        status="active",
        assigned_roles=roles,
        permissions=permissions,
    )
    await session.commit()
    logger.info("User created user=%s tenant=%s by=%s", user.id, access.tenant_id, access.actor.id)
    return UserResponse.model_validate(user)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("users.edit")),
    session: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    users = TenantUserRepository(session, access.tenant_id)
    await _get_user_or_404(users, user_id)

    values = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "assigned_roles" in values:
        values["assigned_roles"] = normalize_permissions(values["assigned_roles"])
    if "permissions" in values:
        values["permissions"] = normalize_permissions(values["permissions"])
    await _check_grants(
        session,
        access,
        values.get("assigned_roles", []),
        values.get("permissions", []),
    )

    if user_id == access.actor.id and values.get("status", "active") != "active":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot deactivate your own account",
        )

    user = await users.update(user_id, **values)
    await session.commit()
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=UserResponse)
async def deactivate_user(
    user_id: str,
    access: TenantAccess = Depends(RequireTenantPermissions("users.delete")),
    session: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    if user_id == access.actor.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot deactivate your own account",
        )

    user = await TenantUserRepository(session, access.tenant_id).update(user_id, status="inactive")
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    await session.commit()
    logger.info("User deactivated user=%s by=%s", user_id, access.actor.id)
    return UserResponse.model_validate(user)


@router.post("/{user_id}/reset-password", status_code=status.HTTP_204_NO_CONTENT)
async def reset_password(
    user_id: str,
    payload: PasswordResetRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("users.edit")),
    session: AsyncSession = Depends(get_db_session),
) -> Response:
    user = await TenantUserRepository(session, access.tenant_id).update(
        user_id, password_hash=hash_password(payload.new_password)
    )
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
