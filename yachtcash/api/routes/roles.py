from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.auth import (
    RequirePermissions,
    RequireTenantPermissions,
    TenantAccess,
    ensure_can_grant,
)
from yachtcash.core.authorization import Actor
from yachtcash.core.db import get_db_session
from yachtcash.core.errors import ForbiddenError
from yachtcash.core.permissions import (
    DEFAULT_PERMISSIONS,
    SUPER_ADMIN_ROLE,
    normalize_permissions,
    unknown_permissions,
)
from yachtcash.core.repositories.roles import RoleRepository
from yachtcash.schemas.admin import (
    PermissionResponse,
    RoleCreateRequest,
    RoleResponse,
    RoleUpdateRequest,
)

router = APIRouter(prefix="/tenant", tags=["roles"])


def _checked_permissions(actor: Actor, permissions: list[str]) -> list[str]:
    permissions = normalize_permissions(permissions)
    unknown = unknown_permissions(permissions)
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown permissions: {', '.join(unknown)}",
        )
    ensure_can_grant(actor, (), permissions)
    return permissions


@router.get("/roles", response_model=list[RoleResponse])
async def list_roles(
    access: TenantAccess = Depends(RequireTenantPermissions("roles.view")),
    session: AsyncSession = Depends(get_db_session),
) -> list[RoleResponse]:
    roles = await RoleRepository(session).list_for_tenant(access.tenant_id)
    return [RoleResponse.model_validate(role) for role in roles]


@router.post("/roles", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
async def create_role(
    payload: RoleCreateRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("roles.create")),
    session: AsyncSession = Depends(get_db_session),
) -> RoleResponse:
    permissions = _checked_permissions(access.actor, payload.permissions)

    roles = RoleRepository(session)
    if payload.name == SUPER_ADMIN_ROLE or await roles.visible_names([payload.name], access.tenant_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Role name is already taken",
        )

    role = await roles.create_custom(
        access.tenant_id,
        name=payload.name,
        display_name=payload.display_name,
        description=payload.description,
        permissions=permissions,
        is_active=True,
        sort_order=payload.sort_order,
    )
    await session.commit()
    return RoleResponse.model_validate(role)


@router.patch("/roles/{role_id}", response_model=RoleResponse)
async def update_role(
    role_id: str,
    payload: RoleUpdateRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("roles.edit")),
    session: AsyncSession = Depends(get_db_session),
) -> RoleResponse:
    roles = RoleRepository(session)
    role = await roles.get_visible(role_id, access.tenant_id)
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Role not found",
        )
    if role.is_system_role:
        raise ForbiddenError("Cannot edit system roles")

    values = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "permissions" in values:
        values["permissions"] = _checked_permissions(access.actor, values["permissions"])

    role = await roles.update(role, **values)
    await session.commit()
    return RoleResponse.model_validate(role)


@router.get("/permissions", response_model=list[PermissionResponse])
async def list_permissions(
    _: Actor = Depends(RequirePermissions("roles.view")),
) -> list[PermissionResponse]:
    return [
        PermissionResponse(name=name, description=description)
        for name, description in DEFAULT_PERMISSIONS.items()
    ]
