from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InitializeResponse(BaseModel):
    roles_created: int


class SystemStatsResponse(BaseModel):
    total_tenants: int
    total_users: int
    active_users: int
    total_transactions: int
    flagged_transactions: int


class RoleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str | None = None
    name: str
    display_name: str
    description: str
    permissions: list[str]
    is_system_role: bool
    is_active: bool


class PermissionResponse(BaseModel):
    name: str
    description: str


class RoleCreateRequest(BaseModel):
    name: str = Field(pattern=r"^[a-z0-9][a-z0-9_-]*$", max_length=80)
    display_name: str = Field(min_length=1, max_length=120)
    description: str = Field(default="", max_length=500)
    permissions: list[str] = Field(default_factory=list)
    sort_order: int = 100


class RoleUpdateRequest(BaseModel):
    display_name: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = Field(default=None, max_length=500)
    permissions: list[str] | None = None
    is_active: bool | None = None
    sort_order: int | None = None
