from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UserStatus = Literal["active", "inactive", "suspended"]


class UserCreateRequest(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=6, max_length=255)
    assigned_roles: list[str] = Field(min_length=1)
    permissions: list[str] = Field(default_factory=list)


class UserUpdateRequest(BaseModel):
    assigned_roles: list[str] | None = Field(default=None, min_length=1)
    permissions: list[str] | None = None
    status: UserStatus | None = None


class PasswordResetRequest(BaseModel):
    new_password: str = Field(min_length=6, max_length=255)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    tenant_id: str | None = None
    status: str
    assigned_roles: list[str]
    permissions: list[str]
    last_login_at: datetime | None = None
