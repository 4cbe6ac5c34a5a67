from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=255)
    subdomain: str | None = Field(default=None, max_length=63)


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    tenant_id: str | None = None
    status: str
    assigned_roles: list[str]
    last_login_at: datetime | None = None


class TenantSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    subdomain: str
    status: str
    subscription_plan: str


class LoginResponse(BaseModel):
    token: str
    user: UserSummary
    tenant: TenantSummary | None = None


class SessionResponse(BaseModel):
    user: UserSummary
    tenant: TenantSummary | None = None
    permissions: list[str] | None = None


class RegisterRequest(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=6, max_length=255)


class RegisterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
