from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TenantStatus = Literal["active", "suspended", "trial"]


class TenantCreateRequest(BaseModel):
    subdomain: str = Field(min_length=1, max_length=63)
    name: str = Field(min_length=1, max_length=255)
    status: TenantStatus = "trial"
    subscription_plan: str = Field(default="basic", max_length=50)
    trial_ends_at: datetime | None = None


class TenantStatusUpdateRequest(BaseModel):
    status: TenantStatus


class TenantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    subdomain: str
    name: str
    status: str
    subscription_plan: str
    trial_ends_at: datetime | None = None
