from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class YachtCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    registration_number: str | None = Field(default=None, max_length=80)


class YachtResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    registration_number: str | None = None
    is_active: bool


class CashBalanceUpdateRequest(BaseModel):
    amount: Decimal = Field(ge=0)


class CashBalanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    yacht_id: str
    currency_code: str
    amount: Decimal


class CashSummaryResponse(BaseModel):
    totals: dict[str, Decimal]


class YachtUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    registration_number: str | None = Field(default=None, max_length=80)
    is_active: bool | None = None


class CrewAssignmentRequest(BaseModel):
    user_id: str = Field(min_length=1, max_length=36)
    role_name: str = Field(min_length=1, max_length=80)
    expires_at: datetime | None = None


class CrewAssignmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    yacht_id: str
    user_id: str
    role_name: str
    is_active: bool
    expires_at: datetime | None = None
    assigned_by_user_id: str
