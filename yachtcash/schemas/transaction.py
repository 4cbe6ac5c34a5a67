from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class TransactionCreateRequest(BaseModel):
    yacht_id: str = Field(min_length=1, max_length=36)
    amount: Decimal = Field(gt=0)
    currency_code: str = Field(pattern=r"^[A-Za-z]{3}$")
    description: str = Field(min_length=1, max_length=500)
    transaction_date: datetime | None = None


class TransactionUpdateRequest(BaseModel):
    amount: Decimal | None = Field(default=None, gt=0)
    currency_code: str | None = Field(default=None, pattern=r"^[A-Za-z]{3}$")
    description: str | None = Field(default=None, min_length=1, max_length=500)
    transaction_date: datetime | None = None


class TransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    yacht_id: str
    created_by_user_id: str
    amount: Decimal
    currency_code: str
    description: str
    status: str
    transaction_date: datetime


class TransactionFlagRequest(BaseModel):
    reason: str = Field(min_length=1, max_length=500)


class TransactionFlagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    transaction_id: str
    flagged_by_user_id: str
    reason: str
    status: str
