from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.auth import RequireTenantPermissions, TenantAccess
from yachtcash.core.db import get_db_session
from yachtcash.core.repositories.transactions import TransactionFlagRepository, TransactionRepository
from yachtcash.core.repositories.yachts import YachtRepository
from yachtcash.schemas.transaction import (
    TransactionCreateRequest,
    TransactionFlagRequest,
    TransactionFlagResponse,
    TransactionResponse,
    TransactionUpdateRequest,
)

router = APIRouter(prefix="/tenant/transactions", tags=["transactions"])


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(
    yacht_id: str | None = None,
    status_filter: str | None = Query(default=None, alias="status"),
    limit: int = 100,
    offset: int = 0,
    access: TenantAccess = Depends(RequireTenantPermissions("transactions.view")),
    session: AsyncSession = Depends(get_db_session),
) -> list[TransactionResponse]:
    transactions = await TransactionRepository(session, access.tenant_id).list_filtered(
        yacht_id=yacht_id,
        status=status_filter.lower() if status_filter else None,
        limit=min(limit, 500),
        offset=max(offset, 0),
    )
    return [TransactionResponse.model_validate(item) for item in transactions]


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    payload: TransactionCreateRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("transactions.create")),
    session: AsyncSession = Depends(get_db_session),
) -> TransactionResponse:
    if await YachtRepository(session, access.tenant_id).get(payload.yacht_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Yacht not found",
        )

    transaction = await TransactionRepository(session, access.tenant_id).create(
        yacht_id=payload.yacht_id,
        created_by_user_id=access.actor.id,
        amount=payload.amount,
        currency_code=payload.currency_code.upper(),
        description=payload.description,
        status="pending",
        transaction_date=payload.transaction_date or datetime.now(timezone.utc),
    )
    await session.commit()
    return TransactionResponse.model_validate(transaction)


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: str,
    access: TenantAccess = Depends(RequireTenantPermissions("transactions.view")),
    session: AsyncSession = Depends(get_db_session),
) -> TransactionResponse:
    transaction = await TransactionRepository(session, access.tenant_id).get(transaction_id)
    if transaction is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )
    return TransactionResponse.model_validate(transaction)


@router.patch("/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    transaction_id: str,
    payload: TransactionUpdateRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("transactions.edit")),
    session: AsyncSession = Depends(get_db_session),
) -> TransactionResponse:
    values = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "currency_code" in values:
        values["currency_code"] = values["currency_code"].upper()

    transaction = await TransactionRepository(session, access.tenant_id).update(transaction_id, **values)
    if transaction is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )

    await session.commit()
    return TransactionResponse.model_validate(transaction)


@router.post(
    "/{transaction_id}/flag",
    response_model=TransactionFlagResponse,
    status_code=status.HTTP_201_CREATED,
)
async def flag_transaction(
    transaction_id: str,
    payload: TransactionFlagRequest,
    access: TenantAccess = Depends(RequireTenantPermissions("transactions.flag")),
    session: AsyncSession = Depends(get_db_session),
) -> TransactionFlagResponse:
    transactions = TransactionRepository(session, access.tenant_id)
    transaction = await transactions.get(transaction_id)
    if transaction is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )

    flag = await TransactionFlagRepository(session, access.tenant_id).create(
        transaction_id=transaction.id,
        flagged_by_user_id=access.actor.id,
        reason=payload.reason,
        status="open",
    )
    await transactions.update(transaction.id, status="flagged")
    await session.commit()
    return TransactionFlagResponse.model_validate(flag)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: str,
    access: TenantAccess = Depends(RequireTenantPermissions("transactions.delete")),
    session: AsyncSession = Depends(get_db_session),
) -> Response:
    deleted = await TransactionRepository(session, access.tenant_id).delete(transaction_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )

    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
