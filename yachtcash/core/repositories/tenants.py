from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.models.tenant import Tenant


class TenantDirectory:
    """Platform-wide tenant lookups. Not scoped to any tenant."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_subdomain(self, subdomain: str) -> Tenant | None:
        return await self.session.scalar(
            select(Tenant).where(Tenant.subdomain == subdomain.lower())
        )

    async def get(self, tenant_id: str) -> Tenant | None:
        return await self.session.scalar(select(Tenant).where(Tenant.id == tenant_id))

    async def list(self, *, limit: int = 100, offset: int = 0) -> list[Tenant]:
        result = await self.session.scalars(
            select(Tenant).order_by(Tenant.created_at).limit(limit).offset(offset)
        )
        return list(result.all())

    async def create(self, **values: object) -> Tenant:
        tenant = Tenant(**values)
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def set_status(self, tenant_id: str, status: str) -> Tenant | None:
        tenant = await self.get(tenant_id)
        if tenant is None:
            return None
        tenant.status = status
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant
