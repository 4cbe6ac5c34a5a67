from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.authorization import Actor
from yachtcash.core.permissions import effective_capabilities
from yachtcash.core.repositories.base import TenantRepository
from yachtcash.core.repositories.roles import RoleRepository
from yachtcash.models.user import User


class UserRepository:
    """User lookups used by authentication. Not tenant scoped."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.roles = RoleRepository(session)

    async def get(self, user_id: str) -> User | None:
        return await self.session.scalar(select(User).where(User.id == user_id))

    async def find_by_email(self, email: str) -> User | None:
        return await self.session.scalar(
            select(User).where(User.email == email.strip().lower())
        )

    async def build_actor(self, user: User) -> Actor:
        assigned = list(user.assigned_roles or [])
        role_permissions = await self.roles.permissions_by_role(assigned, user.tenant_id)
        return Actor(
            id=user.id,
            email=user.email,
            tenant_id=user.tenant_id,
            roles=frozenset(assigned),
            status=user.status,
            capabilities=effective_capabilities(assigned, role_permissions, user.permissions or []),
        )

    async def find_actor_by_id(self, user_id: str) -> Actor | None:
        user = await self.get(user_id)
        if user is None:
            return None
        return await self.build_actor(user)

    async def touch_last_login(self, user: User) -> None:
        user.last_login_at = datetime.now(timezone.utc)
        await self.session.flush()


class TenantUserRepository(TenantRepository[User]):
    """Users belonging to one tenant, for account management."""

    def __init__(self, session: AsyncSession, tenant_id: str | None) -> None:
        super().__init__(session=session, model=User, tenant_id=tenant_id)

    async def list_filtered(
        self,
        *,
        status: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[User]:
        await self._apply_rls()
        stmt = self._scoped_select()
        if status:
            stmt = stmt.where(User.status == status)
        result = await self.session.execute(
            stmt.order_by(User.created_at.desc()).limit(limit).offset(offset)
        )
        return list(result.scalars().all())
