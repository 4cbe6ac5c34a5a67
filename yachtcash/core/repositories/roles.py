from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import ColumnElement, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.permissions import DEFAULT_ROLES, normalize_permissions
from yachtcash.models.role import Role


class RoleRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _visible_to(tenant_id: str | None) -> ColumnElement[bool]:
        if tenant_id is None:
            return Role.tenant_id.is_(None)
        return or_(Role.tenant_id.is_(None), Role.tenant_id == tenant_id)

    async def list_for_tenant(self, tenant_id: str | None) -> list[Role]:
        result = await self.session.scalars(
            select(Role)
            .where(self._visible_to(tenant_id))
            .order_by(Role.is_system_role.desc(), Role.sort_order, Role.name)
        )
        return list(result.all())

    async def get_visible(self, role_id: str, tenant_id: str | None) -> Role | None:
        return await self.session.scalar(
            select(Role).where(Role.id == role_id).where(self._visible_to(tenant_id))
        )

    async def visible_names(self, role_names: Iterable[str], tenant_id: str | None) -> set[str]:
        names = list(role_names)
        if not names:
            return set()
        result = await self.session.scalars(
            select(Role.name).where(Role.name.in_(names)).where(self._visible_to(tenant_id))
        )
        return set(result.all())

    async def create_custom(self, tenant_id: str, **values: object) -> Role:
        role = Role(**values, tenant_id=tenant_id, is_system_role=False)
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def update(self, role: Role, **values: object) -> Role:
        for field, value in values.items():
            if field in {"id", "tenant_id", "name", "is_system_role"}:
                continue
            setattr(role, field, value)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def permissions_by_role(
        self, role_names: Iterable[str], tenant_id: str | None
    ) -> dict[str, list[str]]:
        names = list(role_names)
        if not names:
            return {}

        result = await self.session.scalars(
            select(Role)
            .where(Role.name.in_(names))
            .where(Role.is_active.is_(True))
            .where(self._visible_to(tenant_id))
        )
        mapping: dict[str, list[str]] = {}
        for role in result.all():
            merged = mapping.get(role.name, [])
            mapping[role.name] = normalize_permissions([*merged, *(role.permissions or [])])
        return mapping

    async def seed_system_roles(self) -> int:
        existing = set(
            (
                await self.session.scalars(
                    select(Role.name).where(Role.tenant_id.is_(None))
                )
            ).all()
        )
        created = 0
        for definition in DEFAULT_ROLES:
            if definition.name in existing:
                continue
            self.session.add(
                Role(
                    tenant_id=None,
                    name=definition.name,
                    display_name=definition.display_name,
                    description=definition.description,
                    permissions=normalize_permissions(definition.permissions),
                    is_system_role=True,
                    is_active=True,
                    sort_order=definition.sort_order,
                )
            )
            created += 1

        if created:
            await self.session.flush()
        return created
