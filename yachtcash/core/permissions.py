from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Final

SUPER_ADMIN_ROLE: Final = "super-admin"

DEFAULT_PERMISSIONS: Final[dict[str, str]] = {
    "users.view": "View user accounts and profiles",
    "users.create": "Create new user accounts",
    "users.edit": "Edit existing user accounts",
    "users.delete": "Deactivate user accounts",
    "roles.view": "View roles and permissions",
    "roles.create": "Create new roles",
    "roles.edit": "Edit existing roles",
    "roles.delete": "Delete roles",
    "yachts.view": "View yacht information",
    "yachts.create": "Create new yacht records",
    "yachts.edit": "Edit yacht information",
    "yachts.delete": "Remove yacht records",
    "transactions.view": "View transactions",
    "transactions.create": "Create new transactions",
    "transactions.edit": "Edit existing transactions",
    "transactions.delete": "Delete transactions",
    "transactions.flag": "Flag transactions for review",
    "transactions.approve": "Approve flagged transactions",
    "cash.view": "View cash balances",
    "cash.manage": "Manage cash balances and limits",
    "reports.view": "View reports and analytics",
    "reports.export": "Export report data",
    "system.configure": "Configure system settings",
    "system.monitor": "Monitor system health and statistics",
}


@dataclass(frozen=True, slots=True)
class RoleDefinition:
    name: str
    display_name: str
    description: str
    permissions: tuple[str, ...]
    sort_order: int


DEFAULT_ROLES: Final[tuple[RoleDefinition, ...]] = (
    RoleDefinition(
        name=SUPER_ADMIN_ROLE,
        display_name="Super Administrator",
        description="Full system access with all permissions",
        permissions=tuple(DEFAULT_PERMISSIONS),
        sort_order=0,
    ),
    RoleDefinition(
        name="admin",
        display_name="Administrator",
        description="Administrative access to most system functions",
        permissions=(
            "users.view", "users.create", "users.edit",
            "roles.view", "roles.create", "roles.edit",
            "yachts.view", "yachts.create", "yachts.edit",
            "transactions.view", "transactions.edit", "transactions.flag", "transactions.approve",
            "cash.view", "cash.manage",
            "reports.view", "reports.export",
            "system.monitor",
        ),
        sort_order=1,
    ),
    RoleDefinition(
        name="manager",
        display_name="Yacht Manager",
        description="Management access for yacht operations and oversight",
        permissions=(
            "users.view",
            "yachts.view", "yachts.edit",
            "transactions.view", "transactions.edit", "transactions.flag",
            "cash.view",
            "reports.view",
        ),
        sort_order=2,
    ),
    RoleDefinition(
        name="captain",
        display_name="Captain",
        description="Operational access for yacht captains",
        permissions=("transactions.view", "transactions.create", "transactions.edit", "cash.view"),
        sort_order=3,
    ),
    RoleDefinition(
        name="crew",
        display_name="Crew Member",
        description="Limited access for crew members",
        permissions=("transactions.view", "transactions.create"),
        sort_order=4,
    ),
)


@dataclass(frozen=True, slots=True)
class AllPermissions:
    """Capability held by super admins: every permission, catalogued or not."""

    def allows_any(self, required: Iterable[str]) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class PermissionSet:
    permissions: frozenset[str] = field(default_factory=frozenset)

    def allows_any(self, required: Iterable[str]) -> bool:
        return not self.permissions.isdisjoint(required)


Capabilities = AllPermissions | PermissionSet

ALL_PERMISSIONS: Final = AllPermissions()


def normalize_permissions(permissions: Iterable[str]) -> list[str]:
    """Deduplicate while keeping first-seen order."""
    return list(dict.fromkeys(p.strip() for p in permissions if p and p.strip()))


def unknown_permissions(permissions: Iterable[str]) -> list[str]:
    return [permission for permission in permissions if permission not in DEFAULT_PERMISSIONS]


def effective_capabilities(
    assigned_roles: Iterable[str],
    role_permissions: Mapping[str, Iterable[str]],
    overrides: Iterable[str] = (),
) -> Capabilities:
    """Compute what an actor may do.

    ``role_permissions`` maps the names of the roles that exist and are active
    to their permission lists. Assigned role names without an entry contribute
    nothing. The super admin role always yields ``AllPermissions``.
    """
    roles = set(assigned_roles)
    if SUPER_ADMIN_ROLE in roles:
        return ALL_PERMISSIONS

    granted: set[str] = set(overrides)
    for role_name in roles:
        granted.update(role_permissions.get(role_name, ()))
    return PermissionSet(frozenset(granted))
