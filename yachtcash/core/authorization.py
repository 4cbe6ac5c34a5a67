"""Permission checks for authenticated actors.

An authorization attempt runs through fixed gates, each of which may end it
with a denial: authenticated, account active, super admin bypass, permission
membership. Any one of the required permissions is sufficient.
"""
from __future__ import annotations

import enum
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass

from yachtcash.core.errors import (
    AccountInactiveError,
    ForbiddenError,
    UnauthenticatedError,
    YachtCashError,
)
from yachtcash.core.permissions import AllPermissions, Capabilities, PermissionSet

logger = logging.getLogger(__name__)

ACTIVE_STATUS = "active"


@dataclass(frozen=True, slots=True)
class ActorClaim:
    """Identity carried by a verified bearer token."""

    actor_id: str
    email: str | None = None
    tenant_id: str | None = None


@dataclass(frozen=True, slots=True)
class Actor:
    id: str
    email: str
    tenant_id: str | None
    roles: frozenset[str]
    status: str
    capabilities: Capabilities = PermissionSet()

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS

    @property
    def is_super_admin(self) -> bool:
        return isinstance(self.capabilities, AllPermissions)


class DenyReason(str, enum.Enum):
    UNAUTHENTICATED = "unauthenticated"
    INACTIVE = "inactive"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True, slots=True)
class Allow:
    bypass: bool = False


@dataclass(frozen=True, slots=True)
class Deny:
    reason: DenyReason


Decision = Allow | Deny

FindActorById = Callable[[str], Awaitable[Actor | None]]

_DENY_ERRORS: dict[DenyReason, type[YachtCashError]] = {
    DenyReason.UNAUTHENTICATED: UnauthenticatedError,
    DenyReason.INACTIVE: AccountInactiveError,
    DenyReason.FORBIDDEN: ForbiddenError,
}


def check_identity(actor: Actor | None) -> Actor | Deny:
    """Return the actor if it may act at all, otherwise the denial."""
    if actor is None:
        return Deny(DenyReason.UNAUTHENTICATED)
    if not actor.is_active:
        return Deny(DenyReason.INACTIVE)
    return actor


def authorize(actor: Actor | None, required: Iterable[str]) -> Decision:
    identity = check_identity(actor)
    if isinstance(identity, Deny):
        return identity
    if isinstance(identity.capabilities, AllPermissions):
        return Allow(bypass=True)
    if identity.capabilities.allows_any(required):
        return Allow()
    return Deny(DenyReason.FORBIDDEN)


def error_for(reason: DenyReason) -> YachtCashError:
    return _DENY_ERRORS[reason]()


async def load_actor(claim: ActorClaim | None, find_actor_by_id: FindActorById) -> Actor | None:
    """Re-fetch the live actor for ``claim``; the token snapshot is not trusted."""
    if claim is None:
        return None
    return await find_actor_by_id(claim.actor_id)


def _deny(claim: ActorClaim | None, decision: Deny) -> YachtCashError:
    logger.info(
        "Authorization denied actor=%s reason=%s",
        claim.actor_id if claim else None,
        decision.reason.value,
    )
    return error_for(decision.reason)


async def authenticate_request(claim: ActorClaim | None, find_actor_by_id: FindActorById) -> Actor:
    """Require a live, active actor without checking any permission."""
    identity = check_identity(await load_actor(claim, find_actor_by_id))
    if isinstance(identity, Deny):
        raise _deny(claim, identity)
    return identity


async def authorize_request(
    claim: ActorClaim | None,
    required: Iterable[str],
    find_actor_by_id: FindActorById,
) -> Actor:
    actor = await authenticate_request(claim, find_actor_by_id)
    decision = authorize(actor, frozenset(required))
    if isinstance(decision, Deny):
        raise _deny(claim, decision)
    return actor
