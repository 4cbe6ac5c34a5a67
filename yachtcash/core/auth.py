import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from yachtcash.core.authorization import (
    Actor,
    ActorClaim,
    authenticate_request,
    authorize_request,
)
from yachtcash.core.config import settings
from yachtcash.core.context import RequestContext
from yachtcash.core.db import get_db_session
from yachtcash.core.dependencies import get_tenant_context, legacy_tenant_id, require_tenant_id
from yachtcash.core.errors import ForbiddenError
from yachtcash.core.permissions import SUPER_ADMIN_ROLE
from yachtcash.core.repositories.users import UserRepository
from yachtcash.models.user import User

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def issue_access_token(user: User, *, now: int | None = None) -> str:
    issued_at = int(now if now is not None else time.time())
    claims = {
        "sub": user.id,
        "email": user.email,
        "roles": list(user.assigned_roles or []),
        "tenant_id": user.tenant_id,
        "iat": issued_at,
        "exp": issued_at + settings.jwt_expires_seconds,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def _decode_access_token(token: str) -> dict:
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def claim_from_token(token: str) -> ActorClaim | None:
    try:
        claims = _decode_access_token(token)
    except JWTError:
        logger.debug("Rejected bearer token", exc_info=True)
        return None

    subject = claims.get("sub")
    if not subject:
        return None
    return ActorClaim(
        actor_id=str(subject),
        email=claims.get("email"),
        tenant_id=claims.get("tenant_id"),
    )


async def get_actor_claim(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ActorClaim | None:
    if credentials is None or not credentials.credentials:
        return None
    return claim_from_token(credentials.credentials)


async def require_actor(
    request: Request,
    claim: ActorClaim | None = Depends(get_actor_claim),
    session: AsyncSession = Depends(get_db_session),
) -> Actor:
    actor = await authenticate_request(claim, UserRepository(session).find_actor_by_id)
    request.state.actor = actor
    return actor


async def require_super_admin(actor: Actor = Depends(require_actor)) -> Actor:
    if not actor.is_super_admin:
        logger.info("Super admin access denied actor=%s", actor.id)
        raise ForbiddenError()
    return actor


class RequirePermissions:
    """Route dependency allowing actors that hold any one of ``permissions``."""

    def __init__(self, *permissions: str) -> None:
        self.permissions = frozenset(permissions)

    async def __call__(
        self,
        request: Request,
        claim: ActorClaim | None = Depends(get_actor_claim),
        session: AsyncSession = Depends(get_db_session),
    ) -> Actor:
        actor = await authorize_request(
            claim,
            self.permissions,
            UserRepository(session).find_actor_by_id,
        )
        request.state.actor = actor
        return actor


@dataclass(frozen=True, slots=True)
class TenantAccess:
    actor: Actor
    tenant_id: str


def ensure_tenant_member(actor: Actor, tenant_id: str) -> None:
    """Refuse actors acting outside their tenant.

    Super admins are not bound. Actors without a tenant are bound to the
    legacy tenant, and to nothing when none is configured.
    """
    if actor.is_super_admin:
        return
    home_tenant_id = actor.tenant_id or legacy_tenant_id()
    if home_tenant_id is None or home_tenant_id != tenant_id:
        logger.info("Cross-tenant access denied actor=%s tenant=%s", actor.id, tenant_id)
        raise ForbiddenError()


class RequireTenantPermissions(RequirePermissions):
    """Permission gate for routes that operate on one tenant's data."""

    async def __call__(
        self,
        request: Request,
        claim: ActorClaim | None = Depends(get_actor_claim),
        session: AsyncSession = Depends(get_db_session),
        context: RequestContext = Depends(get_tenant_context),
    ) -> TenantAccess:
        actor = await super().__call__(request, claim, session)
        tenant_id = require_tenant_id(context)
        ensure_tenant_member(actor, tenant_id)
        return TenantAccess(actor=actor, tenant_id=tenant_id)


def ensure_can_grant(actor: Actor, roles: Iterable[str], permissions: Iterable[str]) -> None:
    """Refuse handing out the super admin role, or permissions the actor lacks.

    Super admins may grant anything.
    """
    if actor.is_super_admin:
        return
    if SUPER_ADMIN_ROLE in set(roles):
        logger.info("Super admin grant denied actor=%s", actor.id)
        raise ForbiddenError()
    for permission in permissions:
        if not actor.capabilities.allows_any((permission,)):
            logger.info("Permission grant denied actor=%s", actor.id)
            raise ForbiddenError()
