from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request
from starlette.responses import Response

from yachtcash.core.config import settings
from yachtcash.core.context import reset_request_context, set_request_context
from yachtcash.core.db import AsyncSessionLocal
from yachtcash.core.repositories.tenants import TenantDirectory
from yachtcash.core.tenancy import TenantRecord, resolve_tenant

logger = logging.getLogger(__name__)


async def find_tenant_by_subdomain(subdomain: str) -> TenantRecord | None:
    async with AsyncSessionLocal() as session:
        return await TenantDirectory(session).find_by_subdomain(subdomain)


async def tenant_context_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    context = await resolve_tenant(
        path=request.url.path,
        headers=request.headers,
        host=request.headers.get("host"),
        find_tenant_by_subdomain=find_tenant_by_subdomain,
        policy=settings.tenant_resolution_policy(),
    )
    logger.debug(
        "Tenant context path=%s tenant=%s source=%s skipped=%s",
        request.url.path,
        context.tenant_id,
        context.source,
        context.skipped,
    )

    request.state.tenant_context = context
    token = set_request_context(context)
    try:
        return await call_next(request)
    finally:
        reset_request_context(token)
