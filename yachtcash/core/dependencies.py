from __future__ import annotations

from fastapi import Depends, Request

from yachtcash.core.config import settings
from yachtcash.core.context import RequestContext, get_request_context
from yachtcash.core.errors import TenantContextRequiredError


def get_tenant_context(request: Request) -> RequestContext:
    context = getattr(request.state, "tenant_context", None)
    if isinstance(context, RequestContext):
        return context
    return get_request_context()


def require_tenant_id(context: RequestContext = Depends(get_tenant_context)) -> str:
    if context.tenant_id is None:
        raise TenantContextRequiredError()
    return context.tenant_id


def legacy_tenant_id() -> str | None:
    """Demo tenant used by ungated endpoints when nothing else resolved."""
    return settings.legacy_tenant_id.strip() or None
