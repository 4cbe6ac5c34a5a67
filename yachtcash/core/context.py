from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass
from typing import Final, Literal

TenantSource = Literal["header", "subdomain"]


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Tenant context resolved once per inbound request.

    ``skipped`` is set for tenant-independent paths, where resolution never ran
    and ``tenant_id`` stays unset.
    """

    tenant_id: str | None = None
    source: TenantSource | None = None
    skipped: bool = False


EMPTY_CONTEXT: Final = RequestContext()

_CURRENT_CONTEXT: Final[ContextVar[RequestContext]] = ContextVar(
    "current_request_context",
    default=EMPTY_CONTEXT,
)


def set_request_context(context: RequestContext) -> object:
    return _CURRENT_CONTEXT.set(context)


def get_request_context() -> RequestContext:
    return _CURRENT_CONTEXT.get()


def reset_request_context(token: object) -> None:
    _CURRENT_CONTEXT.reset(token)
