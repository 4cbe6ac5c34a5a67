"""Tenant resolution for inbound requests.

Resolution is transport level: it only looks at the request path, its headers
and its host. The request body and the authenticated user's stored tenant are
never consulted here.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Protocol

from yachtcash.core.context import RequestContext

logger = logging.getLogger(__name__)

_DNS_LABEL = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")
_IPV4 = re.compile(r"^\d{1,3}(?:\.\d{1,3}){3}$")


class TenantRecord(Protocol):
    id: str


FindTenantBySubdomain = Callable[[str], Awaitable[TenantRecord | None]]


@dataclass(frozen=True, slots=True)
class TenantResolutionPolicy:
    header_name: str = "X-Tenant-Id"
    reserved_subdomains: frozenset[str] = frozenset({"yachtcash", "www"})
    skip_prefixes: tuple[str, ...] = ("/api/super-admin", "/health", "/status", "/admin")


def is_tenant_independent_path(path: str, prefixes: tuple[str, ...]) -> bool:
    if path in ("", "/"):
        return True
    for prefix in prefixes:
        if path == prefix or path.startswith(prefix + "/"):
            return True
    return False


def is_valid_subdomain(value: str) -> bool:
    return bool(_DNS_LABEL.match(value))


def extract_subdomain(host: str | None, reserved: frozenset[str]) -> str | None:
    """Return the tenant-candidate label of ``host``, or None.

    The first dot-delimited label is the candidate. Single-label hosts, IPv4
    literals, malformed labels and reserved labels yield None.
    """
    if not host:
        return None

    hostname = host.strip().lower()
    if hostname.startswith("["):
        return None
    hostname = hostname.split(":", 1)[0].rstrip(".")
    if not hostname or _IPV4.match(hostname):
        return None

    labels = hostname.split(".")
    if len(labels) < 2:
        return None

    label = labels[0]
    if label in reserved or not is_valid_subdomain(label):
        return None
    return label


def _header_value(headers: Mapping[str, str], name: str) -> str | None:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


async def resolve_tenant(
    *,
    path: str,
    headers: Mapping[str, str],
    host: str | None,
    find_tenant_by_subdomain: FindTenantBySubdomain,
    policy: TenantResolutionPolicy,
) -> RequestContext:
    """Resolve the tenant a request belongs to.

    First match wins: skip-listed path, explicit tenant header (used verbatim,
    not checked for existence), then a subdomain lookup. Never raises: an
    unknown subdomain or a failed lookup leaves ``tenant_id=None``.
    """
    if is_tenant_independent_path(path, policy.skip_prefixes):
        return RequestContext(skipped=True)

    header_tenant = _header_value(headers, policy.header_name)
    if header_tenant:
        return RequestContext(tenant_id=header_tenant, source="header")

    subdomain = extract_subdomain(host, policy.reserved_subdomains)
    if subdomain is None:
        return RequestContext()

    try:
        tenant = await find_tenant_by_subdomain(subdomain)
    except Exception:
        logger.exception("Tenant lookup failed for subdomain=%s", subdomain)
        return RequestContext()

    if tenant is None:
        logger.debug("No tenant registered for subdomain=%s", subdomain)
        return RequestContext()

    return RequestContext(tenant_id=tenant.id, source="subdomain")
