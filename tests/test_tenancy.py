from __future__ import annotations

from types import SimpleNamespace

import pytest

from yachtcash.core.tenancy import (
    TenantResolutionPolicy,
    extract_subdomain,
    is_tenant_independent_path,
    resolve_tenant,
)

POLICY = TenantResolutionPolicy(
    header_name="X-Tenant-Id",
    reserved_subdomains=frozenset({"service", "www"}),
    skip_prefixes=("/api/super-admin", "/health", "/status", "/admin"),
)


class _Lookup:
    def __init__(self, tenants: dict[str, str] | None = None) -> None:
        self.tenants = tenants or {}
        self.calls: list[str] = []

    async def __call__(self, subdomain: str):  # noqa: ANN204
        self.calls.append(subdomain)
        tenant_id = self.tenants.get(subdomain)
        return SimpleNamespace(id=tenant_id) if tenant_id else None


async def _resolve(lookup: _Lookup, *, path: str = "/api/tenant/yachts", headers=None, host=None):  # noqa: ANN001, ANN202
    return await resolve_tenant(
        path=path,
        headers=headers or {},
        host=host,
        find_tenant_by_subdomain=lookup,
        policy=POLICY,
    )


@pytest.mark.asyncio
async def test_header_wins_regardless_of_host() -> None:
    lookup = _Lookup({"acme": "tenant-acme"})
    context = await _resolve(lookup, headers={"X-Tenant-Id": "tenant-123"}, host="acme.service.tld")

    assert context.tenant_id == "tenant-123"
    assert context.source == "header"
    assert lookup.calls == []


@pytest.mark.asyncio
async def test_header_name_is_case_insensitive_and_value_verbatim() -> None:
    lookup = _Lookup()
    context = await _resolve(lookup, headers={"x-tenant-id": "Not-A-Real-Tenant"})

    assert context.tenant_id == "Not-A-Real-Tenant"
    assert lookup.calls == []


@pytest.mark.asyncio
async def test_empty_header_falls_back_to_subdomain() -> None:
    lookup = _Lookup({"acme": "tenant-acme"})
    context = await _resolve(lookup, headers={"X-Tenant-Id": ""}, host="acme.service.tld")

    assert context.tenant_id == "tenant-acme"
    assert context.source == "subdomain"


@pytest.mark.asyncio
async def test_subdomain_lookup_found() -> None:
    lookup = _Lookup({"acme": "tenant-acme"})
    context = await _resolve(lookup, host="acme.service.tld")

    assert context.tenant_id == "tenant-acme"
    assert context.skipped is False
    assert lookup.calls == ["acme"]


@pytest.mark.asyncio
async def test_subdomain_lookup_not_found_leaves_tenant_unset() -> None:
    lookup = _Lookup()
    context = await _resolve(lookup, host="acme.service.tld")

    assert context.tenant_id is None
    assert context.source is None
    assert lookup.calls == ["acme"]


@pytest.mark.asyncio
@pytest.mark.parametrize("host", ["www.service.tld", "service.tld", "WWW.service.tld:443"])
async def test_reserved_labels_never_query_or_resolve(host: str) -> None:
    lookup = _Lookup({"www": "tenant-www", "service": "tenant-service"})
    context = await _resolve(lookup, host=host)

    assert context.tenant_id is None
    assert lookup.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path",
    ["/", "/health", "/health/db", "/status", "/admin/index.html", "/api/super-admin/tenants"],
)
async def test_skip_paths_perform_no_lookup(path: str) -> None:
    lookup = _Lookup({"acme": "tenant-acme"})
    context = await _resolve(
        lookup,
        path=path,
        headers={"X-Tenant-Id": "tenant-123"},
        host="acme.service.tld",
    )

    assert context.skipped is True
    assert context.tenant_id is None
    assert lookup.calls == []


def test_skip_prefix_matching_is_segment_aware() -> None:
    prefixes = POLICY.skip_prefixes
    assert is_tenant_independent_path("/healthz", prefixes) is False
    assert is_tenant_independent_path("/api/super-administrator", prefixes) is False
    assert is_tenant_independent_path("/api/tenant/yachts", prefixes) is False


def test_extract_subdomain_normalizes_host() -> None:
    reserved = POLICY.reserved_subdomains
    assert extract_subdomain("Acme.Service.tld:8443", reserved) == "acme"
    assert extract_subdomain("acme.service.tld.", reserved) == "acme"


@pytest.mark.parametrize(
    "host",
    [None, "", "localhost", "localhost:3001", "127.0.0.1", "[::1]:8000", "-bad.service.tld", "a_b.service.tld"],
)
def test_extract_subdomain_rejects_non_tenant_hosts(host: str | None) -> None:
    assert extract_subdomain(host, POLICY.reserved_subdomains) is None


def test_settings_build_resolution_policy() -> None:
    from yachtcash.core.config import Settings

    configured = Settings(
        base_domain_label="YachtCash",
        reserved_subdomains_csv="www, App ,",
        tenant_skip_prefixes_csv="/api/super-admin/, /health,,/",
        tenant_header_name="X-Org-Id",
    )
    policy = configured.tenant_resolution_policy()

    assert policy.header_name == "X-Org-Id"
    assert policy.reserved_subdomains == frozenset({"www", "app", "yachtcash"})
    assert policy.skip_prefixes == ("/api/super-admin", "/health")


@pytest.mark.asyncio
async def test_failed_lookup_leaves_tenant_unset(caplog: pytest.LogCaptureFixture) -> None:
    async def _broken(subdomain: str):  # noqa: ANN202
        raise ConnectionError("database unavailable")

    context = await resolve_tenant(
        path="/api/tenant/yachts",
        headers={},
        host="acme.service.tld",
        find_tenant_by_subdomain=_broken,
        policy=POLICY,
    )

    assert context.tenant_id is None
    assert context.skipped is False
    assert "Tenant lookup failed for subdomain=acme" in caplog.text
