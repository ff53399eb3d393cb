"""
Integration tests for request tenant resolution
Covers the X-Tenant-ID, X-Tenant-Subdomain, host subdomain and custom
domain strategies against a real database.
"""

import pytest
from uuid import uuid4
from httpx import AsyncClient
from jose import jwt

from config import ApplicationConfig
from src.api.utils.jwt import generate_jwt


def bearer(user_id=None, **claims):
    return {"Authorization": f"Bearer {generate_jwt(user_id or uuid4(), **claims)}"}


@pytest.mark.asyncio
async def test_resolve_by_tenant_id_header(client: AsyncClient, tenant, user_id, tenant_headers):
    response = await client.get("/context", headers=tenant_headers(tenant["id"]))

    assert response.status_code == 200
    data = response.json()
    assert data["tenant"]["id"] == tenant["id"]
    assert data["tenant"]["resolved_by"] == "id_header"
    assert data["user_id"] == str(user_id)
    assert data["role"] == "accountant"


@pytest.mark.asyncio
async def test_tenant_id_header_beats_host(
    client: AsyncClient, admin_headers, tenant, tenant_headers
):
    other = await client.post(
        "/admin/tenants", json={"name": "Globex", "subdomain": "globex"}, headers=admin_headers
    )

    response = await client.get(
        "/context",
        headers=tenant_headers(other.json()["id"], Host="acme.example.com"),
    )

    assert response.status_code == 200
    assert response.json()["tenant"]["subdomain"] == "globex"


@pytest.mark.asyncio
async def test_resolve_by_subdomain_header(client: AsyncClient, tenant):
    response = await client.get(
        "/context", headers={**bearer(), "X-Tenant-Subdomain": "acme"}
    )

    assert response.status_code == 200
    assert response.json()["tenant"]["id"] == tenant["id"]
    assert response.json()["tenant"]["resolved_by"] == "subdomain_header"


@pytest.mark.asyncio
async def test_resolve_by_host_subdomain(client: AsyncClient, tenant):
    response = await client.get(
        "/context", headers={**bearer(), "Host": "acme.ledger.example.com:8000"}
    )

    assert response.status_code == 200
    assert response.json()["tenant"]["id"] == tenant["id"]
    assert response.json()["tenant"]["resolved_by"] == "host_subdomain"


@pytest.mark.asyncio
async def test_resolve_by_custom_domain(client: AsyncClient, tenant):
    response = await client.get(
        "/context", headers={**bearer(), "Host": "books.acme-corp.com"}
    )

    assert response.status_code == 200
    assert response.json()["tenant"]["id"] == tenant["id"]
    assert response.json()["tenant"]["resolved_by"] == "custom_domain"


@pytest.mark.asyncio
async def test_unknown_tenant(client: AsyncClient, tenant):
    response = await client.get(
        "/context", headers={**bearer(), "Host": "nobody.example.com"}
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TENANT_NOT_FOUND"


@pytest.mark.asyncio
async def test_two_label_host_without_custom_domain(client: AsyncClient, tenant):
    response = await client.get("/context", headers={**bearer(), "Host": "example.com"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_inactive_tenant_hidden_from_subdomain_lookup(
    client: AsyncClient, admin_headers, tenant_headers
):
    created = await client.post(
        "/admin/tenants",
        json={"name": "Dormant", "subdomain": "dormant", "status": "inactive"},
        headers=admin_headers,
    )
    tenant_id = created.json()["id"]

    by_subdomain = await client.get(
        "/context", headers={**bearer(), "X-Tenant-Subdomain": "dormant"}
    )
    assert by_subdomain.status_code == 404

    by_host = await client.get(
        "/context", headers={**bearer(), "Host": "dormant.example.com"}
    )
    assert by_host.status_code == 404

    # ID lookup finds it, then the activity check rejects it
    by_id = await client.get("/context", headers=tenant_headers(tenant_id))
    assert by_id.status_code == 403
    assert by_id.json()["error"]["code"] == "TENANT_INACTIVE"


@pytest.mark.asyncio
async def test_expired_tenant_is_inactive(client: AsyncClient, admin_headers, tenant_headers):
    created = await client.post(
        "/admin/tenants",
        json={
            "name": "Lapsed",
            "subdomain": "lapsed",
            "expires_at": "2001-01-01T00:00:00",
        },
        headers=admin_headers,
    )
    tenant_id = created.json()["id"]

    by_subdomain = await client.get(
        "/context", headers={**bearer(), "X-Tenant-Subdomain": "lapsed"}
    )
    assert by_subdomain.status_code == 404

    by_id = await client.get("/context", headers=tenant_headers(tenant_id))
    assert by_id.status_code == 403


@pytest.mark.asyncio
async def test_token_bound_to_other_tenant(client: AsyncClient, tenant):
    response = await client.get(
        "/context",
        headers={**bearer(tenant_id=uuid4()), "X-Tenant-ID": tenant["id"]},
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "TENANT_MISMATCH"


@pytest.mark.asyncio
async def test_token_bound_to_same_tenant(client: AsyncClient, tenant):
    response = await client.get(
        "/context",
        headers={**bearer(tenant_id=tenant["id"]), "X-Tenant-ID": tenant["id"]},
    )

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_invalid_token(client: AsyncClient, tenant):
    response = await client.get(
        "/context",
        headers={"Authorization": "Bearer not-a-jwt", "X-Tenant-ID": tenant["id"]},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize("bad_user_id", [12345, None, ["a"], "not-a-uuid"])
async def test_signed_token_with_malformed_user_id(client: AsyncClient, tenant, bad_user_id):
    token = jwt.encode(
        {"user_id": bad_user_id, "role": "accountant"},
        ApplicationConfig.JWT_SECRET,
        algorithm="HS256",
    )

    response = await client.get(
        "/context",
        headers={"Authorization": f"Bearer {token}", "X-Tenant-ID": tenant["id"]},
    )

    assert response.status_code == 401
