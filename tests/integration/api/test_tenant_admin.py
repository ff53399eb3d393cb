"""
Integration tests for platform tenant administration
Admin API key protected CRUD plus suspend / restore.
"""

import pytest
from httpx import AsyncClient
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession
from uuid import UUID

from src.domain.entities import AuditEvent, Tenant
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_create_tenant(client: AsyncClient, admin_headers, test_data):
    payload = test_data.get_copy("tenant_acme")
    payload["subdomain"] = "ACME"

    response = await client.post("/admin/tenants", json=payload, headers=admin_headers)

    assert response.status_code == 201
    data = response.json()
    assert exclude_keys(data, {"id", "created_at"}) == {
        "name": "Acme Corp",
        "subdomain": "acme",
        "domain": "books.acme-corp.com",
        "status": "active",
        "is_active": True,
        "expires_at": None,
        "settings": {"fiscal_year_start": "01-01"},
    }


@pytest.mark.asyncio
async def test_create_tenant_requires_admin_key(client: AsyncClient, test_data):
    response = await client.post("/admin/tenants", json=test_data.get_copy("tenant_acme"))
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"

    response = await client.post(
        "/admin/tenants",
        json=test_data.get_copy("tenant_acme"),
        headers={"X-Admin-API-Key": "wrong"},
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_create_tenant_duplicate_subdomain(client: AsyncClient, admin_headers, tenant):
    response = await client.post(
        "/admin/tenants",
        json={"name": "Acme Again", "subdomain": "acme"},
        headers=admin_headers,
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SUBDOMAIN_TAKEN"


@pytest.mark.asyncio
async def test_create_tenant_duplicate_domain(client: AsyncClient, admin_headers, tenant):
    response = await client.post(
        "/admin/tenants",
        json={"name": "Impostor", "subdomain": "impostor", "domain": "books.acme-corp.com"},
        headers=admin_headers,
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "DOMAIN_TAKEN"


@pytest.mark.asyncio
async def test_create_tenant_invalid_subdomain(client: AsyncClient, admin_headers):
    response = await client.post(
        "/admin/tenants",
        json={"name": "Bad", "subdomain": "not.a.label"},
        headers=admin_headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_tenants_paginated(client: AsyncClient, admin_headers, test_data):
    for index in range(3):
        payload = test_data.get_copy("tenant_globex")
        payload["subdomain"] = f"globex{index}"
        await client.post("/admin/tenants", json=payload, headers=admin_headers)

    response = await client.get(
        "/admin/tenants", params={"per_page": 2, "page": 2}, headers=admin_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["meta"] == {"page": 2, "per_page": 2, "total": 3, "last_page": 2}
    assert len(body["data"]) == 1


@pytest.mark.asyncio
async def test_list_tenants_filter_by_status(client: AsyncClient, admin_headers, tenant):
    await client.post(
        "/admin/tenants",
        json={"name": "Sleepy", "subdomain": "sleepy", "status": "inactive"},
        headers=admin_headers,
    )

    response = await client.get(
        "/admin/tenants", params={"status": "inactive"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert [t["subdomain"] for t in response.json()["data"]] == ["sleepy"]


@pytest.mark.asyncio
async def test_update_tenant(client: AsyncClient, admin_headers, tenant):
    response = await client.patch(
        f"/admin/tenants/{tenant['id']}",
        json={"name": "Acme Holdings", "domain": None, "expires_at": "2000-01-01T00:00:00Z"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Acme Holdings"
    assert data["domain"] is None
    assert data["subdomain"] == "acme"
    # Past expiry makes an active tenant inactive
    assert data["status"] == "active"
    assert data["is_active"] is False


@pytest.mark.asyncio
async def test_get_unknown_tenant(client: AsyncClient, admin_headers):
    response = await client.get(
        "/admin/tenants/00000000-0000-0000-0000-000000000000", headers=admin_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TENANT_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_tenant_with_organizations(
    client: AsyncClient, admin_headers, tenant, tenant_headers
):
    await client.post(
        "/organizations", json={"name": "Acme Trading"}, headers=tenant_headers(tenant["id"])
    )

    response = await client.delete(f"/admin/tenants/{tenant['id']}", headers=admin_headers)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "TENANT_HAS_ORGANIZATIONS"


@pytest.mark.asyncio
async def test_delete_tenant_soft_deletes(
    client: AsyncClient, db_session: AsyncSession, admin_headers, tenant
):
    response = await client.delete(f"/admin/tenants/{tenant['id']}", headers=admin_headers)
    assert response.status_code == 204

    response = await client.get(f"/admin/tenants/{tenant['id']}", headers=admin_headers)
    assert response.status_code == 404

    # Row is kept with a deletion timestamp
    result = await db_session.exec(select(Tenant).where(Tenant.id == UUID(tenant["id"])))
    assert result.one().deleted_at is not None


@pytest.mark.asyncio
async def test_suspend_and_restore_tenant(
    client: AsyncClient, db_session: AsyncSession, admin_headers, tenant, tenant_headers
):
    headers = tenant_headers(tenant["id"])

    suspend = await client.post(f"/admin/tenants/{tenant['id']}/suspend", headers=admin_headers)
    assert suspend.status_code == 200
    assert suspend.json() == {"id": tenant["id"], "status": "suspended"}

    blocked = await client.get("/context", headers=headers)
    assert blocked.status_code == 403
    assert blocked.json()["error"]["code"] == "TENANT_INACTIVE"

    restore = await client.post(f"/admin/tenants/{tenant['id']}/restore", headers=admin_headers)
    assert restore.status_code == 200
    assert restore.json()["status"] == "active"

    allowed = await client.get("/context", headers=headers)
    assert allowed.status_code == 200

    result = await db_session.exec(
        select(AuditEvent)
        .where(AuditEvent.tenant_id == UUID(tenant["id"]))
        .where(col(AuditEvent.action).in_(["tenant_suspended", "tenant_restored"]))
    )
    assert sorted(event.action for event in result.all()) == [
        "tenant_restored",
        "tenant_suspended",
    ]
