"""
Integration tests for the chart of accounts
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_account_inherits_organization_currency(
    client: AsyncClient, ledger, tenant_headers
):
    headers = tenant_headers(ledger["tenant"]["id"])
    cash = ledger["accounts"]["1000"]

    response = await client.post(
        "/accounts",
        json={
            "organization_id": ledger["organization"]["id"],
            "parent_id": cash["id"],
            "code": "1010",
            "name": "Petty Cash",
            "account_type": "asset",
        },
        headers=headers,
    )

    assert response.status_code == 201
    data = response.json()
    assert data["parent_id"] == cash["id"]
    assert data["currency_code"] == "USD"
    assert data["is_active"] is True


@pytest.mark.asyncio
async def test_duplicate_account_code(client: AsyncClient, ledger, tenant_headers):
    response = await client.post(
        "/accounts",
        json={
            "organization_id": ledger["organization"]["id"],
            "code": "1000",
            "name": "Another Cash",
            "account_type": "asset",
        },
        headers=tenant_headers(ledger["tenant"]["id"]),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ACCOUNT_CODE_TAKEN"


@pytest.mark.asyncio
async def test_list_accounts_with_filters(client: AsyncClient, ledger, tenant_headers):
    headers = tenant_headers(ledger["tenant"]["id"])

    response = await client.get(
        "/accounts", params={"account_type": "revenue"}, headers=headers
    )
    assert response.status_code == 200
    assert [a["code"] for a in response.json()["data"]] == ["4000"]

    response = await client.get("/accounts", params={"search": "cash"}, headers=headers)
    assert [a["code"] for a in response.json()["data"]] == ["1000"]

    response = await client.get("/accounts", params={"per_page": 3}, headers=headers)
    body = response.json()
    assert body["meta"]["total"] == 4
    assert body["meta"]["last_page"] == 2
    assert len(body["data"]) == 3


@pytest.mark.asyncio
async def test_reparent_into_descendant_is_rejected(client: AsyncClient, ledger, tenant_headers):
    headers = tenant_headers(ledger["tenant"]["id"])
    cash = ledger["accounts"]["1000"]

    child = await client.post(
        "/accounts",
        json={
            "organization_id": ledger["organization"]["id"],
            "parent_id": cash["id"],
            "code": "1010",
            "name": "Petty Cash",
            "account_type": "asset",
        },
        headers=headers,
    )

    response = await client.patch(
        f"/accounts/{cash['id']}", json={"parent_id": child.json()["id"]}, headers=headers
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "ACCOUNT_HIERARCHY_CYCLE"


@pytest.mark.asyncio
async def test_update_and_delete_account(client: AsyncClient, ledger, tenant_headers):
    headers = tenant_headers(ledger["tenant"]["id"])
    supplies = ledger["accounts"]["5000"]

    response = await client.patch(
        f"/accounts/{supplies['id']}",
        json={"name": "Office Expenses", "is_active": False},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Office Expenses"
    assert response.json()["is_active"] is False

    response = await client.delete(f"/accounts/{supplies['id']}", headers=headers)
    assert response.status_code == 204

    response = await client.get(f"/accounts/{supplies['id']}", headers=headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_accounts_are_invisible_to_other_tenants(
    client: AsyncClient, ledger, admin_headers, tenant_headers
):
    other = await client.post(
        "/admin/tenants", json={"name": "Globex", "subdomain": "globex"}, headers=admin_headers
    )
    other_headers = tenant_headers(other.json()["id"])
    cash = ledger["accounts"]["1000"]

    response = await client.get(f"/accounts/{cash['id']}", headers=other_headers)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ACCOUNT_NOT_FOUND"

    response = await client.get("/accounts", headers=other_headers)
    assert response.json()["data"] == []

    # Nor can another tenant create accounts in the organization
    response = await client.post(
        "/accounts",
        json={
            "organization_id": ledger["organization"]["id"],
            "code": "9999",
            "name": "Intruder",
            "account_type": "asset",
        },
        headers=other_headers,
    )
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ORGANIZATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_balance_of_unused_account(client: AsyncClient, ledger, tenant_headers):
    cash = ledger["accounts"]["1000"]

    response = await client.get(
        f"/accounts/{cash['id']}/balance", headers=tenant_headers(ledger["tenant"]["id"])
    )

    assert response.status_code == 200
    assert response.json() == {
        "account_id": cash["id"],
        "account_type": "asset",
        "normal_balance": "debit",
        "total_debit": "0.00",
        "total_credit": "0.00",
        "balance": "0.00",
        "posted_only": False,
    }
