"""
Integration tests for products, stock movements and stock on hand
"""

import pytest
from httpx import AsyncClient


async def record(client, headers, catalog, movement_type, quantity, **extra):
    response = await client.post(
        "/stock-movements",
        json={
            "organization_id": catalog["organization"]["id"],
            "product_id": catalog["products"]["W-100"]["id"],
            "movement_type": movement_type,
            "quantity": quantity,
            "movement_date": "2024-03-01T09:00:00",
            **extra,
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def add_branch(client, headers, organization_id, code):
    response = await client.post(
        f"/organizations/{organization_id}/branches",
        json={"name": f"Branch {code}", "code": code},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.mark.asyncio
async def test_create_product(client: AsyncClient, catalog):
    widget = catalog["products"]["W-100"]

    assert widget["product_type"] == "goods"
    assert widget["unit_of_measure"] == "pcs"
    assert widget["cost_price"] == "4.50"
    assert widget["reorder_level"] == "10.00"
    assert widget["track_inventory"] is True
    assert widget["status"] == "active"


@pytest.mark.asyncio
async def test_duplicate_product_code(client: AsyncClient, catalog, tenant_headers):
    response = await client.post(
        "/products",
        json={
            "organization_id": catalog["organization"]["id"],
            "code": "W-100",
            "name": "Another Widget",
        },
        headers=tenant_headers(catalog["tenant"]["id"]),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "PRODUCT_CODE_TAKEN"


@pytest.mark.asyncio
async def test_list_products_with_filters(client: AsyncClient, catalog, tenant_headers):
    headers = tenant_headers(catalog["tenant"]["id"])

    services = await client.get(
        "/products", params={"product_type": "service"}, headers=headers
    )
    assert [p["code"] for p in services.json()["data"]] == ["SVC-INSTALL"]

    searched = await client.get("/products", params={"search": "widg"}, headers=headers)
    assert [p["code"] for p in searched.json()["data"]] == ["W-100"]
    assert searched.json()["meta"]["total"] == 1


@pytest.mark.asyncio
async def test_stock_level_sums_signed_movements(
    client: AsyncClient, catalog, tenant_headers
):
    headers = tenant_headers(catalog["tenant"]["id"])
    product_id = catalog["products"]["W-100"]["id"]

    receipt = await record(client, headers, catalog, "in", "25")
    issue = await record(client, headers, catalog, "out", "8.5")
    await record(client, headers, catalog, "adjustment", "1")

    assert receipt["signed_quantity"] == "25.00"
    assert issue["quantity"] == "8.50"
    assert issue["signed_quantity"] == "-8.50"

    stock = await client.get(f"/products/{product_id}/stock", headers=headers)
    assert stock.status_code == 200
    assert stock.json()["quantity_on_hand"] == "15.50"
    assert stock.json()["needs_reorder"] is False

    await record(client, headers, catalog, "out", "6")
    stock = await client.get(f"/products/{product_id}/stock", headers=headers)
    assert stock.json()["quantity_on_hand"] == "9.50"
    assert stock.json()["needs_reorder"] is True


@pytest.mark.asyncio
async def test_stock_level_per_location(client: AsyncClient, catalog, tenant_headers):
    headers = tenant_headers(catalog["tenant"]["id"])
    organization_id = catalog["organization"]["id"]
    product_id = catalog["products"]["W-100"]["id"]
    north = await add_branch(client, headers, organization_id, "N")
    south = await add_branch(client, headers, organization_id, "S")

    await record(client, headers, catalog, "in", "40", location_id=north)
    await record(client, headers, catalog, "transfer", "15", location_id=north)
    await record(client, headers, catalog, "in", "15", location_id=south)

    north_stock = await client.get(
        f"/products/{product_id}/stock", params={"location_id": north}, headers=headers
    )
    south_stock = await client.get(
        f"/products/{product_id}/stock", params={"location_id": south}, headers=headers
    )
    overall = await client.get(f"/products/{product_id}/stock", headers=headers)

    assert north_stock.json()["quantity_on_hand"] == "25.00"
    assert north_stock.json()["location_id"] == north
    assert south_stock.json()["quantity_on_hand"] == "15.00"
    assert overall.json()["quantity_on_hand"] == "40.00"

    listed = await client.get(
        "/stock-movements", params={"location_id": north}, headers=headers
    )
    assert sorted(m["movement_type"] for m in listed.json()["data"]) == ["in", "transfer"]


@pytest.mark.asyncio
async def test_stock_may_go_negative(client: AsyncClient, catalog, tenant_headers):
    headers = tenant_headers(catalog["tenant"]["id"])
    product_id = catalog["products"]["W-100"]["id"]

    await record(client, headers, catalog, "out", "3")

    stock = await client.get(f"/products/{product_id}/stock", headers=headers)
    assert stock.json()["quantity_on_hand"] == "-3.00"


@pytest.mark.asyncio
async def test_service_takes_no_movements(client: AsyncClient, catalog, tenant_headers):
    response = await client.post(
        "/stock-movements",
        json={
            "organization_id": catalog["organization"]["id"],
            "product_id": catalog["products"]["SVC-INSTALL"]["id"],
            "movement_type": "in",
            "quantity": "1",
            "movement_date": "2024-03-01T09:00:00",
        },
        headers=tenant_headers(catalog["tenant"]["id"]),
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "PRODUCT_NOT_STOCKED"


@pytest.mark.asyncio
async def test_movement_quantity_must_be_positive(
    client: AsyncClient, catalog, tenant_headers
):
    response = await client.post(
        "/stock-movements",
        json={
            "organization_id": catalog["organization"]["id"],
            "product_id": catalog["products"]["W-100"]["id"],
            "movement_type": "out",
            "quantity": "-5",
            "movement_date": "2024-03-01T09:00:00",
        },
        headers=tenant_headers(catalog["tenant"]["id"]),
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_and_delete_movement(client: AsyncClient, catalog, tenant_headers):
    headers = tenant_headers(catalog["tenant"]["id"])
    product_id = catalog["products"]["W-100"]["id"]
    movement = await record(client, headers, catalog, "in", "10")

    updated = await client.patch(
        f"/stock-movements/{movement['id']}",
        json={"quantity": "12", "notes": "recount"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["quantity"] == "12.00"
    assert updated.json()["notes"] == "recount"

    stock = await client.get(f"/products/{product_id}/stock", headers=headers)
    assert stock.json()["quantity_on_hand"] == "12.00"

    deleted = await client.delete(f"/stock-movements/{movement['id']}", headers=headers)
    assert deleted.status_code == 204

    missing = await client.get(f"/stock-movements/{movement['id']}", headers=headers)
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "MOVEMENT_NOT_FOUND"

    stock = await client.get(f"/products/{product_id}/stock", headers=headers)
    assert stock.json()["quantity_on_hand"] == "0.00"


@pytest.mark.asyncio
async def test_deleted_product_is_hidden(client: AsyncClient, catalog, tenant_headers):
    headers = tenant_headers(catalog["tenant"]["id"])
    product_id = catalog["products"]["W-100"]["id"]

    response = await client.delete(f"/products/{product_id}", headers=headers)
    assert response.status_code == 204

    response = await client.get(f"/products/{product_id}", headers=headers)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"


@pytest.mark.asyncio
async def test_products_are_invisible_to_other_tenants(
    client: AsyncClient, catalog, admin_headers, tenant_headers
):
    other = await client.post(
        "/admin/tenants", json={"name": "Globex", "subdomain": "globex"}, headers=admin_headers
    )
    other_headers = tenant_headers(other.json()["id"])
    product_id = catalog["products"]["W-100"]["id"]

    response = await client.get(f"/products/{product_id}/stock", headers=other_headers)
    assert response.status_code == 404

    response = await client.get("/products", headers=other_headers)
    assert response.json()["data"] == []

    response = await client.post(
        "/stock-movements",
        json={
            "organization_id": catalog["organization"]["id"],
            "product_id": product_id,
            "movement_type": "in",
            "quantity": "1",
            "movement_date": "2024-03-01T09:00:00",
        },
        headers=other_headers,
    )
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ORGANIZATION_NOT_FOUND"
