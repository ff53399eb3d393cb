"""
Integration tests for journal entries
Draft editing, the posting guard and account balances end to end.
"""

import pytest
from httpx import AsyncClient


def entry_payload(test_data, ledger, **overrides):
    payload = test_data.get_copy("journal_entry")
    payload["organization_id"] = ledger["organization"]["id"]
    for line in payload["lines"]:
        line["account_id"] = ledger["accounts"][line.pop("account_code")]["id"]
    payload.update(overrides)
    return payload


async def create_entry(client, headers, payload):
    response = await client.post("/journal-entries", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_entry_starts_as_draft(client: AsyncClient, ledger, test_data, tenant_headers):
    headers = tenant_headers(ledger["tenant"]["id"])

    entry = await create_entry(client, headers, entry_payload(test_data, ledger))

    assert entry["status"] == "draft"
    assert entry["posted_at"] is None
    assert entry["total_debit"] == "150.00"
    assert entry["total_credit"] == "150.00"
    assert entry["is_balanced"] is True
    assert [line["line_number"] for line in entry["lines"]] == [1, 2]


@pytest.mark.asyncio
async def test_create_entry_needs_two_lines(client: AsyncClient, ledger, test_data, tenant_headers):
    payload = entry_payload(test_data, ledger)
    payload["lines"] = payload["lines"][:1]

    response = await client.post(
        "/journal-entries", json=payload, headers=tenant_headers(ledger["tenant"]["id"])
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_entry_rejects_negative_amounts(
    client: AsyncClient, ledger, test_data, tenant_headers
):
    payload = entry_payload(test_data, ledger)
    payload["lines"][0]["debit"] = "-150.00"

    response = await client.post(
        "/journal-entries", json=payload, headers=tenant_headers(ledger["tenant"]["id"])
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_oversized_amounts_are_rejected(
    client: AsyncClient, ledger, test_data, tenant_headers
):
    headers = tenant_headers(ledger["tenant"]["id"])
    payload = entry_payload(test_data, ledger)
    payload["lines"][0]["debit"] = "10000000000000000.01"
    payload["lines"][1]["credit"] = "10000000000000000.00"

    response = await client.post("/journal-entries", json=payload, headers=headers)
    assert response.status_code == 422

    entry = await create_entry(client, headers, entry_payload(test_data, ledger))
    update = await client.patch(
        f"/journal-entries/{entry['id']}",
        json={"lines": payload["lines"]},
        headers=headers,
    )
    assert update.status_code == 422


@pytest.mark.asyncio
async def test_widest_amounts_keep_cent_precision(
    client: AsyncClient, ledger, test_data, tenant_headers
):
    headers = tenant_headers(ledger["tenant"]["id"])
    payload = entry_payload(test_data, ledger)
    payload["lines"][0]["debit"] = "9999999999999.99"
    payload["lines"][1]["credit"] = "9999999999999.98"

    entry = await create_entry(client, headers, payload)
    assert entry["is_balanced"] is False

    posted = await client.post(f"/journal-entries/{entry['id']}/post", headers=headers)
    assert posted.status_code == 422
    assert posted.json()["error"]["code"] == "UNBALANCED_ENTRY"


@pytest.mark.asyncio
async def test_create_entry_duplicate_number(client: AsyncClient, ledger, test_data, tenant_headers):
    headers = tenant_headers(ledger["tenant"]["id"])
    await create_entry(client, headers, entry_payload(test_data, ledger))

    response = await client.post(
        "/journal-entries", json=entry_payload(test_data, ledger), headers=headers
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ENTRY_NUMBER_TAKEN"


@pytest.mark.asyncio
async def test_post_lifecycle(
    client: AsyncClient, ledger, test_data, tenant_headers, user_id
):
    """
    Balanced draft posts once; afterwards it can be neither re-posted,
    edited, deleted nor cancelled.
    """
    headers = tenant_headers(ledger["tenant"]["id"])
    entry = await create_entry(client, headers, entry_payload(test_data, ledger))

    posted = await client.post(f"/journal-entries/{entry['id']}/post", headers=headers)
    assert posted.status_code == 200
    data = posted.json()
    assert data["status"] == "posted"
    assert data["posted_by"] == str(user_id)
    assert data["posted_at"] is not None

    again = await client.post(f"/journal-entries/{entry['id']}/post", headers=headers)
    assert again.status_code == 422
    assert again.json()["error"]["code"] == "ENTRY_ALREADY_POSTED"

    # Posting time is not re-stamped
    current = await client.get(f"/journal-entries/{entry['id']}", headers=headers)
    assert current.json()["posted_at"] == data["posted_at"]

    update = await client.patch(
        f"/journal-entries/{entry['id']}", json={"description": "edited"}, headers=headers
    )
    assert update.status_code == 422
    assert update.json()["error"]["code"] == "ENTRY_ALREADY_POSTED"

    delete = await client.delete(f"/journal-entries/{entry['id']}", headers=headers)
    assert delete.status_code == 422
    assert delete.json()["error"]["code"] == "ENTRY_ALREADY_POSTED"

    cancel = await client.post(f"/journal-entries/{entry['id']}/cancel", headers=headers)
    assert cancel.status_code == 422

    events = await client.get("/audit/events", headers=headers)
    posted_events = [e for e in events.json()["events"] if e["action"] == "journal_entry_posted"]
    assert len(posted_events) == 1
    assert posted_events[0]["user_id"] == str(user_id)
    assert posted_events[0]["metadata"]["entry_number"] == "JE-2024-0001"


@pytest.mark.asyncio
async def test_unbalanced_entry_cannot_post(
    client: AsyncClient, ledger, test_data, tenant_headers
):
    headers = tenant_headers(ledger["tenant"]["id"])
    payload = entry_payload(test_data, ledger)
    payload["lines"][1]["credit"] = "100.00"
    entry = await create_entry(client, headers, payload)
    assert entry["is_balanced"] is False

    response = await client.post(f"/journal-entries/{entry['id']}/post", headers=headers)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "UNBALANCED_ENTRY"

    balance = await client.get(f"/journal-entries/{entry['id']}/balance", headers=headers)
    assert balance.json() == {
        "entry_id": entry["id"],
        "status": "draft",
        "total_debit": "150.00",
        "total_credit": "100.00",
        "difference": "50.00",
        "is_balanced": False,
    }


@pytest.mark.asyncio
async def test_fix_draft_then_post(client: AsyncClient, ledger, test_data, tenant_headers):
    headers = tenant_headers(ledger["tenant"]["id"])
    payload = entry_payload(test_data, ledger)
    payload["lines"][1]["credit"] = "100.00"
    entry = await create_entry(client, headers, payload)

    fixed_lines = entry_payload(test_data, ledger)["lines"]
    fixed_lines[0]["debit"] = "99.995"
    fixed_lines[1]["credit"] = "100.00"
    updated = await client.patch(
        f"/journal-entries/{entry['id']}",
        json={"lines": fixed_lines, "reference": "INV-1001-R"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["reference"] == "INV-1001-R"
    # 99.995 rounds half up to 100.00
    assert updated.json()["total_debit"] == "100.00"
    assert len(updated.json()["lines"]) == 2

    posted = await client.post(f"/journal-entries/{entry['id']}/post", headers=headers)
    assert posted.status_code == 200


@pytest.mark.asyncio
async def test_cancelled_entry_is_frozen(client: AsyncClient, ledger, test_data, tenant_headers):
    headers = tenant_headers(ledger["tenant"]["id"])
    entry = await create_entry(client, headers, entry_payload(test_data, ledger))

    cancelled = await client.post(f"/journal-entries/{entry['id']}/cancel", headers=headers)
    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "cancelled"

    update = await client.patch(
        f"/journal-entries/{entry['id']}", json={"description": "revived"}, headers=headers
    )
    assert update.status_code == 422
    assert update.json()["error"]["code"] == "ENTRY_NOT_EDITABLE"

    post = await client.post(f"/journal-entries/{entry['id']}/post", headers=headers)
    assert post.status_code == 422
    assert post.json()["error"]["code"] == "INVALID_STATUS_TRANSITION"


@pytest.mark.asyncio
async def test_account_balances_follow_polarity(
    client: AsyncClient, ledger, test_data, tenant_headers
):
    headers = tenant_headers(ledger["tenant"]["id"])
    cash = ledger["accounts"]["1000"]
    sales = ledger["accounts"]["4000"]

    # Cash debit 500 / Sales credit 500, then Sales debit 200 / Cash credit 200
    first = entry_payload(test_data, ledger, entry_number="JE-1")
    first["lines"][0]["debit"] = "500.00"
    first["lines"][1]["credit"] = "500.00"
    first = await create_entry(client, headers, first)
    await client.post(f"/journal-entries/{first['id']}/post", headers=headers)

    second = entry_payload(
        test_data,
        ledger,
        entry_number="JE-2",
        lines=[
            {"account_id": sales["id"], "debit": "200.00"},
            {"account_id": cash["id"], "credit": "200.00"},
        ],
    )
    second = await create_entry(client, headers, second)

    cash_balance = await client.get(f"/accounts/{cash['id']}/balance", headers=headers)
    assert cash_balance.json()["balance"] == "300.00"

    sales_balance = await client.get(f"/accounts/{sales['id']}/balance", headers=headers)
    assert sales_balance.json()["normal_balance"] == "credit"
    assert sales_balance.json()["balance"] == "300.00"

    # Only the first entry is posted
    posted_only = await client.get(
        f"/accounts/{cash['id']}/balance", params={"posted_only": True}, headers=headers
    )
    assert posted_only.json()["balance"] == "500.00"

    # Deleted drafts no longer count
    await client.delete(f"/journal-entries/{second['id']}", headers=headers)
    cash_balance = await client.get(f"/accounts/{cash['id']}/balance", headers=headers)
    assert cash_balance.json()["balance"] == "500.00"


@pytest.mark.asyncio
async def test_list_entries_with_filters(client: AsyncClient, ledger, test_data, tenant_headers):
    headers = tenant_headers(ledger["tenant"]["id"])
    january = await create_entry(
        client, headers, entry_payload(test_data, ledger, entry_number="JE-JAN")
    )
    await create_entry(
        client,
        headers,
        entry_payload(test_data, ledger, entry_number="JE-FEB", entry_date="2024-02-15"),
    )
    await client.post(f"/journal-entries/{january['id']}/post", headers=headers)

    everything = await client.get("/journal-entries", headers=headers)
    assert [e["entry_number"] for e in everything.json()["data"]] == ["JE-FEB", "JE-JAN"]
    assert everything.json()["meta"]["total"] == 2

    posted = await client.get("/journal-entries", params={"status": "posted"}, headers=headers)
    assert [e["entry_number"] for e in posted.json()["data"]] == ["JE-JAN"]

    february = await client.get(
        "/journal-entries", params={"from_date": "2024-02-01"}, headers=headers
    )
    assert [e["entry_number"] for e in february.json()["data"]] == ["JE-FEB"]


@pytest.mark.asyncio
async def test_entry_with_branch(client: AsyncClient, ledger, test_data, tenant_headers):
    headers = tenant_headers(ledger["tenant"]["id"])
    organization_id = ledger["organization"]["id"]

    branch = await client.post(
        f"/organizations/{organization_id}/branches",
        json={"name": "Downtown", "code": "DT"},
        headers=headers,
    )
    assert branch.status_code == 201
    branch_id = branch.json()["id"]

    entry = await create_entry(
        client, headers, entry_payload(test_data, ledger, branch_id=branch_id)
    )
    assert entry["branch_id"] == branch_id

    listed = await client.get(
        "/journal-entries", params={"branch_id": branch_id}, headers=headers
    )
    assert [e["id"] for e in listed.json()["data"]] == [entry["id"]]

    unknown_branch = await client.post(
        "/journal-entries",
        json=entry_payload(
            test_data,
            ledger,
            entry_number="JE-X",
            branch_id="00000000-0000-0000-0000-000000000000",
        ),
        headers=headers,
    )
    assert unknown_branch.status_code == 404
    assert unknown_branch.json()["error"]["code"] == "BRANCH_NOT_FOUND"


@pytest.mark.asyncio
async def test_entries_are_invisible_to_other_tenants(
    client: AsyncClient, ledger, test_data, admin_headers, tenant_headers
):
    entry = await create_entry(
        client, tenant_headers(ledger["tenant"]["id"]), entry_payload(test_data, ledger)
    )
    other = await client.post(
        "/admin/tenants", json={"name": "Globex", "subdomain": "globex"}, headers=admin_headers
    )
    other_headers = tenant_headers(other.json()["id"])

    response = await client.post(f"/journal-entries/{entry['id']}/post", headers=other_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ENTRY_NOT_FOUND"
