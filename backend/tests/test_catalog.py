"""Food and drug catalog API tests."""

from __future__ import annotations

import uuid

import pytest

from tests.helpers import create_food, manager_headers, viewer_headers

pytestmark = pytest.mark.asyncio


async def test_food_crud_flow(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)

    food = await create_food(client, headers, name="hay")
    listing = await client.get("/api/v1/foods", headers=headers)
    assert listing.status_code == 200
    assert listing.json()["count"] == 1
    assert listing.json()["foods"][0]["name"] == "hay"

    updated = await client.put(
        f"/api/v1/foods/{food['id']}",
        json={"name": "hay", "capacity": 250, "product_union": "kg"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["capacity"] == 250

    deleted = await client.delete(f"/api/v1/foods/{food['id']}", headers=headers)
    assert deleted.status_code == 204
    missing = await client.get(f"/api/v1/foods/{food['id']}", headers=headers)
    assert missing.status_code == 404


async def test_drug_crud_flow(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)

    created = await client.post(
        "/api/v1/drugs",
        json={
            "name": "penicillin",
            "status": "antibiotic",
            "capacity": 20,
            "product_union": "ml",
        },
        headers=headers,
    )
    assert created.status_code == 201
    drug = created.json()
    assert drug["status"] == "antibiotic"

    fetched = await client.get(f"/api/v1/drugs/{drug['id']}", headers=headers)
    assert fetched.status_code == 200

    listing = await client.get(
        "/api/v1/drugs", params={"name": "PENI"}, headers=headers
    )
    assert listing.json()["count"] == 1
    assert listing.json()["drugs"][0]["id"] == drug["id"]


async def test_catalog_lookups_are_category_scoped(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)
    food = await create_food(client, headers)

    response = await client.get(f"/api/v1/drugs/{food['id']}", headers=headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Drug not found"

    random = await client.get(f"/api/v1/foods/{uuid.uuid4()}", headers=headers)
    assert random.status_code == 404


async def test_viewer_cannot_create_food(app_context) -> None:
    client = app_context["client"]
    headers = await viewer_headers(app_context)
    response = await client.post(
        "/api/v1/foods",
        json={"name": "oats", "capacity": 5, "product_union": "kg"},
        headers=headers,
    )
    assert response.status_code == 403
