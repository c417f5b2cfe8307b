"""Product catalog and animal yield API tests."""

from __future__ import annotations

from typing import Any

import pytest
from httpx import AsyncClient

from tests.helpers import create_animal, manager_headers, viewer_headers

pytestmark = pytest.mark.asyncio


async def _create_product(
    client: AsyncClient, headers: dict[str, str], name: str = "milk", union: str = "l"
) -> dict[str, Any]:
    response = await client.post(
        "/api/v1/products",
        json={"name": name, "product_union": union},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def _record_yield(
    client: AsyncClient,
    headers: dict[str, str],
    *,
    animal_id: str,
    product_id: str,
    capacity: int,
    get_time: str = "2025-03-01T07:30:00",
) -> dict[str, Any]:
    response = await client.post(
        "/api/v1/animals/products",
        json={
            "animal_id": animal_id,
            "product_id": product_id,
            "capacity": capacity,
            "get_time": get_time,
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_product_crud(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)
    product = await _create_product(client, headers, name=" Milk ", union="L")
    assert product["name"] == "milk"
    assert product["product_union"] == "l"
    assert product["total_capacity"] == 0

    await _create_product(client, headers, name="wool", union="kg")
    listing = await client.get(
        "/api/v1/products", params={"union": "kg"}, headers=headers
    )
    assert listing.status_code == 200
    assert listing.json()["count"] == 1
    assert listing.json()["products"][0]["name"] == "wool"

    updated = await client.put(
        f"/api/v1/products/{product['id']}",
        json={"name": "goat milk", "product_union": "l", "description": "raw"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["name"] == "goat milk"

    deleted = await client.delete(f"/api/v1/products/{product['id']}", headers=headers)
    assert deleted.status_code == 204
    missing = await client.get(f"/api/v1/products/{product['id']}", headers=headers)
    assert missing.status_code == 404


async def test_viewer_cannot_create_product(app_context) -> None:
    client = app_context["client"]
    headers = await viewer_headers(app_context)
    response = await client.post(
        "/api/v1/products",
        json={"name": "milk", "product_union": "l"},
        headers=headers,
    )
    assert response.status_code == 403


async def test_yield_adds_to_product_total(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)
    animal = await create_animal(client, headers)
    product = await _create_product(client, headers)

    record = await _record_yield(
        client, headers, animal_id=animal["id"], product_id=product["id"], capacity=12
    )
    assert record["animal_name"] == "Bessie"
    assert record["animal_category"] == "cow"
    assert record["product_name"] == "milk"
    assert record["get_time"] == "2025-03-01T07:30:00"
    await _record_yield(
        client, headers, animal_id=animal["id"], product_id=product["id"], capacity=8
    )

    stored = await client.get(f"/api/v1/products/{product['id']}", headers=headers)
    assert stored.json()["total_capacity"] == 20


async def test_yield_correction_and_delete_leave_total(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)
    animal = await create_animal(client, headers)
    product = await _create_product(client, headers)
    record = await _record_yield(
        client, headers, animal_id=animal["id"], product_id=product["id"], capacity=10
    )

    corrected = await client.put(
        f"/api/v1/animals/products/{record['id']}",
        json={
            "animal_id": animal["id"],
            "product_id": product["id"],
            "capacity": 4,
            "get_time": "2025-03-01T18:00:00",
        },
        headers=headers,
    )
    assert corrected.status_code == 200, corrected.text
    assert corrected.json()["capacity"] == 4

    fetched = await client.get(
        f"/api/v1/animals/products/{record['id']}", headers=headers
    )
    assert fetched.json()["get_time"] == "2025-03-01T18:00:00"

    deleted = await client.delete(
        f"/api/v1/animals/products/{record['id']}", headers=headers
    )
    assert deleted.status_code == 204
    gone = await client.get(f"/api/v1/animals/products/{record['id']}", headers=headers)
    assert gone.status_code == 404

    stored = await client.get(f"/api/v1/products/{product['id']}", headers=headers)
    assert stored.json()["total_capacity"] == 10


async def test_yield_for_unknown_product_is_not_found(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)
    animal = await create_animal(client, headers)
    response = await client.post(
        "/api/v1/animals/products",
        json={
            "animal_id": animal["id"],
            "product_id": "00000000-0000-0000-0000-000000000000",
            "capacity": 1,
            "get_time": "2025-03-01T07:30:00",
        },
        headers=headers,
    )
    assert response.status_code == 404
    assert "Product" in response.json()["detail"]


async def test_yield_listing_filters(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)
    bessie = await create_animal(client, headers)
    daisy = await create_animal(client, headers, name="Daisy")
    milk = await _create_product(client, headers)
    await _record_yield(
        client, headers, animal_id=bessie["id"], product_id=milk["id"], capacity=5
    )
    await _record_yield(
        client,
        headers,
        animal_id=daisy["id"],
        product_id=milk["id"],
        capacity=7,
        get_time="2025-03-02T07:30:00",
    )

    by_day = await client.get(
        "/api/v1/animals/products", params={"day": "2025-03-02"}, headers=headers
    )
    assert by_day.status_code == 200
    assert by_day.json()["count"] == 1
    assert by_day.json()["animal_products"][0]["animal_name"] == "Daisy"

    by_animal = await client.get(
        "/api/v1/animals/products",
        params={"animal_id": bessie["id"]},
        headers=headers,
    )
    assert [row["capacity"] for row in by_animal.json()["animal_products"]] == [5]

    everything = await client.get(
        "/api/v1/animals/products",
        params={"product_id": milk["id"]},
        headers=headers,
    )
    assert everything.json()["count"] == 2


async def test_products_of_animal_are_summed(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)
    animal = await create_animal(client, headers)
    milk = await _create_product(client, headers)
    manure = await _create_product(client, headers, name="manure", union="kg")
    for capacity in (3, 4):
        await _record_yield(
            client, headers, animal_id=animal["id"], product_id=milk["id"], capacity=capacity
        )
    await _record_yield(
        client, headers, animal_id=animal["id"], product_id=manure["id"], capacity=2
    )

    response = await client.get(
        f"/api/v1/animals/{animal['id']}/products", headers=headers
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["animal"]["id"] == animal["id"]
    assert body["count"] == 2
    assert [(row["name"], row["total_capacity"]) for row in body["products"]] == [
        ("milk", 7),
        ("manure", 2),
    ]


async def test_animals_of_product_are_summed(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)
    bessie = await create_animal(client, headers)
    daisy = await create_animal(client, headers, name="Daisy")
    milk = await _create_product(client, headers)
    await _record_yield(
        client, headers, animal_id=bessie["id"], product_id=milk["id"], capacity=6
    )
    await _record_yield(
        client, headers, animal_id=daisy["id"], product_id=milk["id"], capacity=9
    )

    response = await client.get(
        f"/api/v1/products/{milk['id']}/animals", headers=headers
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["product"]["total_capacity"] == 15
    assert body["count"] == 2
    assert [(row["name"], row["total_capacity"]) for row in body["animals"]] == [
        ("Daisy", 9),
        ("Bessie", 6),
    ]


async def test_products_of_unknown_animal_is_not_found(app_context) -> None:
    client = app_context["client"]
    headers = await manager_headers(app_context)
    response = await client.get(
        "/api/v1/animals/00000000-0000-0000-0000-000000000000/products",
        headers=headers,
    )
    assert response.status_code == 404
