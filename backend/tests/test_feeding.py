"""Schedule assignment and feeding ledger API tests."""

from __future__ import annotations

import uuid

import pytest

from tests.helpers import create_animal, create_food, manager_headers, viewer_headers

pytestmark = pytest.mark.asyncio


async def _setup(app_context) -> tuple[dict[str, str], dict, dict]:
    client = app_context["client"]
    headers = await manager_headers(app_context)
    animal = await create_animal(client, headers)
    food = await create_food(client, headers)
    return headers, animal, food


async def test_assign_and_list_food_schedule(app_context) -> None:
    client = app_context["client"]
    headers, animal, food = await _setup(app_context)

    created = await client.post(
        "/api/v1/animals/eatables",
        json={
            "animal_id": animal["id"],
            "eatables_id": food["id"],
            "category": "FOOD",
            "daily": [
                {"time": "08:00:00", "capacity": 2},
                {"time": "18:30:00", "capacity": 3},
            ],
        },
        headers=headers,
    )
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["category"] == "food"
    assert body["eatable"]["name"] == "hay"
    assert body["daily"] == [
        {"time": "08:00:00", "capacity": 2},
        {"time": "18:30:00", "capacity": 3},
    ]

    food_info = await client.get(
        f"/api/v1/animals/{animal['id']}/food-info", headers=headers
    )
    assert food_info.status_code == 200
    assert food_info.json()["count"] == 1
    assert food_info.json()["eatables"][0]["id"] == body["id"]

    drug_info = await client.get(
        f"/api/v1/animals/{animal['id']}/drug-info", headers=headers
    )
    assert drug_info.status_code == 200
    assert drug_info.json() == {"eatables": [], "count": 0}


async def test_update_and_delete_schedule(app_context) -> None:
    client = app_context["client"]
    headers, animal, food = await _setup(app_context)
    payload = {
        "animal_id": animal["id"],
        "eatables_id": food["id"],
        "category": "food",
        "daily": [{"time": "08:00:00", "capacity": 2}],
    }
    created = await client.post(
        "/api/v1/animals/eatables", json=payload, headers=headers
    )
    assignment_id = created.json()["id"]

    payload["daily"] = [{"time": "09:15:00", "capacity": 4}]
    updated = await client.put(
        f"/api/v1/animals/eatables/{assignment_id}", json=payload, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["daily"] == [{"time": "09:15:00", "capacity": 4}]

    deleted = await client.delete(
        f"/api/v1/animals/eatables/{assignment_id}", headers=headers
    )
    assert deleted.status_code == 204

    listing = await client.get(
        f"/api/v1/animals/{animal['id']}/food-info", headers=headers
    )
    assert listing.json()["count"] == 0

    again = await client.delete(
        f"/api/v1/animals/eatables/{assignment_id}", headers=headers
    )
    assert again.status_code == 404


async def test_schedule_rejects_unknown_references(app_context) -> None:
    client = app_context["client"]
    headers, animal, food = await _setup(app_context)

    wrong_category = await client.post(
        "/api/v1/animals/eatables",
        json={
            "animal_id": animal["id"],
            "eatables_id": food["id"],
            "category": "drug",
            "daily": [],
        },
        headers=headers,
    )
    assert wrong_category.status_code == 404

    unknown_animal = await client.post(
        "/api/v1/animals/eatables",
        json={
            "animal_id": str(uuid.uuid4()),
            "eatables_id": food["id"],
            "category": "food",
            "daily": [],
        },
        headers=headers,
    )
    assert unknown_animal.status_code == 404


async def test_schedule_rejects_malformed_time(app_context) -> None:
    client = app_context["client"]
    headers, animal, food = await _setup(app_context)
    response = await client.post(
        "/api/v1/animals/eatables",
        json={
            "animal_id": animal["id"],
            "eatables_id": food["id"],
            "category": "food",
            "daily": [{"time": "8am", "capacity": 1}],
        },
        headers=headers,
    )
    assert response.status_code == 422


async def test_given_eatables_ledger_flow(app_context) -> None:
    client = app_context["client"]
    headers, animal, food = await _setup(app_context)

    logged = await client.post(
        "/api/v1/animals/given-eatables",
        json={
            "animal_id": animal["id"],
            "eatables_id": food["id"],
            "category": "food",
            "day": "2025-01-01",
            "daily": [{"time": "08:05:00", "capacity": 2}],
        },
        headers=headers,
    )
    assert logged.status_code == 201, logged.text
    entry = logged.json()
    assert entry["day"] == "2025-01-01"

    updated = await client.put(
        f"/api/v1/animals/given-eatables/{entry['id']}",
        json={
            "animal_id": animal["id"],
            "eatables_id": food["id"],
            "category": "food",
            "day": "2025-01-02",
            "daily": [{"time": "08:10:00", "capacity": 1}],
        },
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["day"] == "2025-01-02"

    history = await client.get(
        f"/api/v1/animals/{animal['id']}/given-eatables", headers=headers
    )
    assert history.status_code == 200
    assert [item["id"] for item in history.json()] == [entry["id"]]

    deleted = await client.delete(
        f"/api/v1/animals/given-eatables/{entry['id']}", headers=headers
    )
    assert deleted.status_code == 204
    history = await client.get(
        f"/api/v1/animals/{animal['id']}/given-eatables", headers=headers
    )
    assert history.json() == []


async def test_viewer_cannot_log_feeding(app_context) -> None:
    client = app_context["client"]
    _, animal, food = await _setup(app_context)
    headers = await viewer_headers(app_context)
    response = await client.post(
        "/api/v1/animals/given-eatables",
        json={
            "animal_id": animal["id"],
            "eatables_id": food["id"],
            "category": "food",
            "day": "2025-01-01",
            "daily": [],
        },
        headers=headers,
    )
    assert response.status_code == 403
