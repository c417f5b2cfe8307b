"""Shared API helpers for tests."""

from __future__ import annotations

from typing import Any

from httpx import AsyncClient


async def authenticate(client: AsyncClient, email: str, password: str) -> dict[str, str]:
    response = await client.post(
        "/api/v1/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


async def manager_headers(app_context: dict[str, Any]) -> dict[str, str]:
    return await authenticate(
        app_context["client"],
        app_context["manager_email"],
        app_context["manager_password"],
    )


async def viewer_headers(app_context: dict[str, Any]) -> dict[str, str]:
    return await authenticate(
        app_context["client"],
        app_context["viewer_email"],
        app_context["viewer_password"],
    )


async def create_animal(
    client: AsyncClient, headers: dict[str, str], **overrides: Any
) -> dict[str, Any]:
    payload = {
        "name": "Bessie",
        "category_name": "Cow",
        "gender": "female",
        "genus": "Bos",
        "weight": 500,
        "date_of_birth": "2021-03-14",
    }
    payload.update(overrides)
    response = await client.post("/api/v1/animals", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def create_food(
    client: AsyncClient, headers: dict[str, str], name: str = "hay"
) -> dict[str, Any]:
    response = await client.post(
        "/api/v1/foods",
        json={"name": name, "capacity": 100, "product_union": "kg"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
