"""Food catalog API."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmish.api.deps import CurrentUser, SessionDep
from farmish.models.catalog import EatableCategory, Food
from farmish.schemas.catalog import FoodCreate, FoodList, FoodRead, FoodUpdate
from farmish.security.permissions import require_writer
from farmish.services import catalog_service

router = APIRouter()


async def _get_or_404(session: AsyncSession, food_id: uuid.UUID) -> Food:
    food = await catalog_service.get_item(
        session, category=EatableCategory.FOOD, item_id=food_id
    )
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Food not found")
    return food


@router.post(
    "",
    response_model=FoodRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create food",
)
async def create_food(
    payload: FoodCreate, session: SessionDep, current_user: CurrentUser
) -> FoodRead:
    require_writer(current_user)
    try:
        food = await catalog_service.create_item(
            session, category=EatableCategory.FOOD, **payload.model_dump()
        )
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to create food"
        ) from exc
    return FoodRead.model_validate(food)


@router.get("", response_model=FoodList, summary="List foods")
async def list_foods(
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    name: str | None = Query(default=None),
) -> FoodList:
    foods, total = await catalog_service.list_items(
        session, category=EatableCategory.FOOD, page=page, limit=limit, name=name
    )
    return FoodList(foods=[FoodRead.model_validate(food) for food in foods], count=total)


@router.get("/{food_id}", response_model=FoodRead, summary="Get food")
async def get_food(
    food_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> FoodRead:
    return FoodRead.model_validate(await _get_or_404(session, food_id))


@router.put("/{food_id}", response_model=FoodRead, summary="Update food")
async def update_food(
    food_id: uuid.UUID,
    payload: FoodUpdate,
    session: SessionDep,
    current_user: CurrentUser,
) -> FoodRead:
    require_writer(current_user)
    food = await _get_or_404(session, food_id)
    updated = await catalog_service.update_item(
        session, item=food, **payload.model_dump()
    )
    return FoodRead.model_validate(updated)


@router.delete(
    "/{food_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete food"
)
async def delete_food(
    food_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> None:
    require_writer(current_user)
    food = await _get_or_404(session, food_id)
    await catalog_service.delete_item(session, item=food)
