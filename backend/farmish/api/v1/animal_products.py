"""Endpoints recording what each animal yields."""
from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError

from farmish.api.deps import CurrentUser, SessionDep
from farmish.schemas.animal import AnimalRead
from farmish.schemas.product import (
    AnimalProductCreate,
    AnimalProductList,
    AnimalProductRead,
    AnimalProductsSummary,
    AnimalProductUpdate,
)
from farmish.security.permissions import require_writer
from farmish.services import animal_product_service, animal_service

router = APIRouter(prefix="/animals")


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.post(
    "/products",
    response_model=AnimalProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record a yield collected from an animal",
)
async def create_animal_product(
    payload: AnimalProductCreate,
    session: SessionDep,
    current_user: CurrentUser,
) -> AnimalProductRead:
    require_writer(current_user)
    try:
        return await animal_product_service.record_yield(session, payload)
    except ValueError as exc:
        raise _not_found(str(exc)) from exc
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to record yield"
        ) from exc


@router.get(
    "/products", response_model=AnimalProductList, summary="List recorded yields"
)
async def list_animal_products(
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    day: date | None = Query(default=None),
    animal_id: uuid.UUID | None = Query(default=None),
    product_id: uuid.UUID | None = Query(default=None),
) -> AnimalProductList:
    rows, total = await animal_product_service.list_yields(
        session,
        page=page,
        limit=limit,
        day=day,
        animal_id=animal_id,
        product_id=product_id,
    )
    return AnimalProductList(animal_products=rows, count=total)


@router.get(
    "/products/{yield_id}", response_model=AnimalProductRead, summary="Get yield"
)
async def get_animal_product(
    yield_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> AnimalProductRead:
    record = await animal_product_service.get_yield(session, yield_id=yield_id)
    if record is None:
        raise _not_found("Yield not found")
    return record


@router.put(
    "/products/{yield_id}", response_model=AnimalProductRead, summary="Correct yield"
)
async def update_animal_product(
    yield_id: uuid.UUID,
    payload: AnimalProductUpdate,
    session: SessionDep,
    current_user: CurrentUser,
) -> AnimalProductRead:
    require_writer(current_user)
    row = await animal_product_service.get_yield_row(session, yield_id=yield_id)
    if row is None:
        raise _not_found("Yield not found")
    try:
        return await animal_product_service.update_yield(
            session, row=row, payload=payload
        )
    except ValueError as exc:
        raise _not_found(str(exc)) from exc


@router.delete(
    "/products/{yield_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete yield",
)
async def delete_animal_product(
    yield_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> None:
    require_writer(current_user)
    row = await animal_product_service.get_yield_row(session, yield_id=yield_id)
    if row is None:
        raise _not_found("Yield not found")
    await animal_product_service.delete_yield(session, row=row)


@router.get(
    "/{animal_id}/products",
    response_model=AnimalProductsSummary,
    summary="List the products an animal has given",
)
async def list_products_of_animal(
    animal_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> AnimalProductsSummary:
    animal = await animal_service.get_animal(session, animal_id=animal_id)
    if animal is None:
        raise _not_found("Animal not found")
    products, total = await animal_product_service.products_for_animal(
        session, animal_id=animal.id, page=page, limit=limit
    )
    return AnimalProductsSummary(
        animal=AnimalRead.model_validate(animal), products=products, count=total
    )
