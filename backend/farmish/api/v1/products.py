"""Product catalog API."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmish.api.deps import CurrentUser, SessionDep
from farmish.models.product import Product
from farmish.schemas.product import (
    ProductAnimalsSummary,
    ProductCreate,
    ProductList,
    ProductRead,
    ProductUpdate,
)
from farmish.security.permissions import require_writer
from farmish.services import animal_product_service, product_service

router = APIRouter()


async def _get_or_404(session: AsyncSession, product_id: uuid.UUID) -> Product:
    product = await product_service.get_product(session, product_id=product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Product not found"
        )
    return product


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
)
async def create_product(
    payload: ProductCreate, session: SessionDep, current_user: CurrentUser
) -> ProductRead:
    require_writer(current_user)
    try:
        product = await product_service.create_product(session, **payload.model_dump())
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to create product"
        ) from exc
    return ProductRead.model_validate(product)


@router.get("", response_model=ProductList, summary="List products")
async def list_products(
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    name: str | None = Query(default=None),
    union: str | None = Query(default=None),
) -> ProductList:
    products, total = await product_service.list_products(
        session, page=page, limit=limit, name=name, union=union
    )
    return ProductList(
        products=[ProductRead.model_validate(product) for product in products],
        count=total,
    )


@router.get("/{product_id}", response_model=ProductRead, summary="Get product")
async def get_product(
    product_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> ProductRead:
    return ProductRead.model_validate(await _get_or_404(session, product_id))


@router.put("/{product_id}", response_model=ProductRead, summary="Update product")
async def update_product(
    product_id: uuid.UUID,
    payload: ProductUpdate,
    session: SessionDep,
    current_user: CurrentUser,
) -> ProductRead:
    require_writer(current_user)
    product = await _get_or_404(session, product_id)
    updated = await product_service.update_product(
        session, product=product, **payload.model_dump()
    )
    return ProductRead.model_validate(updated)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete product",
)
async def delete_product(
    product_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> None:
    require_writer(current_user)
    product = await _get_or_404(session, product_id)
    await product_service.delete_product(session, product=product)


@router.get(
    "/{product_id}/animals",
    response_model=ProductAnimalsSummary,
    summary="List the animals that gave a product",
)
async def list_product_animals(
    product_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> ProductAnimalsSummary:
    product = await _get_or_404(session, product_id)
    animals, total = await animal_product_service.animals_for_product(
        session, product_id=product.id, page=page, limit=limit
    )
    return ProductAnimalsSummary(
        product=ProductRead.model_validate(product), animals=animals, count=total
    )
