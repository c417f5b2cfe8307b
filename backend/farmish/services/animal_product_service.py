"""Yields collected from animals and their effect on product totals.

Recording a yield adds its capacity to the product's running total in the
same commit. Corrections and deletions change only the yield record, the same
way delivery records relate to catalog stock.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, time, timedelta

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmish.models.animal import Animal
from farmish.models.product import AnimalProduct, Product
from farmish.schemas.animal import AnimalRead
from farmish.schemas.product import (
    AnimalProductCreate,
    AnimalProductRead,
    AnimalYield,
    ProductYield,
)
from farmish.services import animal_service, product_service

logger = logging.getLogger(__name__)


def _live(stmt: Select) -> Select:
    return (
        stmt.join(Animal, Animal.id == AnimalProduct.animal_id)
        .join(Product, Product.id == AnimalProduct.product_id)
        .where(
            AnimalProduct.deleted_at.is_(None),
            Animal.deleted_at.is_(None),
            Product.deleted_at.is_(None),
        )
    )


def _to_read(row: AnimalProduct, animal: Animal, product: Product) -> AnimalProductRead:
    return AnimalProductRead(
        id=row.id,
        animal_id=animal.id,
        animal_name=animal.name,
        animal_category=animal.category_name,
        product_id=product.id,
        product_name=product.name,
        product_union=product.product_union,
        capacity=row.capacity,
        get_time=row.get_time,
    )


async def _resolve_product(session: AsyncSession, product_id: uuid.UUID) -> Product:
    product = await product_service.get_product(session, product_id=product_id)
    if product is None:
        raise ValueError(f"Product {product_id} not found")
    return product


async def get_yield_row(
    session: AsyncSession, *, yield_id: uuid.UUID
) -> AnimalProduct | None:
    result = await session.execute(
        select(AnimalProduct).where(
            AnimalProduct.id == yield_id, AnimalProduct.deleted_at.is_(None)
        )
    )
    return result.scalar_one_or_none()


async def get_yield(
    session: AsyncSession, *, yield_id: uuid.UUID
) -> AnimalProductRead | None:
    """Return a live yield whose animal and product are also live."""
    stmt = _live(select(AnimalProduct, Animal, Product)).where(
        AnimalProduct.id == yield_id
    )
    row = (await session.execute(stmt)).first()
    if row is None:
        return None
    return _to_read(*row)


async def list_yields(
    session: AsyncSession,
    *,
    page: int = 1,
    limit: int = 10,
    day: date | None = None,
    animal_id: uuid.UUID | None = None,
    product_id: uuid.UUID | None = None,
) -> tuple[list[AnimalProductRead], int]:
    filters = []
    if day is not None:
        start = datetime.combine(day, time.min)
        filters.extend(
            [
                AnimalProduct.get_time >= start,
                AnimalProduct.get_time < start + timedelta(days=1),
            ]
        )
    if animal_id is not None:
        filters.append(AnimalProduct.animal_id == animal_id)
    if product_id is not None:
        filters.append(AnimalProduct.product_id == product_id)

    stmt = (
        _live(select(AnimalProduct, Animal, Product))
        .where(*filters)
        .order_by(AnimalProduct.get_time.desc(), AnimalProduct.id.asc())
        .offset(limit * (page - 1))
        .limit(limit)
    )
    rows = (await session.execute(stmt)).all()
    total = (
        await session.execute(
            _live(select(func.count(AnimalProduct.id))).where(*filters)
        )
    ).scalar_one()
    return [_to_read(*row) for row in rows], total


async def record_yield(
    session: AsyncSession, payload: AnimalProductCreate
) -> AnimalProductRead:
    """Store a yield and add its capacity to the product's total."""
    animal = await animal_service.resolve_animal(session, animal_id=payload.animal_id)
    product = await _resolve_product(session, payload.product_id)
    row = AnimalProduct(
        animal_id=animal.id,
        product_id=product.id,
        capacity=payload.capacity,
        get_time=payload.get_time,
    )
    session.add(row)
    product.total_capacity = product.total_capacity + payload.capacity
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(row)
    await session.refresh(product)
    logger.info(
        "Collected %s %s of %s from %s; total now %s",
        payload.capacity,
        product.product_union,
        product.name,
        animal.name,
        product.total_capacity,
    )
    return _to_read(row, animal, product)


async def update_yield(
    session: AsyncSession, *, row: AnimalProduct, payload: AnimalProductCreate
) -> AnimalProductRead:
    animal = await animal_service.resolve_animal(session, animal_id=payload.animal_id)
    product = await _resolve_product(session, payload.product_id)
    row.animal_id = animal.id
    row.product_id = product.id
    row.capacity = payload.capacity
    row.get_time = payload.get_time
    await session.commit()
    await session.refresh(row)
    return _to_read(row, animal, product)


async def delete_yield(session: AsyncSession, *, row: AnimalProduct) -> None:
    row.mark_deleted()
    await session.commit()


async def products_for_animal(
    session: AsyncSession, *, animal_id: uuid.UUID, page: int = 1, limit: int = 10
) -> tuple[list[ProductYield], int]:
    """Return the products an animal has given with the summed quantity of each."""
    collected = func.sum(AnimalProduct.capacity).label("collected")
    filters = [
        AnimalProduct.animal_id == animal_id,
        AnimalProduct.deleted_at.is_(None),
        Product.deleted_at.is_(None),
    ]
    stmt = (
        select(Product, collected)
        .join(AnimalProduct, AnimalProduct.product_id == Product.id)
        .where(*filters)
        .group_by(Product.id)
        .order_by(collected.desc(), Product.id.asc())
        .offset(limit * (page - 1))
        .limit(limit)
    )
    rows = (await session.execute(stmt)).all()
    total = (
        await session.execute(
            select(func.count(func.distinct(AnimalProduct.product_id)))
            .join(Product, Product.id == AnimalProduct.product_id)
            .where(*filters)
        )
    ).scalar_one()
    return [
        ProductYield(
            id=product.id,
            name=product.name,
            product_union=product.product_union,
            description=product.description,
            total_capacity=int(amount),
        )
        for product, amount in rows
    ], total


async def animals_for_product(
    session: AsyncSession, *, product_id: uuid.UUID, page: int = 1, limit: int = 10
) -> tuple[list[AnimalYield], int]:
    """Return the animals that gave a product, biggest contributors first."""
    collected = func.sum(AnimalProduct.capacity).label("collected")
    filters = [
        AnimalProduct.product_id == product_id,
        AnimalProduct.deleted_at.is_(None),
        Animal.deleted_at.is_(None),
    ]
    stmt = (
        select(Animal, collected)
        .join(AnimalProduct, AnimalProduct.animal_id == Animal.id)
        .where(*filters)
        .group_by(Animal.id)
        .order_by(collected.desc(), Animal.id.asc())
        .offset(limit * (page - 1))
        .limit(limit)
    )
    rows = (await session.execute(stmt)).all()
    total = (
        await session.execute(
            select(func.count(func.distinct(AnimalProduct.animal_id)))
            .join(Animal, Animal.id == AnimalProduct.animal_id)
            .where(*filters)
        )
    ).scalar_one()
    return [
        AnimalYield(
            **AnimalRead.model_validate(animal).model_dump(), total_capacity=int(amount)
        )
        for animal, amount in rows
    ], total
