"""Product catalog services."""

from __future__ import annotations

import uuid
from typing import Any, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmish.models.product import Product


async def list_products(
    session: AsyncSession,
    *,
    page: int = 1,
    limit: int = 10,
    name: str | None = None,
    union: str | None = None,
) -> tuple[Sequence[Product], int]:
    """Return a page of live products filtered by name and unit substrings."""
    filters = [Product.deleted_at.is_(None)]
    if name:
        filters.append(func.lower(Product.name).like(f"%{name.lower()}%"))
    if union:
        filters.append(func.lower(Product.product_union).like(f"%{union.lower()}%"))

    stmt = (
        select(Product)
        .where(*filters)
        .order_by(Product.name.asc(), Product.id.asc())
        .offset(limit * (page - 1))
        .limit(limit)
    )
    result = await session.execute(stmt)
    total = (
        await session.execute(select(func.count(Product.id)).where(*filters))
    ).scalar_one()
    return result.scalars().all(), total


async def get_product(
    session: AsyncSession, *, product_id: uuid.UUID
) -> Product | None:
    result = await session.execute(
        select(Product).where(Product.id == product_id, Product.deleted_at.is_(None))
    )
    return result.scalar_one_or_none()


async def create_product(session: AsyncSession, **fields: Any) -> Product:
    product = Product(**fields)
    session.add(product)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(product)
    return product


async def update_product(
    session: AsyncSession, *, product: Product, **fields: Any
) -> Product:
    for key, value in fields.items():
        setattr(product, key, value)
    await session.commit()
    await session.refresh(product)
    return product


async def delete_product(session: AsyncSession, *, product: Product) -> None:
    """Soft-delete a product; its recorded yields stop being listed."""
    product.mark_deleted()
    await session.commit()
