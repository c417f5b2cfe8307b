"""Food and drug catalog services."""

from __future__ import annotations

import uuid
from typing import Any, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmish.models.catalog import CATALOG_MODELS, Drug, EatableCategory, Food

CatalogItem = Food | Drug


def _model_for(category: EatableCategory) -> type[Food] | type[Drug]:
    return CATALOG_MODELS[EatableCategory(category)]


async def list_items(
    session: AsyncSession,
    *,
    category: EatableCategory,
    page: int = 1,
    limit: int = 10,
    name: str | None = None,
) -> tuple[Sequence[CatalogItem], int]:
    """Return a page of live catalog items of one category plus the total."""
    model = _model_for(category)
    filters = [model.deleted_at.is_(None)]
    if name:
        filters.append(func.lower(model.name).like(f"%{name.lower()}%"))

    stmt = (
        select(model)
        .where(*filters)
        .order_by(model.name.asc(), model.id.asc())
        .offset(limit * (page - 1))
        .limit(limit)
    )
    result = await session.execute(stmt)
    total = (
        await session.execute(select(func.count(model.id)).where(*filters))
    ).scalar_one()
    return result.scalars().all(), total


async def get_item(
    session: AsyncSession, *, category: EatableCategory, item_id: uuid.UUID
) -> CatalogItem | None:
    """Return a live catalog item by id."""
    model = _model_for(category)
    result = await session.execute(
        select(model).where(model.id == item_id, model.deleted_at.is_(None))
    )
    return result.scalar_one_or_none()


async def find_item_by_name(
    session: AsyncSession, *, category: EatableCategory, name: str
) -> CatalogItem | None:
    """Return the live catalog item with exactly ``name`` (case-insensitive)."""
    model = _model_for(category)
    result = await session.execute(
        select(model)
        .where(func.lower(model.name) == name.lower(), model.deleted_at.is_(None))
        .order_by(model.created_at.asc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def create_item(
    session: AsyncSession,
    *,
    category: EatableCategory,
    commit: bool = True,
    **fields: Any,
) -> CatalogItem:
    """Create a catalog item of the given category."""
    model = _model_for(category)
    item = model(**fields)
    session.add(item)
    if not commit:
        await session.flush()
        return item
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(item)
    return item


async def update_item(
    session: AsyncSession, *, item: CatalogItem, **fields: Any
) -> CatalogItem:
    for key, value in fields.items():
        setattr(item, key, value)
    await session.commit()
    await session.refresh(item)
    return item


async def delete_item(session: AsyncSession, *, item: CatalogItem) -> None:
    """Soft-delete a catalog item; assignments pointing at it stop loading."""
    item.mark_deleted()
    await session.commit()
