"""Deliveries into the store and their effect on catalog stock."""

from __future__ import annotations

import logging
import uuid
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmish.models.catalog import EatableCategory
from farmish.models.delivery import Delivery
from farmish.schemas.delivery import (
    DeliveryCreate,
    DeliveryRead,
    DeliveryReceipt,
    DeliveryUpdate,
)
from farmish.services import catalog_service

logger = logging.getLogger(__name__)


async def record_delivery(
    session: AsyncSession, payload: DeliveryCreate
) -> DeliveryReceipt:
    """Store a delivery and add its capacity to the matching catalog item.

    The catalog item is matched by name within the delivery's category and is
    created when none exists. Both writes commit together.
    """
    delivery = Delivery(
        product_name=payload.product_name,
        category=payload.category,
        capacity=payload.capacity,
        product_union=payload.product_union,
        delivered_on=payload.delivered_on,
    )
    session.add(delivery)

    item = await catalog_service.find_item_by_name(
        session, category=payload.category, name=payload.product_name
    )
    created = item is None
    if item is None:
        fields: dict[str, object] = {
            "name": payload.product_name,
            "capacity": payload.capacity,
            "product_union": payload.product_union,
            "description": payload.description,
        }
        if payload.category == EatableCategory.DRUG:
            fields["status"] = payload.status
        item = await catalog_service.create_item(
            session, category=payload.category, commit=False, **fields
        )
    else:
        item.capacity = item.capacity + payload.capacity

    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(delivery)
    await session.refresh(item)
    logger.info(
        "Delivery of %s %s %s recorded; %s stock now %s",
        payload.capacity,
        payload.product_union,
        payload.product_name,
        payload.category.value,
        item.capacity,
    )
    return DeliveryReceipt(
        delivery=DeliveryRead.model_validate(delivery),
        catalog_item_id=item.id,
        catalog_capacity=item.capacity,
        created_catalog_item=created,
    )


async def get_delivery(
    session: AsyncSession, *, delivery_id: uuid.UUID
) -> Delivery | None:
    result = await session.execute(
        select(Delivery).where(
            Delivery.id == delivery_id, Delivery.deleted_at.is_(None)
        )
    )
    return result.scalar_one_or_none()


async def list_deliveries(
    session: AsyncSession,
    *,
    page: int = 1,
    limit: int = 10,
    name: str | None = None,
    category: EatableCategory | None = None,
) -> tuple[Sequence[Delivery], int]:
    filters = [Delivery.deleted_at.is_(None)]
    if name:
        filters.append(func.lower(Delivery.product_name).like(f"%{name.lower()}%"))
    if category is not None:
        filters.append(Delivery.category == category)

    stmt = (
        select(Delivery)
        .where(*filters)
        .order_by(Delivery.delivered_on.desc(), Delivery.created_at.desc())
        .offset(limit * (page - 1))
        .limit(limit)
    )
    result = await session.execute(stmt)
    total = (
        await session.execute(select(func.count(Delivery.id)).where(*filters))
    ).scalar_one()
    return result.scalars().all(), total


async def update_delivery(
    session: AsyncSession, *, delivery: Delivery, payload: DeliveryUpdate
) -> Delivery:
    """Correct a delivery record without touching catalog stock."""
    for key, value in payload.model_dump().items():
        setattr(delivery, key, value)
    await session.commit()
    await session.refresh(delivery)
    return delivery


async def delete_delivery(session: AsyncSession, *, delivery: Delivery) -> None:
    """Soft-delete a delivery record; catalog stock is not rolled back."""
    delivery.mark_deleted()
    await session.commit()
