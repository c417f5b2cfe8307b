"""Delivery endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError

from farmish.api.deps import CurrentUser, SessionDep
from farmish.models.catalog import EatableCategory
from farmish.schemas.delivery import (
    DeliveryCreate,
    DeliveryList,
    DeliveryRead,
    DeliveryReceipt,
    DeliveryUpdate,
)
from farmish.security.permissions import require_writer
from farmish.services import delivery_service

router = APIRouter()


@router.post(
    "",
    response_model=DeliveryReceipt,
    status_code=status.HTTP_201_CREATED,
    summary="Record a delivery and restock the catalog",
)
async def create_delivery(
    payload: DeliveryCreate, session: SessionDep, current_user: CurrentUser
) -> DeliveryReceipt:
    require_writer(current_user)
    try:
        return await delivery_service.record_delivery(session, payload)
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to record delivery"
        ) from exc


@router.get("", response_model=DeliveryList, summary="List deliveries")
async def list_deliveries(
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    name: str | None = Query(default=None),
    category: EatableCategory | None = Query(default=None),
) -> DeliveryList:
    deliveries, total = await delivery_service.list_deliveries(
        session, page=page, limit=limit, name=name, category=category
    )
    return DeliveryList(
        deliveries=[DeliveryRead.model_validate(item) for item in deliveries],
        count=total,
    )


@router.get("/{delivery_id}", response_model=DeliveryRead, summary="Get delivery")
async def get_delivery(
    delivery_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> DeliveryRead:
    delivery = await delivery_service.get_delivery(session, delivery_id=delivery_id)
    if delivery is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Delivery not found"
        )
    return DeliveryRead.model_validate(delivery)


@router.put("/{delivery_id}", response_model=DeliveryRead, summary="Correct delivery")
async def update_delivery(
    delivery_id: uuid.UUID,
    payload: DeliveryUpdate,
    session: SessionDep,
    current_user: CurrentUser,
) -> DeliveryRead:
    require_writer(current_user)
    delivery = await delivery_service.get_delivery(session, delivery_id=delivery_id)
    if delivery is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Delivery not found"
        )
    delivery = await delivery_service.update_delivery(
        session, delivery=delivery, payload=payload
    )
    return DeliveryRead.model_validate(delivery)


@router.delete(
    "/{delivery_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete delivery",
)
async def delete_delivery(
    delivery_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> None:
    require_writer(current_user)
    delivery = await delivery_service.get_delivery(session, delivery_id=delivery_id)
    if delivery is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Delivery not found"
        )
    await delivery_service.delete_delivery(session, delivery=delivery)
