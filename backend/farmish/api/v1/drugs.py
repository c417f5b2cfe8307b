"""Drug catalog API."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmish.api.deps import CurrentUser, SessionDep
from farmish.models.catalog import Drug, EatableCategory
from farmish.schemas.catalog import DrugCreate, DrugList, DrugRead, DrugUpdate
from farmish.security.permissions import require_writer
from farmish.services import catalog_service

router = APIRouter()


async def _get_or_404(session: AsyncSession, drug_id: uuid.UUID) -> Drug:
    drug = await catalog_service.get_item(
        session, category=EatableCategory.DRUG, item_id=drug_id
    )
    if drug is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Drug not found")
    return drug


@router.post(
    "",
    response_model=DrugRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create drug",
)
async def create_drug(
    payload: DrugCreate, session: SessionDep, current_user: CurrentUser
) -> DrugRead:
    require_writer(current_user)
    try:
        drug = await catalog_service.create_item(
            session, category=EatableCategory.DRUG, **payload.model_dump()
        )
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to create drug"
        ) from exc
    return DrugRead.model_validate(drug)


@router.get("", response_model=DrugList, summary="List drugs")
async def list_drugs(
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    name: str | None = Query(default=None),
) -> DrugList:
    drugs, total = await catalog_service.list_items(
        session, category=EatableCategory.DRUG, page=page, limit=limit, name=name
    )
    return DrugList(drugs=[DrugRead.model_validate(drug) for drug in drugs], count=total)


@router.get("/{drug_id}", response_model=DrugRead, summary="Get drug")
async def get_drug(
    drug_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> DrugRead:
    return DrugRead.model_validate(await _get_or_404(session, drug_id))


@router.put("/{drug_id}", response_model=DrugRead, summary="Update drug")
async def update_drug(
    drug_id: uuid.UUID,
    payload: DrugUpdate,
    session: SessionDep,
    current_user: CurrentUser,
) -> DrugRead:
    require_writer(current_user)
    drug = await _get_or_404(session, drug_id)
    updated = await catalog_service.update_item(
        session, item=drug, **payload.model_dump()
    )
    return DrugRead.model_validate(updated)


@router.delete(
    "/{drug_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete drug"
)
async def delete_drug(
    drug_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> None:
    require_writer(current_user)
    drug = await _get_or_404(session, drug_id)
    await catalog_service.delete_item(session, item=drug)
