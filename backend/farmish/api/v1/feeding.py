"""Schedule assignment and feeding ledger endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError

from farmish.api.deps import CurrentUser, SessionDep
from farmish.models.catalog import EatableCategory
from farmish.schemas.feeding import (
    EatablesInfoCreate,
    EatablesInfoUpdate,
    GivenEatablesCreate,
    GivenEatablesUpdate,
    LedgerEntryRead,
    ScheduleAssignmentList,
    ScheduleAssignmentRead,
)
from farmish.security.permissions import require_writer
from farmish.services import animal_service, eatables_service, feeding_service

router = APIRouter(prefix="/animals")


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.post(
    "/eatables",
    response_model=ScheduleAssignmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Assign a feeding or medication schedule",
)
async def create_eatables_info(
    payload: EatablesInfoCreate,
    session: SessionDep,
    current_user: CurrentUser,
) -> ScheduleAssignmentRead:
    require_writer(current_user)
    try:
        return await eatables_service.create_assignment(session, payload)
    except ValueError as exc:
        raise _not_found(str(exc)) from exc
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to assign schedule"
        ) from exc


@router.put(
    "/eatables/{assignment_id}",
    response_model=ScheduleAssignmentRead,
    summary="Replace a schedule assignment",
)
async def update_eatables_info(
    assignment_id: uuid.UUID,
    payload: EatablesInfoUpdate,
    session: SessionDep,
    current_user: CurrentUser,
) -> ScheduleAssignmentRead:
    require_writer(current_user)
    assignment = await eatables_service.get_assignment(
        session, assignment_id=assignment_id
    )
    if assignment is None:
        raise _not_found("Schedule assignment not found")
    try:
        return await eatables_service.update_assignment(
            session, assignment=assignment, payload=payload
        )
    except ValueError as exc:
        raise _not_found(str(exc)) from exc


@router.delete(
    "/eatables/{assignment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a schedule assignment",
)
async def delete_eatables_info(
    assignment_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentUser,
) -> None:
    require_writer(current_user)
    assignment = await eatables_service.get_assignment(
        session, assignment_id=assignment_id
    )
    if assignment is None:
        raise _not_found("Schedule assignment not found")
    await eatables_service.delete_assignment(session, assignment=assignment)


async def _list_info(
    session: SessionDep,
    *,
    animal_id: uuid.UUID,
    category: EatableCategory,
    page: int,
    limit: int,
) -> ScheduleAssignmentList:
    if await animal_service.get_animal(session, animal_id=animal_id) is None:
        raise _not_found("Animal not found")
    rows, total = await eatables_service.list_for_animal(
        session, animal_id=animal_id, category=category, page=page, limit=limit
    )
    return ScheduleAssignmentList(eatables=list(rows), count=total)


@router.get(
    "/{animal_id}/food-info",
    response_model=ScheduleAssignmentList,
    summary="List an animal's feeding schedules",
)
async def list_food_info(
    animal_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> ScheduleAssignmentList:
    return await _list_info(
        session,
        animal_id=animal_id,
        category=EatableCategory.FOOD,
        page=page,
        limit=limit,
    )


@router.get(
    "/{animal_id}/drug-info",
    response_model=ScheduleAssignmentList,
    summary="List an animal's medication schedules",
)
async def list_drug_info(
    animal_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> ScheduleAssignmentList:
    return await _list_info(
        session,
        animal_id=animal_id,
        category=EatableCategory.DRUG,
        page=page,
        limit=limit,
    )


@router.post(
    "/given-eatables",
    response_model=LedgerEntryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Log eatables given to an animal",
)
async def create_given_eatables(
    payload: GivenEatablesCreate,
    session: SessionDep,
    current_user: CurrentUser,
) -> LedgerEntryRead:
    require_writer(current_user)
    try:
        return await feeding_service.create_entry(session, payload)
    except ValueError as exc:
        raise _not_found(str(exc)) from exc
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to log feeding"
        ) from exc


@router.put(
    "/given-eatables/{entry_id}",
    response_model=LedgerEntryRead,
    summary="Replace a ledger entry",
)
async def update_given_eatables(
    entry_id: uuid.UUID,
    payload: GivenEatablesUpdate,
    session: SessionDep,
    current_user: CurrentUser,
) -> LedgerEntryRead:
    require_writer(current_user)
    entry = await feeding_service.get_entry(session, entry_id=entry_id)
    if entry is None:
        raise _not_found("Ledger entry not found")
    try:
        return await feeding_service.update_entry(session, entry=entry, payload=payload)
    except ValueError as exc:
        raise _not_found(str(exc)) from exc


@router.delete(
    "/given-eatables/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a ledger entry",
)
async def delete_given_eatables(
    entry_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentUser,
) -> None:
    require_writer(current_user)
    entry = await feeding_service.get_entry(session, entry_id=entry_id)
    if entry is None:
        raise _not_found("Ledger entry not found")
    await feeding_service.delete_entry(session, entry=entry)


@router.get(
    "/{animal_id}/given-eatables",
    response_model=list[LedgerEntryRead],
    summary="List eatables given to an animal",
)
async def list_given_eatables(
    animal_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentUser,
) -> list[LedgerEntryRead]:
    if await animal_service.get_animal(session, animal_id=animal_id) is None:
        raise _not_found("Animal not found")
    return await feeding_service.load_ledger_entries(session, animal_id=animal_id)
