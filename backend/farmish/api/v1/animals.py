"""Animal management API."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from farmish.api.deps import CurrentUser, SessionDep
from farmish.models.animal import AnimalGender
from farmish.schemas.animal import AnimalCreate, AnimalList, AnimalRead, AnimalUpdate
from farmish.schemas.feeding import SlotDecodeError
from farmish.security.permissions import require_writer
from farmish.services import animal_service, hunger_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=AnimalRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register animal",
)
async def create_animal(
    payload: AnimalCreate,
    session: SessionDep,
    current_user: CurrentUser,
) -> AnimalRead:
    require_writer(current_user)
    try:
        animal = await animal_service.create_animal(session, **payload.model_dump())
    except IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to create animal"
        ) from exc
    return AnimalRead.model_validate(animal)


@router.get("", response_model=AnimalList, summary="List animals")
async def list_animals(
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    category: str | None = Query(default=None),
    genus: str | None = Query(default=None),
    gender: AnimalGender | None = Query(default=None),
    weight: float | None = Query(default=None, ge=0),
    is_health: bool | None = Query(default=None),
) -> AnimalList:
    """Return a page of animals; ``weight`` matches within ten percent."""
    animals, total = await animal_service.list_animals(
        session,
        page=page,
        limit=limit,
        category=category,
        genus=genus,
        gender=gender,
        weight=weight,
        is_health=is_health,
    )
    return AnimalList(
        animals=[AnimalRead.model_validate(animal) for animal in animals],
        count=total,
    )


@router.get(
    "/hungry",
    response_model=AnimalList,
    summary="List animals behind on their feeding schedule",
)
async def list_hungry_animals(
    session: SessionDep,
    current_user: CurrentUser,
    page: int = Query(..., ge=1),
    limit: int = Query(..., ge=1),
) -> AnimalList:
    """Run a detection pass over one page of schedule assignments.

    An empty list is a successful pass; any failure is a 500.
    """
    try:
        result = await hunger_service.detect_hungry_animals(
            session, page=page, limit=limit
        )
    except (SlotDecodeError, animal_service.AnimalNotFoundError, SQLAlchemyError) as exc:
        logger.exception("Hunger detection failed for page %s: %s", page, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to detect hungry animals",
        ) from exc
    return AnimalList(
        animals=[AnimalRead.model_validate(animal) for animal in result.animals],
        count=result.count,
    )


@router.get("/{animal_id}", response_model=AnimalRead, summary="Get animal")
async def get_animal(
    animal_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentUser,
) -> AnimalRead:
    animal = await animal_service.get_animal(session, animal_id=animal_id)
    if animal is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Animal not found"
        )
    return AnimalRead.model_validate(animal)


@router.put("/{animal_id}", response_model=AnimalRead, summary="Update animal")
async def update_animal(
    animal_id: uuid.UUID,
    payload: AnimalUpdate,
    session: SessionDep,
    current_user: CurrentUser,
) -> AnimalRead:
    require_writer(current_user)
    animal = await animal_service.get_animal(session, animal_id=animal_id)
    if animal is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Animal not found"
        )
    updated = await animal_service.update_animal(
        session, animal=animal, **payload.model_dump()
    )
    return AnimalRead.model_validate(updated)


@router.delete(
    "/{animal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete animal",
)
async def delete_animal(
    animal_id: uuid.UUID,
    session: SessionDep,
    current_user: CurrentUser,
) -> None:
    require_writer(current_user)
    animal = await animal_service.get_animal(session, animal_id=animal_id)
    if animal is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Animal not found"
        )
    await animal_service.delete_animal(session, animal=animal)
