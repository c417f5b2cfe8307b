"""Schedule assignment services.

Assignments link an animal to a food or drug item together with a daily list
of slots. Loading always joins the catalog table matching the assignment's
category and skips rows whose item has been soft-deleted.
"""

from __future__ import annotations

import uuid
from typing import Sequence

from sqlalchemy import Select, and_, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmish.models.catalog import Drug, EatableCategory, Food
from farmish.models.feeding import AnimalEatableInfo
from farmish.schemas.feeding import (
    EatablesInfoCreate,
    EatableSummary,
    ScheduleAssignmentRead,
    decode_slots,
    encode_slots,
)
from farmish.services import animal_service, catalog_service


def _validate_page(page: int, page_size: int) -> None:
    if page < 1:
        raise ValueError("page must be >= 1")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")


def _joined(stmt: Select) -> Select:
    """Join both catalogs and keep only rows whose matching item is live."""
    return (
        stmt.outerjoin(
            Food,
            and_(
                Food.id == AnimalEatableInfo.eatables_id,
                AnimalEatableInfo.category == EatableCategory.FOOD,
            ),
        )
        .outerjoin(
            Drug,
            and_(
                Drug.id == AnimalEatableInfo.eatables_id,
                AnimalEatableInfo.category == EatableCategory.DRUG,
            ),
        )
        .where(
            AnimalEatableInfo.deleted_at.is_(None),
            or_(
                and_(Food.id.is_not(None), Food.deleted_at.is_(None)),
                and_(Drug.id.is_not(None), Drug.deleted_at.is_(None)),
            ),
        )
    )


def _filtered(
    stmt: Select,
    *,
    category: EatableCategory | None,
    animal_id: uuid.UUID | None,
) -> Select:
    stmt = _joined(stmt)
    if category is not None:
        stmt = stmt.where(AnimalEatableInfo.category == category)
    if animal_id is not None:
        stmt = stmt.where(AnimalEatableInfo.animal_id == animal_id)
    return stmt


def _to_read(
    info: AnimalEatableInfo, item: Food | Drug
) -> ScheduleAssignmentRead:
    return ScheduleAssignmentRead(
        id=info.id,
        animal_id=info.animal_id,
        category=info.category,
        eatable=EatableSummary.model_validate(item),
        daily=decode_slots(info.daily),
    )


async def load_schedule_assignments(
    session: AsyncSession,
    *,
    page: int,
    page_size: int,
    category: EatableCategory | None = None,
    animal_id: uuid.UUID | None = None,
) -> list[ScheduleAssignmentRead]:
    """Return one page of live assignments with catalog fields and decoded slots.

    Raises ``SlotDecodeError`` if any row on the page holds a malformed slot
    list; no partial page is returned.
    """
    _validate_page(page, page_size)
    stmt = _filtered(
        select(AnimalEatableInfo, Food, Drug),
        category=category,
        animal_id=animal_id,
    )
    stmt = (
        stmt.order_by(AnimalEatableInfo.created_at.asc(), AnimalEatableInfo.id.asc())
        .offset(page_size * (page - 1))
        .limit(page_size)
    )
    result = await session.execute(stmt)
    return [_to_read(info, food or drug) for info, food, drug in result.all()]


async def count_schedule_assignments(
    session: AsyncSession,
    *,
    category: EatableCategory | None = None,
    animal_id: uuid.UUID | None = None,
) -> int:
    stmt = _filtered(
        select(func.count(AnimalEatableInfo.id)),
        category=category,
        animal_id=animal_id,
    )
    return (await session.execute(stmt)).scalar_one()


async def get_assignment(
    session: AsyncSession, *, assignment_id: uuid.UUID
) -> AnimalEatableInfo | None:
    result = await session.execute(
        select(AnimalEatableInfo).where(
            AnimalEatableInfo.id == assignment_id,
            AnimalEatableInfo.deleted_at.is_(None),
        )
    )
    return result.scalar_one_or_none()


async def ensure_references(
    session: AsyncSession,
    *,
    animal_id: uuid.UUID,
    category: EatableCategory,
    eatables_id: uuid.UUID,
) -> Food | Drug:
    """Check the animal is live and the item lives in the category's catalog."""
    await animal_service.resolve_animal(session, animal_id=animal_id)
    item = await catalog_service.get_item(
        session, category=category, item_id=eatables_id
    )
    if item is None:
        raise ValueError(f"No {category.value} item with id {eatables_id}")
    return item


async def create_assignment(
    session: AsyncSession, payload: EatablesInfoCreate
) -> ScheduleAssignmentRead:
    """Assign a feeding or medication schedule to an animal."""
    item = await ensure_references(
        session,
        animal_id=payload.animal_id,
        category=payload.category,
        eatables_id=payload.eatables_id,
    )
    info = AnimalEatableInfo(
        animal_id=payload.animal_id,
        eatables_id=payload.eatables_id,
        category=payload.category,
        daily=encode_slots(payload.daily),
    )
    session.add(info)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(info)
    return _to_read(info, item)


async def update_assignment(
    session: AsyncSession,
    *,
    assignment: AnimalEatableInfo,
    payload: EatablesInfoCreate,
) -> ScheduleAssignmentRead:
    """Replace an assignment's references and its whole slot list."""
    item = await ensure_references(
        session,
        animal_id=payload.animal_id,
        category=payload.category,
        eatables_id=payload.eatables_id,
    )
    assignment.animal_id = payload.animal_id
    assignment.eatables_id = payload.eatables_id
    assignment.category = payload.category
    assignment.daily = encode_slots(payload.daily)
    await session.commit()
    await session.refresh(assignment)
    return _to_read(assignment, item)


async def delete_assignment(
    session: AsyncSession, *, assignment: AnimalEatableInfo
) -> None:
    assignment.mark_deleted()
    await session.commit()


async def list_for_animal(
    session: AsyncSession,
    *,
    animal_id: uuid.UUID,
    category: EatableCategory,
    page: int,
    limit: int,
) -> tuple[Sequence[ScheduleAssignmentRead], int]:
    """Return an animal's assignments of one category plus their total."""
    rows = await load_schedule_assignments(
        session, page=page, page_size=limit, category=category, animal_id=animal_id
    )
    total = await count_schedule_assignments(
        session, category=category, animal_id=animal_id
    )
    return rows, total
