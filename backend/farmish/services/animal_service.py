"""Animal management service helpers."""

from __future__ import annotations

import uuid
from typing import Any, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmish.models.animal import Animal, AnimalGender


class AnimalNotFoundError(ValueError):
    """Raised when an animal id does not resolve to a live animal."""

    def __init__(self, animal_id: uuid.UUID) -> None:
        super().__init__(f"Animal {animal_id} not found")
        self.animal_id = animal_id


def _apply_filters(
    stmt: Select,
    *,
    category: str | None,
    genus: str | None,
    gender: AnimalGender | None,
    weight: float | None,
    is_health: bool | None,
) -> Select:
    stmt = stmt.where(Animal.deleted_at.is_(None))
    if category:
        stmt = stmt.where(func.lower(Animal.category_name).like(f"%{category.lower()}%"))
    if genus:
        stmt = stmt.where(
            func.lower(func.coalesce(Animal.genus, "")).like(f"%{genus.lower()}%")
        )
    if gender is not None:
        stmt = stmt.where(Animal.gender == gender)
    if weight:
        # Weight matches anything within ten percent either side.
        spread = weight / 10
        stmt = stmt.where(
            Animal.weight >= weight - spread, Animal.weight <= weight + spread
        )
    if is_health is not None:
        stmt = stmt.where(Animal.is_health.is_(is_health))
    return stmt


async def list_animals(
    session: AsyncSession,
    *,
    page: int = 1,
    limit: int = 10,
    category: str | None = None,
    genus: str | None = None,
    gender: AnimalGender | None = None,
    weight: float | None = None,
    is_health: bool | None = None,
) -> tuple[Sequence[Animal], int]:
    """Return one page of live animals and the total matching the filters."""
    filters: dict[str, Any] = {
        "category": category,
        "genus": genus,
        "gender": gender,
        "weight": weight,
        "is_health": is_health,
    }
    stmt = _apply_filters(select(Animal), **filters)
    if weight:
        stmt = stmt.order_by(Animal.weight.desc())
    else:
        stmt = stmt.order_by(Animal.created_at.asc(), Animal.id.asc())
    stmt = stmt.offset(limit * (page - 1)).limit(limit)
    result = await session.execute(stmt)
    animals = result.scalars().all()

    count_stmt = _apply_filters(select(func.count(Animal.id)), **filters)
    total = (await session.execute(count_stmt)).scalar_one()
    return animals, total


async def get_animal(session: AsyncSession, *, animal_id: uuid.UUID) -> Animal | None:
    """Return a live animal or ``None``."""
    result = await session.execute(
        select(Animal).where(Animal.id == animal_id, Animal.deleted_at.is_(None))
    )
    return result.scalar_one_or_none()


async def resolve_animal(session: AsyncSession, *, animal_id: uuid.UUID) -> Animal:
    """Return a live animal, raising :class:`AnimalNotFoundError` otherwise."""
    animal = await get_animal(session, animal_id=animal_id)
    if animal is None:
        raise AnimalNotFoundError(animal_id)
    return animal


async def create_animal(session: AsyncSession, **fields: Any) -> Animal:
    """Register a new animal."""
    animal = Animal(**fields)
    session.add(animal)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(animal)
    return animal


async def update_animal(
    session: AsyncSession, *, animal: Animal, **fields: Any
) -> Animal:
    """Replace the mutable fields of an animal."""
    for key, value in fields.items():
        setattr(animal, key, value)
    await session.commit()
    await session.refresh(animal)
    return animal


async def delete_animal(session: AsyncSession, *, animal: Animal) -> None:
    """Soft-delete an animal; its schedules and ledger rows are left untouched."""
    animal.mark_deleted()
    await session.commit()
