"""Ledger of eatables actually given to animals."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmish.models.feeding import AnimalGivenEatable
from farmish.schemas.feeding import (
    GivenEatablesCreate,
    LedgerEntryRead,
    decode_slots,
    encode_slots,
)
from farmish.services import eatables_service


def _to_read(entry: AnimalGivenEatable) -> LedgerEntryRead:
    return LedgerEntryRead(
        id=entry.id,
        animal_id=entry.animal_id,
        eatables_id=entry.eatables_id,
        category=entry.category,
        day=entry.day,
        daily=decode_slots(entry.daily),
        created_at=entry.created_at,
        updated_at=entry.updated_at,
    )


async def load_ledger_entries(
    session: AsyncSession, *, animal_id: uuid.UUID
) -> list[LedgerEntryRead]:
    """Return every live ledger entry for an animal, across all logged days."""
    stmt = (
        select(AnimalGivenEatable)
        .where(
            AnimalGivenEatable.animal_id == animal_id,
            AnimalGivenEatable.deleted_at.is_(None),
        )
        .order_by(AnimalGivenEatable.day.asc(), AnimalGivenEatable.created_at.asc())
    )
    result = await session.execute(stmt)
    return [_to_read(entry) for entry in result.scalars().all()]


async def get_entry(
    session: AsyncSession, *, entry_id: uuid.UUID
) -> AnimalGivenEatable | None:
    result = await session.execute(
        select(AnimalGivenEatable).where(
            AnimalGivenEatable.id == entry_id,
            AnimalGivenEatable.deleted_at.is_(None),
        )
    )
    return result.scalar_one_or_none()


async def create_entry(
    session: AsyncSession, payload: GivenEatablesCreate
) -> LedgerEntryRead:
    """Log eatables given to an animal on ``payload.day``."""
    await eatables_service.ensure_references(
        session,
        animal_id=payload.animal_id,
        category=payload.category,
        eatables_id=payload.eatables_id,
    )
    entry = AnimalGivenEatable(
        animal_id=payload.animal_id,
        eatables_id=payload.eatables_id,
        category=payload.category,
        day=payload.day,
        daily=encode_slots(payload.daily),
    )
    session.add(entry)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(entry)
    return _to_read(entry)


async def update_entry(
    session: AsyncSession,
    *,
    entry: AnimalGivenEatable,
    payload: GivenEatablesCreate,
) -> LedgerEntryRead:
    await eatables_service.ensure_references(
        session,
        animal_id=payload.animal_id,
        category=payload.category,
        eatables_id=payload.eatables_id,
    )
    entry.animal_id = payload.animal_id
    entry.eatables_id = payload.eatables_id
    entry.category = payload.category
    entry.day = payload.day
    entry.daily = encode_slots(payload.daily)
    await session.commit()
    await session.refresh(entry)
    return _to_read(entry)


async def delete_entry(session: AsyncSession, *, entry: AnimalGivenEatable) -> None:
    entry.mark_deleted()
    await session.commit()
