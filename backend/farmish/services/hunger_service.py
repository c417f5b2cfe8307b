"""Detect animals whose logged feedings lag behind their schedule.

A detection pass works on one page of food schedule assignments; medication
plans never make an animal hungry:

1. Every slot whose hour is later than the current hour records that slot as
   the animal's *upcoming* slot. Later slots in iteration order overwrite
   earlier ones (last write wins, not the maximum).
2. For each animal with an upcoming slot, every slot in its ledger is
   compared against it. Each logged slot at least ``HUNGER_LAG_HOURS`` before
   the upcoming hour flags the animal once more, so an animal may be flagged
   several times.
3. Flagged ids are resolved to animal records in flag order.

Unless deduplication is requested, repeated flags are kept and counted.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sqlalchemy.ext.asyncio import AsyncSession

from farmish.core.config import get_settings
from farmish.models.animal import Animal
from farmish.models.catalog import EatableCategory
from farmish.schemas.feeding import ScheduleAssignmentRead
from farmish.services import animal_service, eatables_service, feeding_service

logger = logging.getLogger(__name__)

HUNGER_LAG_HOURS = 1


@dataclass
class HungryAnimalsResult:
    animals: list[Animal] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.animals)


def _farm_now() -> datetime:
    """Return the current wall-clock time in the farm's timezone."""
    tz_name = get_settings().farm_timezone
    if not tz_name:
        return datetime.now()
    try:
        return datetime.now(ZoneInfo(tz_name))
    except ZoneInfoNotFoundError:
        logger.warning("Unknown FARM_TIMEZONE %r; using server local time", tz_name)
        return datetime.now()


def upcoming_slots(
    assignments: list[ScheduleAssignmentRead], *, current_hour: int
) -> dict[uuid.UUID, time]:
    """Map each animal to its last-seen slot later than ``current_hour``."""
    upcoming: dict[uuid.UUID, time] = {}
    for assignment in assignments:
        for slot in assignment.daily:
            if slot.hour > current_hour:
                upcoming[assignment.animal_id] = slot.time
    return upcoming


async def flag_lagging_animals(
    session: AsyncSession, upcoming: dict[uuid.UUID, time]
) -> list[uuid.UUID]:
    """Return one animal id per logged slot lagging its upcoming slot.

    Ledgers are loaded one animal at a time in ``upcoming`` order.
    """
    flagged: list[uuid.UUID] = []
    for animal_id, upcoming_time in upcoming.items():
        entries = await feeding_service.load_ledger_entries(
            session, animal_id=animal_id
        )
        for entry in entries:
            for logged in entry.daily:
                if upcoming_time.hour - logged.hour >= HUNGER_LAG_HOURS:
                    flagged.append(animal_id)
    return flagged


async def detect_hungry_animals(
    session: AsyncSession,
    *,
    page: int,
    limit: int,
    now: datetime | None = None,
    deduplicate: bool | None = None,
) -> HungryAnimalsResult:
    """Run one detection pass over a page of schedule assignments.

    Any storage, decoding or resolution error aborts the pass.
    """
    if deduplicate is None:
        deduplicate = get_settings().hungry_deduplicate
    current_hour = (now or _farm_now()).hour

    assignments = await eatables_service.load_schedule_assignments(
        session, page=page, page_size=limit, category=EatableCategory.FOOD
    )
    upcoming = upcoming_slots(assignments, current_hour=current_hour)
    logger.debug(
        "Hunger pass page=%s limit=%s hour=%s: %s assignments, %s with upcoming slots",
        page,
        limit,
        current_hour,
        len(assignments),
        len(upcoming),
    )

    flagged = await flag_lagging_animals(session, upcoming)
    if deduplicate:
        flagged = list(dict.fromkeys(flagged))

    result = HungryAnimalsResult()
    for animal_id in flagged:
        result.animals.append(
            await animal_service.resolve_animal(session, animal_id=animal_id)
        )
    logger.info("Hunger pass flagged %s animal record(s)", result.count)
    return result
