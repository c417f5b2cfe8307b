"""Tests for hungry animal detection."""

from __future__ import annotations

import uuid
from datetime import datetime, time

import pytest

from farmish.models import EatableCategory
from farmish.schemas.feeding import ScheduleAssignmentRead, Slot, SlotDecodeError
from farmish.services import (
    animal_service,
    eatables_service,
    feeding_service,
    hunger_service,
)

from tests.services.factories import (
    add_animal,
    add_drug,
    add_food,
    add_ledger,
    add_schedule,
)

pytestmark = pytest.mark.asyncio

TEN_AM = datetime(2025, 1, 1, 10, 0)


async def _detect(session, **kwargs) -> hunger_service.HungryAnimalsResult:
    kwargs.setdefault("page", 1)
    kwargs.setdefault("limit", 50)
    kwargs.setdefault("now", TEN_AM)
    kwargs.setdefault("deduplicate", False)
    return await hunger_service.detect_hungry_animals(session, **kwargs)


async def test_lagging_animal_is_flagged_and_fed_one_is_not(session) -> None:
    hay = await add_food(session)
    lagging = await add_animal(session, name="A")
    fed = await add_animal(session, name="B")
    await add_schedule(session, lagging, hay, "08:00:00", "12:00:00")
    await add_ledger(session, lagging, hay, "08:00:00")
    await add_schedule(session, fed, hay, "14:00:00")
    await add_ledger(session, fed, hay, "14:00:00")

    result = await _detect(session)
    assert [animal.id for animal in result.animals] == [lagging.id]
    assert result.count == 1


async def test_no_upcoming_slot_means_not_hungry(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "06:00:00", "10:30:00")
    await add_ledger(session, animal, hay, "01:00:00")

    result = await _detect(session)
    assert result.animals == []
    assert result.count == 0


async def test_empty_ledger_never_flags(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "15:00:00")

    assert (await _detect(session)).count == 0


async def test_each_lagging_slot_flags_again(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "12:00:00")
    await add_ledger(session, animal, hay, "07:00:00", "08:00:00")
    await add_ledger(session, animal, hay, "09:00:00")

    result = await _detect(session)
    assert [a.id for a in result.animals] == [animal.id] * 3
    assert result.count == 3

    deduplicated = await _detect(session, deduplicate=True)
    assert [a.id for a in deduplicated.animals] == [animal.id]
    assert deduplicated.count == 1


async def test_last_upcoming_slot_wins(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    # 11:00 is seen after 15:00, so the animal is compared against 11:00.
    await add_schedule(session, animal, hay, "15:00:00", "11:00:00")
    await add_ledger(session, animal, hay, "11:00:00")

    assert (await _detect(session)).count == 0


async def test_comparison_uses_whole_hours(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "12:00:00")
    await add_ledger(session, animal, hay, "11:59:00", "12:30:00", "13:00:00")

    result = await _detect(session)
    assert [a.id for a in result.animals] == [animal.id]


async def test_drug_only_schedule_never_flags(session) -> None:
    drug = await add_drug(session)
    animal = await add_animal(session)
    await add_schedule(
        session, animal, drug, "20:00:00", category=EatableCategory.DRUG
    )
    await add_ledger(session, animal, drug, "08:00:00")

    assert (await _detect(session)).count == 0


async def test_drug_slot_does_not_replace_food_slot(session) -> None:
    hay = await add_food(session)
    drug = await add_drug(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "20:00:00")
    await add_schedule(
        session, animal, drug, "11:00:00", category=EatableCategory.DRUG
    )
    await add_ledger(session, animal, hay, "11:00:00")

    result = await _detect(session)
    assert [a.id for a in result.animals] == [animal.id]


async def test_upcoming_slot_from_morning_noon_and_evening(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "09:00:00", "14:00:00", "20:00:00")
    # Upcoming is 20:00, so 18:00 lags by two hours and 20:00 does not lag.
    await add_ledger(session, animal, hay, "18:00:00", "20:00:00")

    result = await _detect(session)
    assert [a.id for a in result.animals] == [animal.id]


async def test_logged_at_upcoming_hour_is_not_hungry(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "20:00:00")
    await add_ledger(session, animal, hay, "20:00:00")

    assert (await _detect(session)).count == 0


async def test_deleted_ledger_entry_is_ignored(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "20:00:00")
    entry = await add_ledger(session, animal, hay, "08:00:00")
    assert (await _detect(session)).count == 1

    await feeding_service.delete_entry(session, entry=entry)

    assert (await _detect(session)).count == 0


async def test_deleted_schedule_is_ignored(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    assignment = await add_schedule(session, animal, hay, "20:00:00")
    await add_ledger(session, animal, hay, "08:00:00")
    assert (await _detect(session)).count == 1

    await eatables_service.delete_assignment(session, assignment=assignment)

    assert (await _detect(session)).count == 0


async def test_only_the_requested_page_is_examined(session) -> None:
    hay = await add_food(session)
    first = await add_animal(session, name="first")
    second = await add_animal(session, name="second")
    for animal in (first, second):
        await add_schedule(session, animal, hay, "12:00:00")
        await add_ledger(session, animal, hay, "08:00:00")

    page_one = await _detect(session, page=1, limit=1)
    page_two = await _detect(session, page=2, limit=1)
    page_three = await _detect(session, page=3, limit=1)
    flagged = {a.id for a in page_one.animals} | {a.id for a in page_two.animals}
    assert page_one.count == 1
    assert page_two.count == 1
    assert flagged == {first.id, second.id}
    assert page_three.count == 0


async def test_malformed_ledger_aborts_pass(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "12:00:00")
    await add_ledger(session, animal, hay, raw=[{"time": "noon", "capacity": 1}])

    with pytest.raises(SlotDecodeError):
        await _detect(session)


async def test_unresolvable_animal_aborts_pass(session) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "12:00:00")
    await add_ledger(session, animal, hay, "08:00:00")
    await animal_service.delete_animal(session, animal=animal)

    with pytest.raises(animal_service.AnimalNotFoundError):
        await _detect(session)


async def test_deduplicate_defaults_to_setting(session, monkeypatch) -> None:
    hay = await add_food(session)
    animal = await add_animal(session)
    await add_schedule(session, animal, hay, "12:00:00")
    await add_ledger(session, animal, hay, "07:00:00", "08:00:00")

    class _Settings:
        hungry_deduplicate = True
        farm_timezone = None

    monkeypatch.setattr(hunger_service, "get_settings", lambda: _Settings())
    result = await hunger_service.detect_hungry_animals(
        session, page=1, limit=10, now=TEN_AM
    )
    assert result.count == 1


async def test_upcoming_slots_keeps_last_later_slot() -> None:
    animal_id = uuid.uuid4()
    assignment = ScheduleAssignmentRead.model_construct(
        animal_id=animal_id,
        daily=[
            Slot(time="09:00:00", capacity=1),
            Slot(time="16:00:00", capacity=1),
            Slot(time="13:00:00", capacity=1),
        ],
    )
    upcoming = hunger_service.upcoming_slots([assignment], current_hour=10)
    assert upcoming == {animal_id: time(13, 0)}


async def test_unknown_timezone_falls_back_to_local_time(monkeypatch) -> None:
    class _Settings:
        farm_timezone = "Mars/Olympus_Mons"

    monkeypatch.setattr(hunger_service, "get_settings", lambda: _Settings())
    now = hunger_service._farm_now()
    assert isinstance(now, datetime)
    assert now.tzinfo is None
