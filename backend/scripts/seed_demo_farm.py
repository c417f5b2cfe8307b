"""Seed a small demo herd with feed stock and feeding schedules."""

from __future__ import annotations

import asyncio
from datetime import date

from sqlalchemy import select

from farmish.db.session import get_sessionmaker
from farmish.models import Animal, AnimalGender, EatableCategory, Food
from farmish.schemas.feeding import EatablesInfoCreate, Slot
from farmish.services import animal_service, catalog_service, eatables_service

SEED_FOOD = "hay"
HERD = [
    ("Bessie", "cow", AnimalGender.FEMALE, 520.0),
    ("Dolly", "sheep", AnimalGender.FEMALE, 70.0),
    ("Ramses", "sheep", AnimalGender.MALE, 95.0),
]
DAILY_SLOTS = ["07:00:00", "12:00:00", "18:00:00"]


async def seed_demo_farm() -> None:
    sessionmaker = get_sessionmaker()
    async with sessionmaker() as session:
        existing = (
            await session.execute(select(Animal.id).where(Animal.deleted_at.is_(None)))
        ).first()
        if existing:
            print("Animals already present; nothing to seed.")
            return

        hay = await catalog_service.find_item_by_name(
            session, category=EatableCategory.FOOD, name=SEED_FOOD
        )
        if hay is None:
            hay = await catalog_service.create_item(
                session,
                category=EatableCategory.FOOD,
                name=SEED_FOOD,
                capacity=1000,
                product_union="kg",
            )
        assert isinstance(hay, Food)

        for name, category, gender, weight in HERD:
            animal = await animal_service.create_animal(
                session,
                name=name,
                category_name=category,
                gender=gender,
                weight=weight,
                date_of_birth=date(2022, 4, 1),
            )
            await eatables_service.create_assignment(
                session,
                EatablesInfoCreate(
                    animal_id=animal.id,
                    eatables_id=hay.id,
                    category=EatableCategory.FOOD,
                    daily=[Slot(time=slot, capacity=5) for slot in DAILY_SLOTS],
                ),
            )
        print(f"Seeded {len(HERD)} animals fed from '{SEED_FOOD}'.")


if __name__ == "__main__":
    asyncio.run(seed_demo_farm())
