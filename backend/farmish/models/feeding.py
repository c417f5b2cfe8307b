"""Per-animal feeding schedules and the ledger of given eatables."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Any

from sqlalchemy import Date, Enum, ForeignKey, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from farmish.db.base import Base
from farmish.models.catalog import EatableCategory
from farmish.models.mixins import SoftDeleteMixin, TimestampMixin

JSONB_TYPE = JSONB(astext_type=Text()).with_variant(JSON(), "sqlite")


class AnimalEatableInfo(SoftDeleteMixin, TimestampMixin, Base):
    """A configured daily plan of slots for one animal and one catalog item.

    ``eatables_id`` points at ``foods`` or ``drugs`` depending on
    ``category``, so it carries no foreign key.
    """

    __tablename__ = "animal_eatable_info"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    animal_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("animals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    eatables_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    category: Mapped[EatableCategory] = mapped_column(
        Enum(EatableCategory), nullable=False
    )
    daily: Mapped[list[dict[str, Any]]] = mapped_column(JSONB_TYPE, nullable=False)


class AnimalGivenEatable(SoftDeleteMixin, TimestampMixin, Base):
    """Slots actually administered to an animal on a given day."""

    __tablename__ = "animal_given_eatables"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    animal_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("animals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    eatables_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    category: Mapped[EatableCategory] = mapped_column(
        Enum(EatableCategory), nullable=False
    )
    day: Mapped[date] = mapped_column(Date(), nullable=False)
    daily: Mapped[list[dict[str, Any]]] = mapped_column(JSONB_TYPE, nullable=False)
