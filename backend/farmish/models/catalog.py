"""Food and drug catalog models."""

from __future__ import annotations

import enum
import uuid

from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from farmish.db.base import Base
from farmish.models.mixins import SoftDeleteMixin, TimestampMixin


class EatableCategory(str, enum.Enum):
    """Kinds of catalog item an animal can be given."""

    FOOD = "food"
    DRUG = "drug"


class Food(SoftDeleteMixin, TimestampMixin, Base):
    """Feed stock with a running total capacity."""

    __tablename__ = "foods"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    capacity: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    product_union: Mapped[str] = mapped_column(String(64), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)


class Drug(SoftDeleteMixin, TimestampMixin, Base):
    """Medication stock with a running total capacity."""

    __tablename__ = "drugs"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    status: Mapped[str | None] = mapped_column(String(120))
    capacity: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    product_union: Mapped[str] = mapped_column(String(64), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)


CATALOG_MODELS: dict[EatableCategory, type[Food] | type[Drug]] = {
    EatableCategory.FOOD: Food,
    EatableCategory.DRUG: Drug,
}
