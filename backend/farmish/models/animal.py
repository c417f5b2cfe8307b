"""Animal model."""

from __future__ import annotations

import enum
import uuid
from datetime import date

from sqlalchemy import Boolean, Date, Enum, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from farmish.db.base import Base
from farmish.models.mixins import SoftDeleteMixin, TimestampMixin


class AnimalGender(str, enum.Enum):
    """Supported animal genders."""

    MALE = "male"
    FEMALE = "female"


class Animal(SoftDeleteMixin, TimestampMixin, Base):
    """Represents a single animal kept on the farm."""

    __tablename__ = "animals"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    category_name: Mapped[str] = mapped_column(String(120), nullable=False)
    gender: Mapped[AnimalGender] = mapped_column(Enum(AnimalGender), nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date())
    genus: Mapped[str | None] = mapped_column(String(120))
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    is_health: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    description: Mapped[str | None] = mapped_column(Text)
