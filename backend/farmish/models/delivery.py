"""Delivery model recording stock brought into the store."""

from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import BigInteger, Date, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from farmish.db.base import Base
from farmish.models.catalog import EatableCategory
from farmish.models.mixins import SoftDeleteMixin, TimestampMixin


class Delivery(SoftDeleteMixin, TimestampMixin, Base):
    """A batch of food or drugs delivered to the farm."""

    __tablename__ = "deliveries"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[EatableCategory] = mapped_column(
        Enum(EatableCategory), nullable=False
    )
    capacity: Mapped[int] = mapped_column(BigInteger, nullable=False)
    product_union: Mapped[str] = mapped_column(String(64), nullable=False)
    delivered_on: Mapped[date] = mapped_column(Date(), nullable=False)
