"""Farm produce and the yields animals give."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from farmish.db.base import Base
from farmish.models.mixins import SoftDeleteMixin, TimestampMixin


class Product(SoftDeleteMixin, TimestampMixin, Base):
    """Something the farm produces, such as milk or wool."""

    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    product_union: Mapped[str] = mapped_column(String(64), nullable=False)
    total_capacity: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text)


class AnimalProduct(SoftDeleteMixin, TimestampMixin, Base):
    """A quantity of a product collected from one animal."""

    __tablename__ = "animal_products"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    animal_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("animals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    capacity: Mapped[int] = mapped_column(BigInteger, nullable=False)
    get_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
