"""Product and animal yield schemas."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from farmish.schemas.animal import AnimalRead


class ProductBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    product_union: str = Field(min_length=1, max_length=64)
    total_capacity: int = Field(default=0, ge=0)
    description: str | None = None

    @field_validator("name", "product_union", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> Any:
        return value.lower().strip() if isinstance(value, str) else value


class ProductCreate(ProductBase):
    """Payload for registering a product."""


class ProductUpdate(ProductBase):
    """Full replacement payload for a product."""


class ProductRead(ProductBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductList(BaseModel):
    products: list[ProductRead]
    count: int


class AnimalProductCreate(BaseModel):
    """Payload recording a quantity collected from an animal."""

    animal_id: uuid.UUID
    product_id: uuid.UUID
    capacity: int = Field(ge=0)
    get_time: datetime

    @field_validator("get_time")
    @classmethod
    def _drop_timezone(cls, value: datetime) -> datetime:
        return value.replace(tzinfo=None, microsecond=0)


class AnimalProductUpdate(AnimalProductCreate):
    """Replacement payload for a recorded yield."""


class AnimalProductRead(BaseModel):
    id: uuid.UUID
    animal_id: uuid.UUID
    animal_name: str
    animal_category: str
    product_id: uuid.UUID
    product_name: str
    product_union: str
    capacity: int
    get_time: datetime


class AnimalProductList(BaseModel):
    animal_products: list[AnimalProductRead]
    count: int


class ProductYield(BaseModel):
    """A product together with how much of it one animal has given."""

    id: uuid.UUID
    name: str
    product_union: str
    description: str | None = None
    total_capacity: int


class AnimalProductsSummary(BaseModel):
    animal: AnimalRead
    products: list[ProductYield]
    count: int


class AnimalYield(AnimalRead):
    """An animal together with how much of one product it has given."""

    total_capacity: int


class ProductAnimalsSummary(BaseModel):
    product: ProductRead
    animals: list[AnimalYield]
    count: int
