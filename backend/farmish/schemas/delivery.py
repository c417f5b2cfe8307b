"""Delivery schemas."""
from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from farmish.models.catalog import EatableCategory


class DeliveryCreate(BaseModel):
    """Payload describing stock delivered to the store."""

    product_name: str = Field(min_length=1, max_length=255)
    category: EatableCategory
    capacity: int = Field(gt=0)
    product_union: str = Field(min_length=1, max_length=64)
    delivered_on: date
    status: str | None = None
    description: str | None = None

    @field_validator("product_name", "product_union", "category", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> Any:
        return value.lower().strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _drug_requires_status(self) -> "DeliveryCreate":
        if self.category == EatableCategory.DRUG and not self.status:
            raise ValueError("status is required for drug deliveries")
        return self


class DeliveryRead(BaseModel):
    id: uuid.UUID
    product_name: str
    category: EatableCategory
    capacity: int
    product_union: str
    delivered_on: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DeliveryReceipt(BaseModel):
    """Result of recording a delivery against the catalog."""

    delivery: DeliveryRead
    catalog_item_id: uuid.UUID
    catalog_capacity: int
    created_catalog_item: bool


class DeliveryList(BaseModel):
    deliveries: list[DeliveryRead]
    count: int


class DeliveryUpdate(BaseModel):
    """Correction of a recorded delivery; the category cannot change."""

    product_name: str = Field(min_length=1, max_length=255)
    capacity: int = Field(gt=0)
    product_union: str = Field(min_length=1, max_length=64)
    delivered_on: date

    @field_validator("product_name", "product_union", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> Any:
        return value.lower().strip() if isinstance(value, str) else value
