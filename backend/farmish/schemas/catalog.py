"""Food and drug catalog schemas."""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FoodBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    capacity: int = Field(default=0, ge=0)
    product_union: str = Field(min_length=1, max_length=64)
    description: str | None = None


class FoodCreate(FoodBase):
    """Payload for creating a food item."""


class FoodUpdate(FoodBase):
    """Full replacement payload for a food item."""


class FoodRead(FoodBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FoodList(BaseModel):
    foods: list[FoodRead]
    count: int


class DrugBase(FoodBase):
    status: str | None = None


class DrugCreate(DrugBase):
    """Payload for creating a drug."""


class DrugUpdate(DrugBase):
    """Full replacement payload for a drug."""


class DrugRead(DrugBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DrugList(BaseModel):
    drugs: list[DrugRead]
    count: int
