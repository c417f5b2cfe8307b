"""Pydantic schemas for animals."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from farmish.models.animal import AnimalGender


class AnimalBase(BaseModel):
    """Shared animal fields."""

    name: str = Field(min_length=1, max_length=120)
    category_name: str = Field(min_length=1, max_length=120)
    gender: AnimalGender
    date_of_birth: date | None = None
    genus: str | None = None
    weight: float = Field(default=0.0, ge=0)
    is_health: bool = True
    description: str | None = None

    @field_validator("category_name", "genus", "gender", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class AnimalCreate(AnimalBase):
    """Payload for registering an animal."""


class AnimalUpdate(AnimalBase):
    """Full replacement payload for an animal."""


class AnimalRead(AnimalBase):
    """Serialized animal."""

    id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AnimalList(BaseModel):
    """Animals plus the number of matching records."""

    animals: list[AnimalRead]
    count: int
