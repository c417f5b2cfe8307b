"""Schedule slot, assignment and ledger schemas.

A slot list is persisted as a JSON array of ``{"capacity": int, "time":
"HH:MM:SS"}`` objects. :func:`encode_slots` and :func:`decode_slots` are the
only way in and out of that representation.
"""
from __future__ import annotations

import re
import uuid
from datetime import date, datetime, time as TimeOfDay
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
)

from farmish.models.catalog import EatableCategory

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d:[0-5]\d$")


class SlotDecodeError(RuntimeError):
    """Raised when a stored slot list cannot be decoded."""


class Slot(BaseModel):
    """A single ``{time, capacity}`` pair inside a daily slot list."""

    model_config = ConfigDict(frozen=True)

    time: TimeOfDay
    capacity: int

    @field_validator("time", mode="before")
    @classmethod
    def _parse_time(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not _TIME_PATTERN.match(value):
                raise ValueError("time must be formatted as HH:MM:SS")
            return TimeOfDay.fromisoformat(value)
        if isinstance(value, TimeOfDay):
            return value.replace(microsecond=0, tzinfo=None)
        return value

    @field_serializer("time")
    def _serialize_time(self, value: TimeOfDay) -> str:
        return value.strftime("%H:%M:%S")

    @property
    def hour(self) -> int:
        return self.time.hour


_SLOTS_ADAPTER = TypeAdapter(list[Slot])


def encode_slots(slots: list[Slot]) -> list[dict[str, Any]]:
    """Return the JSON-ready representation of ``slots``."""
    return _SLOTS_ADAPTER.dump_python(slots, mode="json")


def decode_slots(raw: Any) -> list[Slot]:
    """Decode a stored slot list, raising :class:`SlotDecodeError` on bad data."""
    try:
        if isinstance(raw, (str, bytes)):
            return _SLOTS_ADAPTER.validate_json(raw)
        return _SLOTS_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise SlotDecodeError(f"Malformed slot list: {exc.error_count()} error(s)") from exc


class EatableSummary(BaseModel):
    """Catalog fields embedded into assignment listings."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    status: str | None = None
    capacity: int
    product_union: str
    description: str | None = None


class EatablesInfoCreate(BaseModel):
    """Payload for assigning a schedule to an animal."""

    animal_id: uuid.UUID
    eatables_id: uuid.UUID
    category: EatableCategory
    daily: list[Slot] = Field(default_factory=list)

    @field_validator("category", mode="before")
    @classmethod
    def _lower_category(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class EatablesInfoUpdate(EatablesInfoCreate):
    """Replacement payload; the slot list is replaced wholesale."""


class ScheduleAssignmentRead(BaseModel):
    """A schedule assignment with its catalog item and decoded slots."""

    id: uuid.UUID
    animal_id: uuid.UUID
    category: EatableCategory
    eatable: EatableSummary
    daily: list[Slot]


class ScheduleAssignmentList(BaseModel):
    eatables: list[ScheduleAssignmentRead]
    count: int


class GivenEatablesCreate(EatablesInfoCreate):
    """Payload for logging eatables actually given on a day."""

    day: date


class GivenEatablesUpdate(GivenEatablesCreate):
    """Replacement payload for a ledger entry."""


class LedgerEntryRead(BaseModel):
    """A ledger entry with its decoded slot list."""

    id: uuid.UUID
    animal_id: uuid.UUID
    eatables_id: uuid.UUID
    category: EatableCategory
    day: date
    daily: list[Slot]
    created_at: datetime
    updated_at: datetime
