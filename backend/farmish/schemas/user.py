"""User-related schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from farmish.models.user import UserRole, UserStatus


class UserBase(BaseModel):
    """Shared user fields."""

    email: EmailStr
    first_name: str
    last_name: str
    role: UserRole = Field(default=UserRole.CARETAKER)


class UserCreate(UserBase):
    """Payload for creating a user."""

    password: str = Field(min_length=8)
    status: UserStatus = UserStatus.ACTIVE


class UserRead(UserBase):
    """Serialized user."""

    id: uuid.UUID
    status: UserStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
