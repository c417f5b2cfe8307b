"""Authentication schemas."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from farmish.models.user import UserRole

ACCESS_TOKEN_TYPE = "access"


class Token(BaseModel):
    """Response body for access tokens."""

    access_token: str
    token_type: str = "bearer"


class TokenClaims(BaseModel):
    """Verified contents of an access token."""

    sub: uuid.UUID
    role: UserRole
    type: Literal["access"]
    exp: datetime
