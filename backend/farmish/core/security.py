"""Password hashing and staff access tokens.

Access tokens carry the staff member's farm role next to their id so a token
issued before a role change stops working instead of keeping old rights.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta

import bcrypt
from jose import JWTError, jwt
from pydantic import ValidationError

from farmish.core.config import get_settings
from farmish.models.user import UserRole
from farmish.schemas.auth import ACCESS_TOKEN_TYPE, TokenClaims


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), hashed_password.encode())
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def create_access_token(
    user_id: uuid.UUID, role: UserRole, *, expires_delta: timedelta | None = None
) -> str:
    """Sign a bearer token for a staff member acting in ``role``."""
    settings = get_settings()
    issued_at = datetime.now(UTC)
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {
        "sub": str(user_id),
        "role": role.value,
        "type": ACCESS_TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> TokenClaims:
    """Verify ``token`` and return its claims.

    Raises ``JWTError`` for bad signatures, expired tokens and tokens whose
    claims do not describe a farm staff member.
    """
    settings = get_settings()
    payload = jwt.decode(
        token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
    )
    try:
        return TokenClaims.model_validate(payload)
    except ValidationError as exc:
        raise JWTError("Access token claims are incomplete") from exc
