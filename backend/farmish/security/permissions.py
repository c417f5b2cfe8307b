"""Role helpers for explicit authorization checks."""

from __future__ import annotations

from fastapi import HTTPException, status

from farmish.models.user import User, UserRole

WRITE_ROLES = frozenset({UserRole.ADMIN, UserRole.MANAGER, UserRole.CARETAKER})


def require_roles(user: User, allowed: frozenset[UserRole] | set[UserRole]) -> None:
    """Raise HTTP 403 if a user is not a member of the allowed role set."""

    if user.role not in allowed:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )


def require_writer(user: User) -> None:
    """Only caretakers and above may change farm data."""
    require_roles(user, WRITE_ROLES)


__all__ = ["WRITE_ROLES", "require_roles", "require_writer"]
