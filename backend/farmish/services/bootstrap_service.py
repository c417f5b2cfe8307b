"""Bootstrap helpers for default data."""

from __future__ import annotations

import logging

from farmish.core.config import get_settings
from farmish.db.session import get_sessionmaker
from farmish.models import UserRole, UserStatus
from farmish.schemas.user import UserCreate
from farmish.services.user_service import create_user, get_user_by_email

logger = logging.getLogger(__name__)


async def ensure_default_admin() -> None:
    """Create the configured admin user if one does not yet exist."""

    settings = get_settings()
    if not settings.default_admin_email or not settings.default_admin_password:
        return
    sessionmaker = get_sessionmaker(settings.database_url)
    async with sessionmaker() as session:
        if await get_user_by_email(session, settings.default_admin_email):
            return
        await create_user(
            session,
            UserCreate(
                email=settings.default_admin_email,
                password=settings.default_admin_password,
                first_name="Farm",
                last_name="Admin",
                role=UserRole.ADMIN,
                status=UserStatus.ACTIVE,
            ),
        )
        logger.info("Created default admin %s", settings.default_admin_email)
