"""Health check endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter
from sqlalchemy import text

from farmish.api.deps import SessionDep
from farmish.core.config import get_settings

router = APIRouter()


@router.get("", summary="Service health status")
async def healthcheck(session: SessionDep) -> dict[str, str]:
    """Return application health metadata including database reachability."""
    settings = get_settings()
    await session.execute(text("SELECT 1"))
    return {
        "status": "ok",
        "service": settings.app_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "environment": settings.app_env,
        "database": "ok",
    }
