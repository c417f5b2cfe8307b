"""Test fixtures for the Farmish backend."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from farmish.core.config import get_settings
from farmish.core.security import hash_password
from farmish.db.base import Base
from farmish.db.session import dispose_engine, get_sessionmaker
from farmish.main import app
from farmish.models import User, UserRole, UserStatus


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url, future=True)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def session(reset_database: None, db_url: str):
    """Yield a session bound to the freshly reset test database."""
    async with get_sessionmaker(db_url)() as db_session:
        yield db_session


@pytest_asyncio.fixture()
async def app_context(
    reset_database: None, db_url: str
) -> AsyncIterator[dict[str, object]]:
    """Yield an async client and seeded staff credentials."""
    sessionmaker = get_sessionmaker(db_url)
    manager_password = "Passw0rd!"
    viewer_password = "V1ewOnly!"

    async with sessionmaker() as db_session:
        manager = User(
            email="manager@example.com",
            hashed_password=hash_password(manager_password),
            first_name="Casey",
            last_name="Manager",
            role=UserRole.MANAGER,
            status=UserStatus.ACTIVE,
        )
        viewer = User(
            email="viewer@example.com",
            hashed_password=hash_password(viewer_password),
            first_name="Vic",
            last_name="Viewer",
            role=UserRole.VIEWER,
            status=UserStatus.ACTIVE,
        )
        db_session.add_all([manager, viewer])
        await db_session.commit()

        context: dict[str, object] = {
            "manager_email": manager.email,
            "manager_password": manager_password,
            "viewer_email": viewer.email,
            "viewer_password": viewer_password,
        }

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        context["client"] = client
        yield context
