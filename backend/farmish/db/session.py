"""Async engines and sessions, one pair per database URL.

SQLite connections get foreign-key enforcement switched on so schedule and
ledger rows cannot point at animals that were never stored.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from farmish.core.config import get_settings


@dataclass(frozen=True)
class Database:
    engine: AsyncEngine
    sessionmaker: async_sessionmaker[AsyncSession]


_databases: dict[str, Database] = {}


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _open(url: str) -> Database:
    if make_url(url).get_backend_name() == "sqlite":
        engine = create_async_engine(url)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_async_engine(url, pool_pre_ping=True)
    return Database(
        engine=engine,
        sessionmaker=async_sessionmaker(
            engine, expire_on_commit=False, class_=AsyncSession
        ),
    )


def get_database(database_url: str | None = None) -> Database:
    """Return the engine and sessionmaker for ``database_url``, opening them once."""
    url = database_url or get_settings().database_url
    database = _databases.get(url)
    if database is None:
        database = _databases[url] = _open(url)
    return database


def get_sessionmaker(
    database_url: str | None = None,
) -> async_sessionmaker[AsyncSession]:
    return get_database(database_url).sessionmaker


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield a session from the configured database."""
    async with get_sessionmaker()() as session:
        yield session


async def dispose_engine(database_url: str | None = None) -> None:
    """Close the pooled connections for ``database_url`` and forget them."""
    database = _databases.pop(database_url or get_settings().database_url, None)
    if database is not None:
        await database.engine.dispose()
