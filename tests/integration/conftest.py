"""Fixtures for persistence tests against in-memory SQLite."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from pubgate.config import DatabaseConfig
from pubgate.infrastructure.persistence.database import create_db_engine, create_session_factory
from pubgate.infrastructure.persistence.tables import metadata


@pytest_asyncio.fixture
async def engine():
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine):
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
        await session.rollback()
