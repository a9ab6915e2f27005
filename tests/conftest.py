"""
Pytest configuration and shared fixtures.

Database-backed tests run against a private in-memory SQLite database
(aiosqlite + StaticPool) so no external server is needed.
"""

from contextlib import asynccontextmanager
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from task_tracker.db.base import Base
from task_tracker.db.session import get_db
from task_tracker.main import app
import task_tracker.models  # noqa: F401  (register tables)
from task_tracker.utils.time import utc_now


TEST_DATABASE_URL = "sqlite+aiosqlite://"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "api: exercises the HTTP surface through the ASGI app")


@asynccontextmanager
async def sqlite_session_maker():
    """Fresh in-memory database with the schema created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    finally:
        await engine.dispose()


@asynccontextmanager
async def api_client_context():
    """httpx client bound to the app, with get_db pointed at an in-memory database."""
    async with sqlite_session_maker() as session_maker:

        async def override_get_db():
            async with session_maker() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

        app.dependency_overrides[get_db] = override_get_db
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as client:
                yield client
        finally:
            app.dependency_overrides.clear()


@pytest.fixture
def db_session_maker():
    """Factory for an async context manager yielding a sessionmaker."""
    return sqlite_session_maker


@pytest.fixture
def api_client():
    """Factory for an async context manager yielding an httpx AsyncClient."""
    return api_client_context


@pytest.fixture
def future_due_at():
    return utc_now() + timedelta(hours=1)
