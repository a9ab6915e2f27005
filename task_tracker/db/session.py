"""
Database session and engine configuration.

This file sets up the async database connection using SQLAlchemy
(aiosqlite locally, asyncpg for PostgreSQL).
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from task_tracker.core.config import settings
from task_tracker.db.base import Base


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,  # prints SQL when DEBUG=True
    future=True,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # keep loaded attributes usable after commit
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Get a database session for one request.

    Commits when the endpoint returns normally and rolls back if it raises,
    so a request either persists everything it wrote or nothing.

    Usage in a FastAPI endpoint:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_schema() -> None:
    """Create any missing tables for the registered models."""
    # Import models so they are registered on Base.metadata
    import task_tracker.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
