import logging
from typing import AsyncGenerator
from sqlmodel import SQLModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def _connect_args(url: str) -> dict:
    # aiosqlite connections get handed between threads by the event loop
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


# Async SQLModel engine + session
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    future=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)
AsyncSessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db() -> None:
    """Create the guests, vendors, budget_items and tasks tables if missing.

    Used when CREATE_TABLES_ON_START is enabled and by the test suite.
    """
    # register table metadata
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an AsyncSession."""
    async with AsyncSessionLocal() as session:
        yield session


async def commit(session: AsyncSession, action: str) -> None:
    """Commit the pending unit of work, rolling back and re-raising on failure."""
    try:
        await session.commit()
    except SQLAlchemyError:
        await session.rollback()
        logger.exception("%s failed", action)
        raise
