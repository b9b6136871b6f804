import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .models import Base

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the async engine and its session factory.

    Built once when the app starts, shared by every request through
    ``app.state.database`` and disposed on shutdown.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **self._engine_options(url, echo))
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Important for async usage, especially with FastAPI
        )

    @staticmethod
    def _engine_options(url: str, echo: bool) -> dict:
        options = {"echo": echo, "pool_pre_ping": True}
        if not url.startswith("sqlite"):
            options.update(pool_size=10, max_overflow=20, pool_recycle=1800)
        return options

    async def create_all(self) -> None:
        """Creates missing tables. Existing tables are left untouched."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured.")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Provides a session that is rolled back if the block raises."""
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> int:
        async with self.engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar_one()

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed.")
