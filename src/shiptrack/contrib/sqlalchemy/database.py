"""Storage connection lifecycle."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from shiptrack.contrib.sqlalchemy.models import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine; ``connect()`` on startup, ``close()`` on exit."""

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo)
        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    async def connect(self) -> None:
        """Open the first connection and create missing tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Connected to storage")

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Storage connection closed")
