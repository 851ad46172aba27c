import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession

from roster_service.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine and session factory for one store.

    `connect()` must be awaited before sessions are handed out; it creates the
    tables and their unique indexes. `disconnect()` disposes of the pool.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.SessionLocal: Optional[async_sessionmaker[AsyncSession]] = None

    async def connect(self) -> None:
        if self.engine is not None:
            return
        self.engine = create_async_engine(self.url, echo=self.echo)
        # expire_on_commit=False keeps attributes readable after commit,
        # which response serialization relies on
        self.SessionLocal = async_sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine, class_=AsyncSession, expire_on_commit=False
        )
        # Importing models registers the tables on Base.metadata
        from roster_service.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Connected to store at {self.engine.url.render_as_string(hide_password=True)}")

    async def disconnect(self) -> None:
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self.SessionLocal = None
        logger.info("Disconnected from store")

    def session(self) -> AsyncSession:
        if self.SessionLocal is None:
            raise RuntimeError("Database.connect() must be awaited before opening sessions")
        return self.SessionLocal()
