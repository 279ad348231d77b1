"""
ApisLabs Catalog API - Document Store Connection Management
============================================================

What:  Async SQLAlchemy engine, session factory and declarative base.
How:   `DocumentStore` owns one async engine with connection pooling and
       hands out sessions that auto-commit on success and auto-roll-back
       on error.
Who:   Constructed once by `create_app()`; injected into every repository.
When:  Created at application construction, disposed at shutdown.

Lifetime:
    There is no module-level engine. The store is an explicit object held
    on `app.state`, so tests can build one against a throwaway SQLite file
    and production builds one against PostgreSQL from the same code.

Connection Pooling Strategy (server databases only):
    pool_size=20:      Persistent connections for normal load
    max_overflow=10:   Temporary connections for traffic spikes
    pool_pre_ping:     Validates connections before use
    pool_recycle=3600: Recycles connections every hour
"""

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
from sqlalchemy.orm import DeclarativeBase

from apislabs.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object between the document tables and
    Alembic's autogenerate.
    """
    pass


class DocumentStore:
    """
    Process-wide handle to the document database.

    Safe for concurrent use by all in-flight requests: every operation
    opens its own session from the shared pool.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        # expire_on_commit=False: rows stay readable after commit
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentStore":
        """
        Build a store from application settings.

        SQLite engines get no pool arguments (aiosqlite does not take
        pool_size/max_overflow the way server drivers do).
        """
        options = {"echo": settings.log_level == "DEBUG"}
        if not settings.is_sqlite:
            options.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )
        engine = create_async_engine(settings.database_url, **options)
        return cls(engine)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a session for one repository operation.

        How it works:
            1. Creates a new session from the factory
            2. Yields it to the repository
            3. On success: commits
            4. On error: rolls back and re-raises unchanged
            5. Always: closes the session (returns connection to pool)
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_schema(self) -> None:
        """Create all document tables that do not exist yet."""
        # Model modules must be imported so their tables register on Base
        from apislabs.models import documents  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Document tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))

    async def ping(self) -> bool:
        """Run SELECT 1; returns False instead of raising when unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Document store unreachable: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close all pooled connections (application shutdown)."""
        await self.engine.dispose()
