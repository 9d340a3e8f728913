"""
Quote Service — Database Engine Management
===========================================

What:  Async SQLAlchemy engine construction, the declarative Base, and
       lifecycle helpers.
How:   `create_engine_from_settings()` turns a Settings object into an
       AsyncEngine with connection pooling. The engine is the database handle
       the entry point passes to QuoteStore; no module-level engine exists.
Who:   Called by the app factory (main.py) and by Alembic's env.py.

Connection Pooling:
    pool_size / max_overflow:  sized from settings (PostgreSQL only)
    pool_pre_ping:             validates connections before use
    pool_recycle=3600:         recycles connections every hour

    SQLite URLs skip the sizing options; SQLAlchemy picks a pool class that
    does not accept them.
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from quoteservice.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Registers table definitions with a shared metadata object, which Alembic
    and the test fixtures use to create the schema.
    """
    pass


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Build the async engine described by `settings`.

    Args:
        settings: Application settings (database_url and pool options)

    Returns:
        AsyncEngine; no connection is opened until the first query.
    """
    options = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return create_async_engine(settings.database_url, **options)


async def check_connection(engine: AsyncEngine) -> bool:
    """
    Check the database with `SELECT 1`.

    Returns True when the query succeeds, False otherwise. Used at startup to
    log an early warning; request handling does not depend on it.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("Database unreachable: %s", str(e))
        return False


async def dispose_engine(engine: AsyncEngine) -> None:
    """Close all connections in the pool (called during shutdown)."""
    await engine.dispose()
