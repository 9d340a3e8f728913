"""
Quote Service — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the test suite.
How:   Each test gets its own SQLite database file (via aiosqlite) under
       pytest's tmp_path, so no PostgreSQL server is needed.

Fixture Hierarchy (all function-scoped):
    ├── sample_quotes: the five rows seeded into `quotes` (ids 1-5)
    ├── engine:        AsyncEngine on a seeded database
    ├── empty_engine:  AsyncEngine on a database with an empty `quotes` table
    ├── broken_engine: AsyncEngine on a database with no `quotes` table
    ├── store:         QuoteStore over `engine`
    └── test_client / empty_client / broken_client:
                       HTTPX AsyncClient talking to an app built on each engine
"""

import os

# Override settings BEFORE any quoteservice import builds the default app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy import insert  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from quoteservice.config import Settings  # noqa: E402
from quoteservice.database import Base  # noqa: E402
from quoteservice.main import create_app  # noqa: E402
from quoteservice.models.quote import QuoteRecord  # noqa: E402
from quoteservice.services.quote_store import QuoteStore  # noqa: E402


SAMPLE_QUOTES = [
    {"id": 1, "quote": "Talk is cheap. Show me the code.", "author": "Linus Torvalds"},
    {"id": 2, "quote": "Any fool can write code that a computer can understand.", "author": "Martin Fowler"},
    {"id": 3, "quote": "Simplicity is prerequisite for reliability.", "author": "Edsger W. Dijkstra"},
    {"id": 4, "quote": "Premature optimization is the root of all evil.", "author": "Donald Knuth"},
    {"id": 5, "quote": "First, solve the problem. Then, write the code.", "author": "John Johnson"},
]


async def _make_engine(path, rows=None, create_schema=True):
    engine = create_async_engine(f"sqlite+aiosqlite:///{path}")
    if create_schema:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            if rows:
                await conn.execute(insert(QuoteRecord.__table__), rows)
    return engine


def _client_for(engine) -> AsyncClient:
    """AsyncClient routed straight into an app bound to `engine`."""
    app = create_app(Settings(log_level="WARNING"), engine=engine)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


# ══════════════════════════════════════════════════════════════════════════
# Data Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_quotes():
    """Rows seeded into the `engine` database, as dicts."""
    return [dict(row) for row in SAMPLE_QUOTES]


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def engine(tmp_path, sample_quotes):
    engine = await _make_engine(tmp_path / "quotes.db", rows=sample_quotes)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def empty_engine(tmp_path):
    engine = await _make_engine(tmp_path / "empty.db")
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def broken_engine(tmp_path):
    """
    Engine whose database has no `quotes` table.

    Every store query fails inside the driver, which is how a missing
    migration or a dropped table looks to the service.
    """
    engine = await _make_engine(tmp_path / "broken.db", create_schema=False)
    yield engine
    await engine.dispose()


@pytest.fixture
def store(engine):
    return QuoteStore(engine)


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(engine):
    """
    HTTPX AsyncClient for the seeded database.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/quotes")
            assert response.status_code == 200
    """
    async with _client_for(engine) as client:
        yield client


@pytest_asyncio.fixture
async def empty_client(empty_engine):
    async with _client_for(empty_engine) as client:
        yield client


@pytest_asyncio.fixture
async def broken_client(broken_engine):
    async with _client_for(broken_engine) as client:
        yield client
