"""
Quote Service — Configuration and Application Lifecycle Tests
==============================================================

What we test:
    ✅ Settings validation (log level normalization, SQLite detection)
    ✅ Engine construction from settings
    ✅ Startup database check and engine ownership on shutdown
"""

import pytest
from pydantic import ValidationError as PydanticValidationError
from unittest.mock import AsyncMock, MagicMock, patch

from sqlalchemy.ext.asyncio import AsyncEngine

from quoteservice.config import Settings
from quoteservice.database import check_connection, create_engine_from_settings
from quoteservice.main import create_app


class TestSettings:

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="chatty")

    def test_port_below_1024_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(backend_port=80)

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite+aiosqlite:///./quotes.db").is_sqlite
        assert not Settings(
            database_url="postgresql+asyncpg://u:p@localhost/quotes"
        ).is_sqlite


class TestEngineFactory:

    @pytest.mark.asyncio
    async def test_sqlite_engine_from_settings(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'factory.db'}"
        engine = create_engine_from_settings(Settings(database_url=url, db_pool_size=7))
        try:
            assert isinstance(engine, AsyncEngine)
            assert engine.url.drivername == "sqlite+aiosqlite"
            assert await check_connection(engine) is True
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_check_connection_reports_failure(self):
        engine = MagicMock()
        engine.connect.side_effect = ConnectionRefusedError("connection refused")

        assert await check_connection(engine) is False


class TestLifespan:

    @pytest.mark.asyncio
    async def test_supplied_engine_is_not_disposed(self, engine):
        app = create_app(Settings(log_level="WARNING"), engine=engine)

        with patch("quoteservice.main.dispose_engine", new=AsyncMock()) as dispose:
            async with app.router.lifespan_context(app):
                pass

        dispose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_owned_engine_is_disposed(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'owned.db'}"
        app = create_app(Settings(database_url=url, log_level="WARNING"))

        with patch("quoteservice.main.dispose_engine", new=AsyncMock()) as dispose:
            async with app.router.lifespan_context(app):
                pass

        dispose.assert_awaited_once_with(app.state.quote_store.engine)
        await app.state.quote_store.engine.dispose()

    @pytest.mark.asyncio
    async def test_unreachable_database_does_not_block_startup(self):
        broken = MagicMock()
        broken.connect.side_effect = ConnectionRefusedError("connection refused")
        app = create_app(Settings(log_level="WARNING"), engine=broken)

        async with app.router.lifespan_context(app):
            assert app.state.quote_store.engine is broken
