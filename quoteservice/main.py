"""
Quote Service — FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds (or accepts) the database engine,
       wraps it in a QuoteStore, passes the store to the router factory, and
       registers middleware and exception handlers.
Who:   uvicorn (`uvicorn quoteservice.main:app`), `python -m quoteservice`,
       and the test suite (which passes its own engine).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:                                        │
    │  ┌──────────────────────────────┐                   │
    │  │ Request log (ID + access log)│                   │
    │  └──────────────────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────┐ ┌──────────────┐ ┌───────────────────┐  │
    │  │ GET /  │ │ GET /quotes  │ │ GET /quotes/{id}  │  │
    │  └────────┘ └──────────────┘ └───────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ BadParam→400 │ NoData→500 │ DB→500 │ *→500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, check the database, log the bound address
    Shutdown: dispose the engine if this app created it
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from quoteservice import __version__
from quoteservice.config import Settings, settings as default_settings
from quoteservice.database import (
    check_connection,
    create_engine_from_settings,
    dispose_engine,
)
from quoteservice.exceptions import DatabaseError, EmptyStoreError, QuoteServiceError
from quoteservice.middleware.request_log import RequestLogMiddleware, request_id_var
from quoteservice.routes.quotes import create_router
from quoteservice.services.quote_store import QuoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # Per-request lines come from RequestLogMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

def build_lifespan(engine: AsyncEngine, app_settings: Settings, owns_engine: bool):
    """
    Return the lifespan context manager for an app bound to `engine`.

    An engine passed in by the caller is left open on shutdown; the caller
    owns it.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # ── Startup ───────────────────────────────────────────────────────
        setup_logging(app_settings.log_level)
        logger.info("Quote Service %s starting up...", __version__)

        # Don't exit: requests will answer 500 until the database is back
        if await check_connection(engine):
            logger.info("Database connection OK")
        else:
            logger.error("Database is not reachable; quote requests will fail")

        logger.info(
            "Serving on http://%s:%d", app_settings.backend_host, app_settings.backend_port
        )

        yield

        # ── Shutdown ──────────────────────────────────────────────────────
        logger.info("Quote Service shutting down...")
        if owns_engine:
            await dispose_engine(engine)
        logger.info("Shutdown complete.")

    return lifespan


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and error bodies.

    Handler hierarchy:
        RequestValidationError  → 400 Bad Request (e.g. /quotes/abc)
        EmptyStoreError         → 500 no_data
        DatabaseError           → 500 server_error
        QuoteServiceError       → 500 server_error
        Exception (fallback)    → 500 internal_server_error

    Response bodies never include driver messages or stack traces; those go
    to the server log.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        """Path parameter failed type coercion."""
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error on %s: %s", rid, request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "Request parameters are invalid.",
                "details": jsonable_encoder(exc.errors()),
                "request_id": rid,
            },
        )

    @app.exception_handler(EmptyStoreError)
    async def handle_empty_store(request: Request, exc: EmptyStoreError):
        rid = request_id_var.get("")
        logger.error("[%s] No data: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "no_data",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Generic message to the client; details go to the server log."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(QuoteServiceError)
    async def handle_service_error(request: Request, exc: QuoteServiceError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all; the stack trace is logged, never returned."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    engine: Optional[AsyncEngine] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the module-level instance)
        engine: Existing database handle; when omitted one is built from
                `app_settings.database_url` and disposed on shutdown

    Returns:
        Fully configured FastAPI instance.
    """
    app_settings = app_settings or default_settings
    owns_engine = engine is None
    if engine is None:
        engine = create_engine_from_settings(app_settings)

    store = QuoteStore(engine)

    app = FastAPI(
        title="Quote Service API",
        description="Read-only access to a table of quotes: random, all, or by id.",
        version=__version__,
        lifespan=build_lifespan(engine, app_settings, owns_engine),
    )
    app.state.quote_store = store

    app.add_middleware(RequestLogMiddleware)

    register_exception_handlers(app)

    app.include_router(create_router(store))

    return app


# uvicorn expects `quoteservice.main:app` to be importable
app = create_app()
