"""
Quote Service — Application Package
===================================

What:  Read-only HTTP service exposing the rows of the `quotes` table.
Who:   Imported by uvicorn (`quoteservice.main:app`), Alembic, and pytest.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← GET /, /quotes, /quotes/{id}
    ├─────────────────────────────────────┤
    │         Services (QuoteStore)       │  ← hand-written SQL
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy table + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy engine
    └─────────────────────────────────────┘

    The entry point builds the engine, wraps it in a QuoteStore, and hands
    the store to the router factory. Nothing is looked up from a registry.
"""

__version__ = "1.0.0"
