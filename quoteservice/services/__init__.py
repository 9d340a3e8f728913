# Services package init
"""
Quote Service — Services Layer
===============================

What:  Data access between the routes (HTTP) and the database.

Service Inventory:
    - QuoteStore: read-only queries against the `quotes` table
"""

from quoteservice.services.quote_store import QuoteStore

__all__ = ["QuoteStore"]
