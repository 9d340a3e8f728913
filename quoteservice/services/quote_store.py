"""
Quote Service — Quote Store
============================

What:  Translates the three read operations into SQL against `quotes` and
       maps result rows onto the `Quote` schema.
How:   Hand-written statements executed with `sqlalchemy.text()` on a pooled
       connection borrowed from the engine for the duration of one query.
Who:   Built by the app factory; called by the route handlers.

Query plans:
    find_all:           SELECT id, quote, author FROM quotes
    find_by_id:         ... WHERE id = :id            (primary key lookup)
    find_random_quote:  ... ORDER BY RANDOM() LIMIT 1 (sort happens in the
                        database, O(n log n) per call; the table is a handful
                        of seed rows)

Error Handling Strategy:
    Driver and connection failures are wrapped in DatabaseError with the
    failing operation recorded in `context`. An empty table on the random
    path raises EmptyStoreError. A missing id is a normal `None` result.
"""

import logging
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from quoteservice.exceptions import DatabaseError, EmptyStoreError
from quoteservice.schemas.quote import Quote

logger = logging.getLogger(__name__)

_SELECT_ALL = text("SELECT id, quote, author FROM quotes")
_SELECT_BY_ID = text("SELECT id, quote, author FROM quotes WHERE id = :id")
_SELECT_RANDOM = text("SELECT id, quote, author FROM quotes ORDER BY RANDOM() LIMIT 1")

# Range of the INTEGER primary key column; larger ids cannot be stored
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class QuoteStore:
    """
    Read-only access to the `quotes` table.

    The store holds only the engine; every call re-queries the database, so
    concurrent requests share nothing but the connection pool.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def find_all(self) -> List[Quote]:
        """
        Return every row in the table.

        Order is whatever the database yields and may differ between calls.

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        rows = await self._fetch(_SELECT_ALL, operation="find_all")
        return [Quote.model_validate(row) for row in rows]

    async def find_by_id(self, quote_id: int) -> Optional[Quote]:
        """
        Return the quote with primary key `quote_id`, or None if absent.

        Args:
            quote_id: Any integer; ids outside the table simply miss, and
                ids outside the INTEGER range miss without a query

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        if not INT_MIN <= quote_id <= INT_MAX:
            return None
        rows = await self._fetch(
            _SELECT_BY_ID, {"id": quote_id}, operation="find_by_id"
        )
        if not rows:
            return None
        return Quote.model_validate(rows[0])

    async def find_random_quote(self) -> Quote:
        """
        Return one uniformly random row, chosen by the database.

        Raises:
            EmptyStoreError: The table has no rows (→ 500 no_data)
            DatabaseError: Query execution failed (→ 500)
        """
        rows = await self._fetch(_SELECT_RANDOM, operation="find_random_quote")
        if not rows:
            logger.error("Random quote requested but the quotes table is empty")
            raise EmptyStoreError(context={"operation": "find_random_quote"})
        return Quote.model_validate(rows[0])

    async def _fetch(self, statement, params=None, *, operation: str):
        """Run `statement` and return its rows as mappings."""
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(statement, params or {})
                return [dict(row) for row in result.mappings().all()]
        except (SQLAlchemyError, OSError) as e:
            logger.error("Database error in %s: %s", operation, str(e))
            raise DatabaseError(
                context={"operation": operation, "error_type": type(e).__name__},
            ) from e
