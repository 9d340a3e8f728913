"""
Quote Service — Quote Route Handlers
=====================================

What:  GET / (random quote), GET /quotes (all), GET /quotes/{quote_id}.
How:   `create_router(store)` closes over the QuoteStore built by the app
       factory; handlers call it and return Pydantic models that FastAPI
       serializes as JSON.

Status mapping:
    200  Quote / list of Quote
    400  {quote_id} is not an integer (RequestValidationError handler)
    404  no row with that id; empty body
    405  any verb other than GET (FastAPI default)
    500  DatabaseError / EmptyStoreError (handlers in main.py)
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Response, status

from quoteservice.schemas.quote import ErrorResponse, Quote
from quoteservice.services.quote_store import QuoteStore

logger = logging.getLogger(__name__)


def create_router(store: QuoteStore) -> APIRouter:
    """
    Build the quote routes around an explicit store.

    Args:
        store: QuoteStore the handlers delegate to

    Returns:
        APIRouter ready for `app.include_router()`
    """
    router = APIRouter(tags=["Quotes"])

    @router.get(
        "/",
        response_model=Quote,
        responses={
            200: {"description": "One randomly chosen quote", "model": Quote},
            500: {"description": "Server error or no quotes stored", "model": ErrorResponse},
        },
        summary="Get a random quote",
    )
    async def random_quote() -> Quote:
        return await store.find_random_quote()

    @router.get(
        "/quotes",
        response_model=List[Quote],
        responses={
            200: {"description": "Every stored quote"},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary="List all quotes",
    )
    async def list_quotes() -> List[Quote]:
        return await store.find_all()

    @router.get(
        "/quotes/{quote_id}",
        response_model=Quote,
        responses={
            200: {"description": "The requested quote", "model": Quote},
            400: {"description": "quote_id is not an integer", "model": ErrorResponse},
            404: {"description": "No quote with this id (empty body)"},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary="Get a quote by id",
    )
    async def get_quote(quote_id: int) -> Union[Quote, Response]:
        """
        Look up one quote.

        A miss is answered here with an empty 404 rather than through an
        exception handler, since it is a normal outcome of the lookup.
        """
        quote = await store.find_by_id(quote_id)
        if quote is None:
            logger.debug("Quote %d not found", quote_id)
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return quote

    return router
