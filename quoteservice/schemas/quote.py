"""
Quote Service — Pydantic Response Schemas
==========================================

What:  Pydantic models defining the API contract.
How:   FastAPI serializes route results through these models and generates
       the OpenAPI documentation from them.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Quote(BaseModel):
    """
    A single quote, one field per column of the `quotes` table.

    Returned by GET / and GET /quotes/{id}; GET /quotes returns a list.

    Example:
        {"id": 3, "quote": "Simplicity is prerequisite for reliability.",
         "author": "Edsger W. Dijkstra"}
    """
    id: int = Field(description="Primary key of the quote")
    # Columns carry no NOT NULL; a NULL serializes as JSON null
    quote: Optional[str] = Field(default=None, description="Quote text")
    author: Optional[str] = Field(default=None, description="Person the quote is attributed to")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Standardized error body for 400 and 500 responses.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "no_data")
        message: Human-readable description
        details: Optional extra context (e.g., which parameter failed parsing)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[list] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
