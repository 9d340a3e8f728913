# Schemas package init
"""
Quote Service — Schemas Package
================================

What:  Pydantic models that define the JSON the API returns.

Schema Inventory:
    - Quote: one row as {"id", "quote", "author"}
    - ErrorResponse: body of 400 and 500 responses
"""
