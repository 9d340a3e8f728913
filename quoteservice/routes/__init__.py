"""
Quote Service — API Routes Package
===================================

Route Inventory:
    - quotes.py:  GET /                 (one random quote)
                  GET /quotes           (all quotes)
                  GET /quotes/{id}      (single quote by id)

Routes are thin: they call the QuoteStore handed to `create_router()` and
map its results to status codes. Errors raised by the store are turned into
responses by the handlers registered in main.py.
"""
