# Models package init
"""
Quote Service — Models Package
===============================

What:  SQLAlchemy table definitions, registered with `Base.metadata`.

Model Inventory:
    - QuoteRecord: the `quotes` table (schema only; queries use raw SQL)
"""
