"""
Quote Service — Quote Table Definition
=======================================

What:  Declarative mapping of the `quotes` table.
Who:   Alembic (schema tracking) and the test fixtures (create_all).

QuoteStore does not query through this class; it issues hand-written SQL
against the same table and maps rows onto the Pydantic `Quote` schema.
"""

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from quoteservice.database import Base


class QuoteRecord(Base):
    """
    One row of the `quotes` table.

    Rows are seeded by migration and never written by the service.
    """

    __tablename__ = "quotes"

    # Assigned by the seed data, never generated
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )

    quote: Mapped[Optional[str]] = mapped_column(Text)

    author: Mapped[Optional[str]] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<QuoteRecord(id={self.id}, author={self.author!r})>"
