"""Seed quotes

Revision ID: 002
Revises: 001
Create Date: 2024-03-02 00:05:00.000000+00:00

What:  Inserts the five quotes (ids 1-5) the service ships with.
How:   op.bulk_insert against a lightweight table() construct, so this
       migration does not depend on the current model definition.

Rollback: downgrade() deletes exactly these ids.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

quotes_table = sa.table(
    "quotes",
    sa.column("id", sa.Integer),
    sa.column("quote", sa.Text),
    sa.column("author", sa.Text),
)

SEED_QUOTES = [
    {
        "id": 1,
        "quote": "Talk is cheap. Show me the code.",
        "author": "Linus Torvalds",
    },
    {
        "id": 2,
        "quote": "Programs must be written for people to read, and only incidentally for machines to execute.",
        "author": "Harold Abelson",
    },
    {
        "id": 3,
        "quote": "Simplicity is prerequisite for reliability.",
        "author": "Edsger W. Dijkstra",
    },
    {
        "id": 4,
        "quote": "Premature optimization is the root of all evil.",
        "author": "Donald Knuth",
    },
    {
        "id": 5,
        "quote": "First, solve the problem. Then, write the code.",
        "author": "John Johnson",
    },
]


def upgrade() -> None:
    op.bulk_insert(quotes_table, SEED_QUOTES)


def downgrade() -> None:
    ids = [row["id"] for row in SEED_QUOTES]
    op.execute(quotes_table.delete().where(quotes_table.c.id.in_(ids)))
