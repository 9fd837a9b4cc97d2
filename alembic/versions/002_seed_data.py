"""Seed sample data.

Revision ID: 002_seed_data
Revises: 001_initial
Create Date: 2025-01-20

Loads the sample guests, hosts, properties, bookings, payments, reviews
and the remaining tables in dependency order.
"""

from typing import Sequence

import sqlalchemy as sa

from alembic import op
from rentaldb.services.schema_service import sequence_reset_sql
from rentaldb.services.seed_service import seed_service

# revision identifiers
revision: str = "002_seed_data"
down_revision: str = "001_initial"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Insert seed rows."""
    dialect = op.get_context().dialect
    for seed_table, rows in seed_service.build_seed_rows():
        op.bulk_insert(seed_table, rows)
        if dialect.name == "postgresql":
            op.execute(sequence_reset_sql(seed_table, dialect))


def downgrade() -> None:
    """Remove seed rows, children first."""
    for seed_table, rows in reversed(seed_service.build_seed_rows()):
        pk = list(seed_table.primary_key.columns)[0]
        op.execute(sa.delete(seed_table).where(pk.in_([row[pk.key] for row in rows])))
