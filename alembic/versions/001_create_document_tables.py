"""Create books and pets document tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates one table per entity type. Each row is the entity identifier
       plus the full JSON document (JSONB on PostgreSQL).

Rollback: downgrade() drops both tables (destructive, all documents lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DOCUMENT_TABLES = ("books", "pets")


def upgrade() -> None:
    for table in DOCUMENT_TABLES:
        op.create_table(
            table,
            sa.Column(
                "id",
                sa.String(64),
                nullable=False,
                comment="Entity identifier; also the lookup and partition key",
            ),
            sa.Column(
                "document",
                sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
                nullable=False,
                comment="Full entity document as serialized by the API",
            ),
            sa.PrimaryKeyConstraint("id"),
        )


def downgrade() -> None:
    """
    WARNING: Destructive. Every stored book and pet is permanently lost.
    """
    for table in reversed(DOCUMENT_TABLES):
        op.drop_table(table)
