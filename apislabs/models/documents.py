"""
ApisLabs Catalog API - Document Tables
=======================================

What:  ORM models for the `books` and `pets` tables.
How:   Each row is one entity: the identifier (partition key) plus the full
       JSON document exactly as the API serializes it (camelCase keys).
Who:   Used by DocumentRepository for CRUD and by Alembic for schema management.

Table Design:
    - id: String primary key. Book ids are `book-<n>`, pet ids are UUID text,
      so a native UUID column would not fit both.
    - document: JSON (JSONB on PostgreSQL). The store has no opinion about
      document fields; the Pydantic schemas own the shape.
"""

from typing import Any, Dict

from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from apislabs.database import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
DocumentType = JSON().with_variant(JSONB(), "postgresql")


class DocumentRecord:
    """Columns shared by every document table."""

    # ── Identifier / Partition Key ────────────────────────────────────────
    # Assigned by the application at creation and never changed
    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Entity identifier; also the lookup and partition key",
    )

    # ── Document Body ─────────────────────────────────────────────────────
    document: Mapped[Dict[str, Any]] = mapped_column(
        DocumentType,
        nullable=False,
        comment="Full entity document as serialized by the API",
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id='{self.id}')>"


class BookRecord(DocumentRecord, Base):
    __tablename__ = "books"


class PetRecord(DocumentRecord, Base):
    __tablename__ = "pets"
