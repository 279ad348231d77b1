"""
ApisLabs Catalog API - Application Package Initializer
=======================================================

What: Marks the `apislabs` directory as a Python package.
Who:  Imported by uvicorn (`apislabs.main:app`), Alembic and pytest.

Architecture Note:
    Two parallel resource services (books, pets) share one layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← decode / encode HTTP only
    ├─────────────────────────────────────┤
    │  Services (validate, id, merge)     │  ← business rules, no HTTP
    ├─────────────────────────────────────┤
    │  Schemas (Pydantic documents)       │  ← Book, Pet, inputs
    ├─────────────────────────────────────┤
    │  Repository + DocumentStore         │  ← JSON documents by id
    └─────────────────────────────────────┘

    Each entity is stored as a single JSON document whose identifier is
    also its lookup key.
"""

__version__ = "1.0.0"
