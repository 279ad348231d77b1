"""
Alembic Migration Environment
===============================

What:  Migrates the `books` and `pets` document tables.
How:   The connection URL comes from apislabs settings (DATABASE_URL), never
       from alembic.ini, so migrations hit the same store the API serves.
       Migrations run through an async engine without pooling.

Per-dialect behavior:
    PostgreSQL: `document` columns are JSONB; compare_type lets
                --autogenerate notice a JSON ↔ JSONB change.
    SQLite:     ALTER TABLE is limited, so operations render in batch
                mode (copy-and-move) for local development stores.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from apislabs.config import settings
from apislabs.database import Base

# Registers the books / pets tables on Base.metadata for --autogenerate
from apislabs.models import documents  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)


def _document_store_options() -> dict:
    return {
        "target_metadata": Base.metadata,
        "compare_type": True,
        "render_as_batch": settings.is_sqlite,
    }


def run_migrations_offline() -> None:
    """Emit the document-table DDL as SQL without connecting."""
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_document_store_options(),
    )

    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection) -> None:
    context.configure(connection=connection, **_document_store_options())

    with context.begin_transaction():
        context.run_migrations()


async def migrate_document_store() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with engine.connect() as connection:
        await connection.run_sync(_migrate)

    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(migrate_document_store())
