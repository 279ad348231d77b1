"""
ApisLabs Catalog API - FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() wires settings, the document store,
       repositories, middleware, exception handlers and routers.
Who:   Called by uvicorn (`uvicorn apislabs.main:app`) and by tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────┐ ┌─────┐  │
    │  │  Req ID  │→│  Logging        │→│ GZip │→│CORS │  │
    │  └──────────┘ └─────────────────┘ └──────┘ └─────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌──────────┐ ┌─────────────────┐      │
    │  │  /books  │ │  /pets   │ │ GET /health     │      │
    │  └──────────┘ └──────────┘ └─────────────────┘      │
    │                                                     │
    │  Exception Handlers (plain text bodies):            │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ other→500    │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Construction: DocumentStore and repositories are built once and stored
                  on app.state (no module-level client).
    Startup:      logging, optional schema creation, store reachability log.
    Shutdown:     store disposal (closes pooled connections).
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse

from apislabs import __version__
from apislabs.config import Settings, settings as default_settings
from apislabs.database import DocumentStore
from apislabs.exceptions import NotFoundError, ValidationError
from apislabs.middleware.logging import RequestLoggingMiddleware
from apislabs.middleware.request_id import RequestIDMiddleware, request_id_var
from apislabs.repository import BookRepository, PetRepository
from apislabs.routes import books, health, pets

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup sequence:
        1. Setup logging
        2. Create document tables when DB_CREATE_SCHEMA is set
        3. Log store reachability (the server starts either way)

    Shutdown sequence:
        1. Dispose the document store
    """
    config: Settings = app.state.settings
    store: DocumentStore = app.state.store

    setup_logging(config.log_level)
    logger.info("=" * 60)
    logger.info("ApisLabs Catalog API %s starting up...", __version__)

    if config.db_create_schema:
        await store.create_schema()

    if await store.ping():
        logger.info("Document store reachable")
    else:
        logger.error("Document store is not reachable; requests will fail with 500")

    logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("ApisLabs Catalog API shutting down...")
    await store.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to plain-text responses.

    Handler hierarchy:
        ValidationError  → 400, body = first failing reason
        NotFoundError    → 404, body = "<Resource> with ID <id> not found"
        Exception        → 500, body = "Error: <message>"

    This is the only place errors are caught. The 500 body carries the raw
    exception text unless `expose_error_details` is disabled.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s", rid, exc.message)
        return PlainTextResponse(exc.message, status_code=404)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error(
            "[%s] Error handling %s %s: %s",
            rid,
            request.method,
            request.url.path,
            str(exc),
            exc_info=exc,
        )
        config: Settings = request.app.state.settings
        message = str(exc) if config.expose_error_details else GENERIC_ERROR_MESSAGE
        return PlainTextResponse(f"Error: {message}", status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; defaults to the environment-loaded settings
        store:    Document store; defaults to one built from `settings`

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    settings = settings or default_settings
    store = store or DocumentStore.from_settings(settings)

    app = FastAPI(
        title="ApisLabs Catalog API",
        description="CRUD services for books and pets backed by a JSON document store.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Shared Resources ──────────────────────────────────────────────────
    app.state.settings = settings
    app.state.store = store
    app.state.book_repository = BookRepository(store)
    app.state.pet_repository = PetRepository(store)

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(books.router, prefix=settings.api_prefix)
    app.include_router(pets.router, prefix=settings.api_prefix)
    app.include_router(health.router)

    return app


# uvicorn expects `apislabs.main:app` to be importable
app = create_app()
