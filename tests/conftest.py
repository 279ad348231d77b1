"""
ApisLabs Catalog API - Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── book_payload / pet_payload: valid creation bodies (camelCase JSON)
    ├── sample_book / sample_pet: persisted-looking entities
    ├── mock_book_repository / mock_pet_repository: AsyncMock repositories
    ├── test_settings: Settings pointing at a temp SQLite file
    ├── store: DocumentStore with tables created
    └── test_client: HTTPX AsyncClient bound to a fresh app
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock

# Override settings for testing BEFORE any apislabs imports: importing
# apislabs.main builds the default app from the environment.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="apislabs_test_"), "default.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from apislabs.config import Settings
from apislabs.database import DocumentStore
from apislabs.schemas.book import AuthorInfo, Book, PriceInfo
from apislabs.schemas.pet import Pet


# ══════════════════════════════════════════════════════════════════════════
# Payloads and Entities
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def book_payload():
    """Minimal valid POST /books body."""
    return {
        "isbn": "123",
        "title": "T",
        "author": {"id": "a1", "name": "A"},
        "categories": ["fiction"],
        "publicationYear": 2020,
        "language": "en",
    }


@pytest.fixture
def pet_payload():
    return {
        "name": "Rex",
        "species": "dog",
        "breed": "Lab",
        "age": 3,
        "color": "black",
        "weight": 28.5,
    }


@pytest.fixture
def fixed_time():
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_book(fixed_time):
    """A fully populated persisted book."""
    return Book(
        id="book-4242",
        isbn="978-0132350884",
        title="Clean Code",
        author=AuthorInfo(id="auth-1", name="Robert C. Martin"),
        categories=["software", "craft"],
        publication_year=2008,
        language="en",
        pages=464,
        publisher="Prentice Hall",
        description="A handbook of agile software craftsmanship",
        cover_image="https://example.com/clean-code.jpg",
        available=True,
        rating=4.4,
        review_count=12,
        price=PriceInfo(amount=37.99, currency="USD"),
        created_at=fixed_time,
        updated_at=fixed_time,
    )


@pytest.fixture
def sample_pet(fixed_time):
    return Pet(
        id="5f0c6f7e-9a4b-4a53-8f43-1a2b3c4d5e6f",
        name="Rex",
        species="dog",
        breed="Lab",
        age=3,
        color="black",
        weight=28.5,
        status="available",
        created_at=fixed_time,
        updated_at=fixed_time,
    )


# ══════════════════════════════════════════════════════════════════════════
# Mock Repositories (service unit tests)
# ══════════════════════════════════════════════════════════════════════════

def _mock_repository():
    repository = AsyncMock()
    repository.list = AsyncMock(return_value=[])
    repository.get_by_id = AsyncMock(return_value=None)
    # create / upsert echo the entity back like the real repository
    repository.create = AsyncMock(side_effect=lambda entity: entity)
    repository.upsert = AsyncMock(side_effect=lambda entity: entity)
    repository.delete_by_id = AsyncMock(return_value=True)
    return repository


@pytest.fixture
def mock_book_repository():
    return _mock_repository()


@pytest.fixture
def mock_pet_repository():
    return _mock_repository()


# ══════════════════════════════════════════════════════════════════════════
# Real Store (repository and API tests)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings(tmp_path):
    """Settings bound to a per-test SQLite database file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'apislabs.db'}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def store(test_settings):
    """
    A DocumentStore with the books / pets tables created.

    Disposed after the test so the SQLite file is released.
    """
    document_store = DocumentStore.from_settings(test_settings)
    await document_store.create_schema()
    yield document_store
    await document_store.dispose()


@pytest_asyncio.fixture
async def test_client(test_settings, store):
    """
    HTTPX AsyncClient talking to a fresh app built around `store`.

    raise_app_exceptions=False: the catch-all 500 handler responds and the
    server error middleware then re-raises; the client should see the
    response, as a real HTTP client would.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from apislabs.main import create_app

    app = create_app(settings=test_settings, store=store)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
