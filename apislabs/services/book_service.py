"""
ApisLabs Catalog API - Book Service (Business Logic Orchestrator)
==================================================================

What:  Create / read / update / delete workflows for books.
How:   Composes the validator, identity generator and merge engine with an
       injected BookRepository.
Who:   Called by the /books route handlers.

Flows:
    create: validate → generate id → build with defaults → repository.create
    update: repository.get_by_id (404) → payload check (400) → merge → upsert
    delete: repository.get_by_id (404) → repository.delete_by_id

Errors:
    ValidationError and NotFoundError are raised here. Repository errors are
    NOT caught: they propagate unchanged to the global handler (500).
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from apislabs.exceptions import NotFoundError, ValidationError
from apislabs.repository import BookRepository
from apislabs.schemas.book import Book, BookInput
from apislabs.services.identity import generate_book_id
from apislabs.services.merge import BOOK_MERGE_POLICY, merge
from apislabs.services.validation import INVALID_BOOK_DATA, validate_book_input

logger = logging.getLogger(__name__)

RESOURCE = "Book"


class BookService:
    """
    Business logic layer for book operations.

    Holds no per-request state; the repository is injected at construction.
    """

    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def list_books(self) -> List[Book]:
        logger.info("Getting all books")
        return await self.repository.list()

    async def get_book(self, book_id: str) -> Book:
        """
        Raises:
            NotFoundError: No book with this id (→ 404)
        """
        logger.info("Getting book with ID: %s", book_id)
        book = await self.repository.get_by_id(book_id)
        if book is None:
            raise NotFoundError(resource=RESOURCE, resource_id=book_id)
        return book

    async def create_book(self, payload: Optional[BookInput]) -> Book:
        """
        Validate a creation payload and persist a new book.

        Creation defaults:
            available   → True when omitted
            reviewCount → 0 when omitted
            createdAt == updatedAt (single clock read)

        Raises:
            ValidationError: First failing validation reason (→ 400)
        """
        logger.info("Creating new book")
        validate_book_input(payload)

        now = datetime.now(timezone.utc)
        book = Book(
            id=generate_book_id(),
            isbn=payload.isbn,
            title=payload.title,
            author=payload.author,
            categories=payload.categories,
            publication_year=payload.publication_year,
            language=payload.language,
            pages=payload.pages,
            publisher=payload.publisher,
            description=payload.description,
            cover_image=payload.cover_image,
            available=True if payload.available is None else payload.available,
            rating=payload.rating,
            review_count=payload.review_count if payload.review_count is not None else 0,
            price=payload.price,
            created_at=now,
            updated_at=now,
        )

        await self.repository.create(book)
        logger.info("Book created: %s", book.id)
        return book

    async def update_book(self, existing: Book, payload: Optional[BookInput]) -> Book:
        """
        Merge a partial payload into a book fetched with get_book().

        Callers fetch first so an unknown id is reported as 404 before the
        request body is even decoded.

        Raises:
            ValidationError: Null payload (→ 400 "Invalid book data")
        """
        logger.info("Updating book with ID: %s", existing.id)

        if payload is None:
            raise ValidationError(INVALID_BOOK_DATA)

        updated = merge(existing, payload, BOOK_MERGE_POLICY)
        await self.repository.upsert(updated)
        return updated

    async def delete_book(self, book_id: str) -> None:
        logger.info("Deleting book with ID: %s", book_id)
        await self.get_book(book_id)
        await self.repository.delete_by_id(book_id)
