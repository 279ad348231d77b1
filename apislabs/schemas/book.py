"""
ApisLabs Catalog API - Book Schemas
====================================

What:  Pydantic models for the book resource.
       - Book: the persisted document (also the response body)
       - BookInput: create / update payload, every field optional
How:   FastAPI serializes `Book` by alias; services build and merge `Book`
       instances; the repository stores `Book.to_document()`.

Required on creation (enforced by services.validation, not by the schema):
    isbn, title, author.id, author.name, categories (≥1),
    publicationYear, language
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from apislabs.schemas.common import DocumentModel, InputModel


class AuthorInfo(DocumentModel):
    """Author reference embedded in a book. Omitted sub-fields default to ''."""
    id: Optional[str] = Field(default="", description="Author identifier")
    name: Optional[str] = Field(default="", description="Author display name")


class PriceInfo(DocumentModel):
    amount: Optional[float] = Field(default=None, description="Price amount")
    currency: Optional[str] = Field(default=None, description="ISO currency code, e.g. USD")


class Book(DocumentModel):
    """
    A persisted book.

    Lifecycle:
        id, createdAt:  set once at creation, never changed
        updatedAt:      equal to createdAt at creation, refreshed on every update
    """
    id: str = Field(description="Identifier, format book-<n>")
    isbn: str
    title: str
    author: AuthorInfo
    categories: List[str]
    publication_year: int
    language: str
    pages: Optional[int] = None
    publisher: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = Field(default=None, description="Cover image URL")
    available: bool = True
    rating: Optional[float] = None
    review_count: int = 0
    price: Optional[PriceInfo] = None
    created_at: datetime
    updated_at: datetime


class BookInput(InputModel):
    """
    Create / update payload.

    Every field is optional so the same model carries full creation
    payloads and partial updates; null and absent are equivalent.
    """
    isbn: Optional[str] = None
    title: Optional[str] = None
    author: Optional[AuthorInfo] = None
    categories: Optional[List[str]] = None
    publication_year: Optional[int] = None
    language: Optional[str] = None
    pages: Optional[int] = None
    publisher: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = None
    available: Optional[bool] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    price: Optional[PriceInfo] = None
