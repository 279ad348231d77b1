"""
ApisLabs Catalog API - Creation Payload Validation
===================================================

What:  Creation-time gate for book and pet payloads.
How:   Ordered checks; the FIRST failing check raises ValidationError with
       its reason. Later checks are not evaluated, so the reported reason
       depends on check order.

Book check order:
    1. payload present          → "Invalid book data"
    2. isbn not blank           → "ISBN is required"
    3. title not blank          → "Title is required"
    4. author id and name       → "Author is required"
    5. at least one category    → "At least one category is required"
    6. publicationYear present  → "Publication year is required"
    7. language not blank       → "Language is required"

Pet checks only payload presence and a non-empty name. Whitespace-only
names pass, and species is never checked.
"""

from typing import Optional

from apislabs.exceptions import ValidationError
from apislabs.schemas.book import BookInput
from apislabs.schemas.pet import PetInput

INVALID_BOOK_DATA = "Invalid book data"
INVALID_PET_DATA = "Invalid pet data"


def is_blank(value: Optional[str]) -> bool:
    """True for None, '' and whitespace-only strings."""
    return value is None or not value.strip()


def validate_book_input(payload: Optional[BookInput]) -> None:
    """Raise ValidationError with the first failing reason, else return None."""
    if payload is None:
        raise ValidationError(INVALID_BOOK_DATA)

    if is_blank(payload.isbn):
        raise ValidationError("ISBN is required", field="isbn")

    if is_blank(payload.title):
        raise ValidationError("Title is required", field="title")

    author = payload.author
    if author is None or is_blank(author.id) or is_blank(author.name):
        raise ValidationError("Author is required", field="author")

    if not payload.categories:
        raise ValidationError("At least one category is required", field="categories")

    if payload.publication_year is None:
        raise ValidationError("Publication year is required", field="publicationYear")

    if is_blank(payload.language):
        raise ValidationError("Language is required", field="language")


def validate_pet_input(payload: Optional[PetInput]) -> None:
    if payload is None or not payload.name:
        raise ValidationError(INVALID_PET_DATA, field="name")
