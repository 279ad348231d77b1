"""
ApisLabs Catalog API - Book Route Handlers
===========================================

What:  HTTP surface for the book collection.
How:   Decodes the request, delegates to BookService, returns the entity.
       Errors are raised, never caught here; global handlers in main.py
       turn them into plain-text responses.

Routes:
    GET    /books        → 200 JSON array
    GET    /books/{id}   → 200 | 404
    POST   /books        → 201 | 400
    PUT    /books/{id}   → 200 | 404 | 400 (null payload)
    DELETE /books/{id}   → 204 | 404
    Any unexpected failure → 500 "Error: <message>"
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response

from apislabs.dependencies import get_book_service, read_book_input
from apislabs.schemas.book import Book, BookInput
from apislabs.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["Books"])

_TEXT_ERROR = {"content": {"text/plain": {"schema": {"type": "string"}}}}


@router.get(
    "",
    response_model=List[Book],
    responses={500: {"description": "Store failure", **_TEXT_ERROR}},
    summary="List all books",
)
async def list_books(service: BookService = Depends(get_book_service)) -> List[Book]:
    return await service.list_books()


@router.get(
    "/{book_id}",
    response_model=Book,
    responses={
        404: {"description": "Book not found", **_TEXT_ERROR},
        500: {"description": "Store failure", **_TEXT_ERROR},
    },
    summary="Get a book by ID",
)
async def get_book(book_id: str, service: BookService = Depends(get_book_service)) -> Book:
    return await service.get_book(book_id)


@router.post(
    "",
    status_code=201,
    response_model=Book,
    responses={
        400: {"description": "First failing validation reason", **_TEXT_ERROR},
        500: {"description": "Undecodable payload or store failure", **_TEXT_ERROR},
    },
    summary="Create a book",
    description=(
        "Requires isbn, title, author (id and name), at least one category, "
        "publicationYear and language. The id is assigned by the server as book-<n>."
    ),
)
async def create_book(
    payload: Optional[BookInput] = Depends(read_book_input),
    service: BookService = Depends(get_book_service),
) -> Book:
    return await service.create_book(payload)


@router.put(
    "/{book_id}",
    response_model=Book,
    responses={
        400: {"description": "Null payload", **_TEXT_ERROR},
        404: {"description": "Book not found", **_TEXT_ERROR},
        500: {"description": "Undecodable payload or store failure", **_TEXT_ERROR},
    },
    summary="Partially update a book",
    description=(
        "Blank isbn/title/language and empty categories keep the stored value; "
        "other fields replace the stored value when not null."
    ),
)
async def update_book(
    book_id: str,
    request: Request,
    service: BookService = Depends(get_book_service),
) -> Book:
    existing = await service.get_book(book_id)
    payload = await read_book_input(request)
    return await service.update_book(existing, payload)


@router.delete(
    "/{book_id}",
    status_code=204,
    response_class=Response,
    responses={
        404: {"description": "Book not found", **_TEXT_ERROR},
        500: {"description": "Store failure", **_TEXT_ERROR},
    },
    summary="Delete a book",
)
async def delete_book(book_id: str, service: BookService = Depends(get_book_service)) -> Response:
    await service.delete_book(book_id)
    return Response(status_code=204)
