"""
ApisLabs Catalog API - FastAPI Dependencies
============================================

What:  Resolves services and request payloads for route handlers.
How:   Repositories live on `app.state` (built once by `create_app()`);
       each request gets a lightweight service wrapping the shared repository.

Payload decoding:
    Bodies are decoded from raw JSON here instead of through FastAPI's
    automatic body model, so that:
    - a JSON `null` body reaches the service as None (→ "Invalid ... data")
    - malformed JSON or a wrongly typed field raises an ordinary exception
      that the catch-all handler reports as 500 "Error: <message>"
    - values are decoded strictly: "2020" is not an integer, "no" is not
      a boolean
"""

from typing import Optional

from fastapi import Depends, Request

from apislabs.repository import BookRepository, PetRepository
from apislabs.schemas.book import BookInput
from apislabs.schemas.pet import PetInput
from apislabs.services.book_service import BookService
from apislabs.services.pet_service import PetService


def get_book_repository(request: Request) -> BookRepository:
    return request.app.state.book_repository


def get_pet_repository(request: Request) -> PetRepository:
    return request.app.state.pet_repository


def get_book_service(
    repository: BookRepository = Depends(get_book_repository),
) -> BookService:
    return BookService(repository)


def get_pet_service(
    repository: PetRepository = Depends(get_pet_repository),
) -> PetService:
    return PetService(repository)


async def read_book_input(request: Request) -> Optional[BookInput]:
    data = await request.json()
    if data is None:
        return None
    return BookInput.model_validate_json(await request.body(), strict=True)


async def read_pet_input(request: Request) -> Optional[PetInput]:
    data = await request.json()
    if data is None:
        return None
    return PetInput.model_validate_json(await request.body(), strict=True)
