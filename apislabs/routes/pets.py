"""
ApisLabs Catalog API - Pet Route Handlers
==========================================

What:  HTTP surface for the pet collection; mirrors routes/books.py.

Differences from books:
    PUT /pets/{id} has no 400 branch: a null payload is merged as an empty
    patch. Every update replaces breed/age/color/weight with the sent
    values (null when omitted).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response

from apislabs.dependencies import get_pet_service, read_pet_input
from apislabs.schemas.pet import Pet, PetInput
from apislabs.services.pet_service import PetService

router = APIRouter(prefix="/pets", tags=["Pets"])

_TEXT_ERROR = {"content": {"text/plain": {"schema": {"type": "string"}}}}


@router.get("", response_model=List[Pet], summary="List all pets")
async def list_pets(service: PetService = Depends(get_pet_service)) -> List[Pet]:
    return await service.list_pets()


@router.get(
    "/{pet_id}",
    response_model=Pet,
    responses={404: {"description": "Pet not found", **_TEXT_ERROR}},
    summary="Get a pet by ID",
)
async def get_pet(pet_id: str, service: PetService = Depends(get_pet_service)) -> Pet:
    return await service.get_pet(pet_id)


@router.post(
    "",
    status_code=201,
    response_model=Pet,
    responses={400: {"description": "Missing payload or name", **_TEXT_ERROR}},
    summary="Create a pet",
)
async def create_pet(
    payload: Optional[PetInput] = Depends(read_pet_input),
    service: PetService = Depends(get_pet_service),
) -> Pet:
    return await service.create_pet(payload)


@router.put(
    "/{pet_id}",
    response_model=Pet,
    responses={404: {"description": "Pet not found", **_TEXT_ERROR}},
    summary="Update a pet",
    description="breed, age, color and weight must be resent on every update or they are cleared.",
)
async def update_pet(
    pet_id: str,
    request: Request,
    service: PetService = Depends(get_pet_service),
) -> Pet:
    existing = await service.get_pet(pet_id)
    payload = await read_pet_input(request)
    return await service.update_pet(existing, payload)


@router.delete(
    "/{pet_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Pet not found", **_TEXT_ERROR}},
    summary="Delete a pet",
)
async def delete_pet(pet_id: str, service: PetService = Depends(get_pet_service)) -> Response:
    await service.delete_pet(pet_id)
    return Response(status_code=204)
