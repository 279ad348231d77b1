"""
ApisLabs Catalog API - Pet Service
===================================

What:  Create / read / update / delete workflows for pets.
How:   Same shape as BookService with the pet validator, UUID identifiers
       and the pet merge table.

Differences from books:
    - Validation only requires a non-empty name.
    - A null update payload is not rejected; it is merged as an empty patch,
      which clears breed/age/color/weight.
    - status defaults to "available" at creation only.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from apislabs.exceptions import NotFoundError
from apislabs.repository import PetRepository
from apislabs.schemas.pet import DEFAULT_PET_STATUS, Pet, PetInput
from apislabs.services.identity import generate_pet_id
from apislabs.services.merge import PET_MERGE_POLICY, merge
from apislabs.services.validation import validate_pet_input

logger = logging.getLogger(__name__)

RESOURCE = "Pet"


class PetService:
    """Business logic layer for pet operations."""

    def __init__(self, repository: PetRepository):
        self.repository = repository

    async def list_pets(self) -> List[Pet]:
        logger.info("Getting all pets")
        return await self.repository.list()

    async def get_pet(self, pet_id: str) -> Pet:
        logger.info("Getting pet with ID: %s", pet_id)
        pet = await self.repository.get_by_id(pet_id)
        if pet is None:
            raise NotFoundError(resource=RESOURCE, resource_id=pet_id)
        return pet

    async def create_pet(self, payload: Optional[PetInput]) -> Pet:
        logger.info("Creating new pet")
        validate_pet_input(payload)

        now = datetime.now(timezone.utc)
        pet = Pet(
            id=generate_pet_id(),
            name=payload.name,
            species=payload.species,
            breed=payload.breed,
            age=payload.age,
            color=payload.color,
            weight=payload.weight,
            status=payload.status if payload.status is not None else DEFAULT_PET_STATUS,
            created_at=now,
            updated_at=now,
        )

        await self.repository.create(pet)
        logger.info("Pet created: %s", pet.id)
        return pet

    async def update_pet(self, existing: Pet, payload: Optional[PetInput]) -> Pet:
        """
        Merge a payload into a pet fetched with get_pet().

        breed, age, color and weight are always taken from the payload,
        so omitting them clears the stored values.
        """
        logger.info("Updating pet with ID: %s", existing.id)

        updated = merge(existing, payload or PetInput(), PET_MERGE_POLICY)
        await self.repository.upsert(updated)
        return updated

    async def delete_pet(self, pet_id: str) -> None:
        logger.info("Deleting pet with ID: %s", pet_id)
        await self.get_pet(pet_id)
        await self.repository.delete_by_id(pet_id)
