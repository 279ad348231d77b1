"""
ApisLabs Catalog API - Pet Schemas
===================================

What:  Pydantic models for the pet resource (Pet document, PetInput payload).

Note:  `species` is nullable on the persisted document because creation
       never validates it; only `name` is checked.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from apislabs.schemas.common import DocumentModel, InputModel

DEFAULT_PET_STATUS = "available"


class Pet(DocumentModel):
    id: str = Field(description="Identifier, canonical UUID text")
    name: str
    species: Optional[str] = None
    breed: Optional[str] = None
    age: Optional[int] = None
    color: Optional[str] = None
    weight: Optional[float] = None
    status: str = DEFAULT_PET_STATUS
    created_at: datetime
    updated_at: datetime


class PetInput(InputModel):
    name: Optional[str] = None
    species: Optional[str] = None
    breed: Optional[str] = None
    age: Optional[int] = None
    color: Optional[str] = None
    weight: Optional[float] = None
    status: Optional[str] = None
