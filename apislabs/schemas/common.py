"""
ApisLabs Catalog API - Shared Schema Building Blocks
=====================================================

What:  Base model for every API document plus the health payload.
How:   Python attributes are snake_case; the wire format is fixed lower
       camelCase (`publicationYear`, `coverImage`, `createdAt`). Request
       payloads (`InputModel`) bind by the camelCase name only; entities
       also accept attribute names so services can build them directly.
       The alias is always used on output.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Base for entities and payloads exchanged as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_document(self) -> dict:
        """JSON-compatible dict with camelCase keys, nulls included."""
        return self.model_dump(mode="json", by_alias=True)


class InputModel(DocumentModel):
    """
    Base for create / update payloads.

    Keys bind case-sensitively to the camelCase wire names; a snake_case
    key such as `publication_year` is ignored like any unknown key.
    """

    model_config = ConfigDict(populate_by_name=False)


class HealthResponse(BaseModel):
    """
    Returned by GET /health for monitoring and load balancer probes.

    Unconditional: the probe never touches the document store.
    """
    status: str = Field(default="healthy", description="Always 'healthy' when the process answers")
    timestamp: datetime = Field(description="Server time of the probe (UTC)")
