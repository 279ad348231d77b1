"""
ApisLabs Catalog API - Partial Update Merge Engine
===================================================

What:  Computes the next entity state from an existing entity and a partial
       update payload.
How:   Each entity type has a policy table mapping field → MergePolicy.
       `merge()` walks the table, asks each policy whether the incoming
       value replaces the current one, and returns a new entity with
       `updated_at` refreshed. `id` and `created_at` are never in a table,
       so they can never change.

Policies:
    OVERWRITE_IF_NOT_BLANK  take incoming only if it is a non-blank string
    OVERWRITE_IF_NOT_EMPTY  take incoming only if not None and has ≥1 element
    COALESCE                take incoming if not None, else keep current
    ALWAYS                  take incoming, even None

Book vs Pet:
    Book required fields can only be replaced by meaningful values; its
    optional fields coalesce. Pet breed/age/color/weight use ALWAYS, so an
    update that omits them clears them. Callers must resend those fields
    on every update to keep them.
"""

import enum
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, TypeVar

from apislabs.schemas.common import DocumentModel

EntityT = TypeVar("EntityT", bound=DocumentModel)


class MergePolicy(str, enum.Enum):
    OVERWRITE_IF_NOT_BLANK = "overwrite_if_not_blank"
    OVERWRITE_IF_NOT_EMPTY = "overwrite_if_not_empty"
    COALESCE = "coalesce"
    ALWAYS = "always"

    def resolve(self, current: Any, incoming: Any) -> Any:
        """Return the value the field should hold after the merge."""
        if self is MergePolicy.ALWAYS:
            return incoming
        if incoming is None:
            return current
        if self is MergePolicy.OVERWRITE_IF_NOT_BLANK:
            return incoming if incoming.strip() else current
        if self is MergePolicy.OVERWRITE_IF_NOT_EMPTY:
            return incoming if len(incoming) > 0 else current
        return incoming


BOOK_MERGE_POLICY: Mapping[str, MergePolicy] = {
    "isbn": MergePolicy.OVERWRITE_IF_NOT_BLANK,
    "title": MergePolicy.OVERWRITE_IF_NOT_BLANK,
    # Replaced whenever present, even with blank id/name
    "author": MergePolicy.COALESCE,
    # An empty list is not an intentional clear
    "categories": MergePolicy.OVERWRITE_IF_NOT_EMPTY,
    "publication_year": MergePolicy.COALESCE,
    "language": MergePolicy.OVERWRITE_IF_NOT_BLANK,
    "pages": MergePolicy.COALESCE,
    "publisher": MergePolicy.COALESCE,
    "description": MergePolicy.COALESCE,
    "cover_image": MergePolicy.COALESCE,
    "available": MergePolicy.COALESCE,
    "rating": MergePolicy.COALESCE,
    "review_count": MergePolicy.COALESCE,
    "price": MergePolicy.COALESCE,
}

PET_MERGE_POLICY: Mapping[str, MergePolicy] = {
    "name": MergePolicy.COALESCE,
    "species": MergePolicy.COALESCE,
    "breed": MergePolicy.ALWAYS,
    "age": MergePolicy.ALWAYS,
    "color": MergePolicy.ALWAYS,
    "weight": MergePolicy.ALWAYS,
    # Defaults to "available" only at creation
    "status": MergePolicy.COALESCE,
}


def merge(
    existing: EntityT,
    patch: DocumentModel,
    policy: Mapping[str, MergePolicy],
    now: Optional[datetime] = None,
) -> EntityT:
    """
    Apply `patch` to `existing` according to `policy`.

    Pure and total: never raises for well-formed models, never mutates
    `existing`. Fields missing from `policy` keep their current value.

    Args:
        existing: Current persisted entity
        patch:    Partial payload (fields not sent are None)
        policy:   Field name → MergePolicy table for the entity type
        now:      Timestamp for updated_at (defaults to current UTC time)
    """
    updates = {
        field: rule.resolve(getattr(existing, field), getattr(patch, field))
        for field, rule in policy.items()
    }
    updates["updated_at"] = now or datetime.now(timezone.utc)
    return existing.model_copy(update=updates, deep=True)
