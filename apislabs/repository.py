"""
ApisLabs Catalog API - Document Repository
===========================================

What:  CRUD-by-identifier access to one document table.
How:   Each operation opens its own session from the injected DocumentStore,
       converts between Pydantic entities and JSON documents, and commits.
Who:   One instance per entity type, constructed by `create_app()` and
       resolved in routes through FastAPI dependencies.

Operation Semantics:
    list()          → every document, store-defined order, no paging
    get_by_id(id)   → entity or None
    create(entity)  → plain INSERT; a duplicate id raises the driver's
                      IntegrityError (surfaced to the caller as a 500)
    upsert(entity)  → insert-or-replace by primary key
    delete_by_id(id)→ True if a document was removed, False if absent

Consistency:
    Operations are independent transactions. A fetch followed by an upsert
    is NOT atomic; concurrent updates to one id are last-writer-wins.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select

from apislabs.database import DocumentStore
from apislabs.models.documents import BookRecord, DocumentRecord, PetRecord
from apislabs.schemas.book import Book
from apislabs.schemas.common import DocumentModel
from apislabs.schemas.pet import Pet

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=DocumentModel)


class DocumentRepository(Generic[EntityT]):
    """Repository for one entity type backed by one document table."""

    def __init__(
        self,
        store: DocumentStore,
        record_cls: Type[DocumentRecord],
        entity_cls: Type[EntityT],
    ):
        self.store = store
        self.record_cls = record_cls
        self.entity_cls = entity_cls

    def _to_entity(self, record: DocumentRecord) -> EntityT:
        return self.entity_cls.model_validate(record.document)

    async def list(self) -> List[EntityT]:
        async with self.store.session() as session:
            result = await session.execute(select(self.record_cls))
            records = result.scalars().all()
        return [self._to_entity(record) for record in records]

    async def get_by_id(self, entity_id: str) -> Optional[EntityT]:
        async with self.store.session() as session:
            record = await session.get(self.record_cls, entity_id)
            if record is None:
                return None
            return self._to_entity(record)

    async def create(self, entity: EntityT) -> EntityT:
        document = entity.to_document()
        async with self.store.session() as session:
            session.add(self.record_cls(id=document["id"], document=document))
            # Flush inside the session so a duplicate key fails here
            await session.flush()
        logger.debug("Inserted %s %s", self.record_cls.__tablename__, document["id"])
        return entity

    async def upsert(self, entity: EntityT) -> EntityT:
        document = entity.to_document()
        async with self.store.session() as session:
            await session.merge(self.record_cls(id=document["id"], document=document))
        logger.debug("Upserted %s %s", self.record_cls.__tablename__, document["id"])
        return entity

    async def delete_by_id(self, entity_id: str) -> bool:
        async with self.store.session() as session:
            result = await session.execute(
                delete(self.record_cls).where(self.record_cls.id == entity_id)
            )
            deleted = (result.rowcount or 0) > 0
        logger.debug("Delete %s %s: %s", self.record_cls.__tablename__, entity_id, deleted)
        return deleted


class BookRepository(DocumentRepository[Book]):
    def __init__(self, store: DocumentStore):
        super().__init__(store, BookRecord, Book)


class PetRepository(DocumentRepository[Pet]):
    def __init__(self, store: DocumentStore):
        super().__init__(store, PetRecord, Pet)
