"""
Base service with common record operations.

Provides:
- get() - synchronous lookup in the entity store snapshot
- fetch() / require() - authoritative lookup through the backend

Writes go through the persistence backend; the store only changes when the
backend pushes the committed snapshot back.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from datacatalog.persistence.base import PersistenceBackend
from datacatalog.schemas.enums import Collection
from datacatalog.services.exceptions import NotFoundError
from datacatalog.store.entity_store import EntityStore

# Type variable for generic service
ReadSchemaType = TypeVar("ReadSchemaType", bound=BaseModel)


class BaseService(Generic[ReadSchemaType]):
    """
    Generic base service bound to one collection.

    Usage:
        class CategoryService(BaseService[CategoryRead]):
            def __init__(self, backend, store):
                super().__init__(backend, store, Collection.CATEGORIES, CategoryRead, "Category")
    """

    def __init__(
        self,
        backend: PersistenceBackend,
        store: EntityStore,
        collection: Collection,
        read_schema: type[ReadSchemaType],
        entity_name: str,
    ):
        self.backend = backend
        self.store = store
        self.collection = collection
        self.read_schema = read_schema
        self.entity_name = entity_name

    def get(self, record_id: str) -> ReadSchemaType | None:
        """Get a record from the current store snapshot."""
        for record in self._snapshot():
            if record.id == record_id:
                return record
        return None

    def _snapshot(self) -> list[ReadSchemaType]:
        if self.collection is Collection.DATA_TYPES:
            return self.store.data_types
        if self.collection is Collection.DATASETS:
            return self.store.datasets
        if self.collection is Collection.CATEGORIES:
            return self.store.stored_categories
        return self.store.links

    async def fetch(self, record_id: str) -> ReadSchemaType | None:
        """Get a record straight from the backend."""
        records = await self.backend.query_where(self.collection, "id", record_id)
        if not records:
            return None
        return self.read_schema.model_validate(records[0])

    async def require(self, record_id: str) -> ReadSchemaType:
        """Get a record from the backend or raise NotFoundError."""
        record = await self.fetch(record_id)
        if record is None:
            raise NotFoundError(self.entity_name, record_id)
        return record
