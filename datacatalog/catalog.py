"""
Catalog context - the object the UI layer talks to.

Bundles one persistence backend, the entity store it feeds, the live sync
adapter and the services. Every consumer receives the Catalog explicitly;
there is no module-level session or user state.

Usage:
    async with Catalog.from_settings() as catalog:
        data_type = await catalog.add_data_type(DataTypeCreate(name="Roads"))
        catalog.store.get_datasets_for_data_type(data_type.id)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from datacatalog.core.config import Settings, get_settings
from datacatalog.persistence.base import PersistenceBackend
from datacatalog.persistence.sql import SQLBackend
from datacatalog.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from datacatalog.schemas.data_type import DataTypeCreate, DataTypeRead, DataTypeUpdate
from datacatalog.schemas.dataset import DatasetCreate, DatasetRead, DatasetUpdate
from datacatalog.schemas.enums import LinkSide
from datacatalog.schemas.transfer import CatalogDocument, ImportResult
from datacatalog.services.category_service import CategoryService
from datacatalog.services.data_type_service import DataTypeService
from datacatalog.services.dataset_service import DatasetService
from datacatalog.services.link_service import LinkService
from datacatalog.services.transfer_service import TransferService
from datacatalog.store.entity_store import EntityStore
from datacatalog.store.sync import LiveSyncAdapter

logger = logging.getLogger(__name__)

__all__ = ["Catalog"]


class Catalog:
    """Entity store, live sync and mutation operations over one backend."""

    def __init__(
        self,
        backend: PersistenceBackend,
        store: EntityStore | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.backend = backend
        self.store = store or EntityStore(self.settings.category)
        self.sync = LiveSyncAdapter(backend, self.store)

        self.links = LinkService(backend, self.store)
        self.categories = CategoryService(backend, self.store)
        self.data_types = DataTypeService(backend, self.store, links=self.links, categories=self.categories)
        self.datasets = DatasetService(backend, self.store, links=self.links)
        self.transfer = TransferService(backend, self.store)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Catalog:
        settings = settings or get_settings()
        return cls(SQLBackend.from_settings(settings), settings=settings)

    async def open(self) -> None:
        """Start the backend and subscribe the store to every collection."""
        await self.backend.start()
        await self.sync.start()
        logger.info("Catalog opened")

    async def close(self) -> None:
        self.sync.stop()
        await self.backend.stop()
        self.store.clear()
        logger.info("Catalog closed")

    async def __aenter__(self) -> Catalog:
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Data types
    # -------------------------------------------------------------------------

    async def add_data_type(self, data: DataTypeCreate) -> DataTypeRead:
        return await self.data_types.add_data_type(data)

    async def update_data_type(self, data_type_id: str, data: DataTypeUpdate) -> DataTypeRead:
        return await self.data_types.update_data_type(data_type_id, data)

    async def delete_data_type(self, data_type_id: str) -> None:
        await self.data_types.delete_data_type(data_type_id)

    # -------------------------------------------------------------------------
    # Datasets
    # -------------------------------------------------------------------------

    async def add_dataset(self, data: DatasetCreate) -> DatasetRead:
        return await self.datasets.add_dataset(data)

    async def update_dataset(self, dataset_id: str, data: DatasetUpdate) -> DatasetRead:
        return await self.datasets.update_dataset(dataset_id, data)

    async def delete_dataset(self, dataset_id: str) -> None:
        await self.datasets.delete_dataset(dataset_id)

    # -------------------------------------------------------------------------
    # Links
    # -------------------------------------------------------------------------

    async def replace_links(self, item_id: str, new_linked_ids: Iterable[str], side: LinkSide | str) -> list[str]:
        return await self.links.replace_links(item_id, new_linked_ids, side)

    # -------------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------------

    async def add_category(self, data: CategoryCreate) -> CategoryRead:
        return await self.categories.add_category(data)

    async def update_category(self, category_id: str, data: CategoryUpdate) -> CategoryRead:
        return await self.categories.update_category(category_id, data)

    async def delete_category(self, category_id: str, cascade: bool = True) -> int:
        return await self.categories.delete_category(category_id, cascade=cascade)

    # -------------------------------------------------------------------------
    # Import / export
    # -------------------------------------------------------------------------

    async def export_json(self) -> str:
        return await self.transfer.export_json()

    async def export_csv(self) -> str:
        return await self.transfer.export_csv()

    async def import_data(self, payload: str | bytes | Mapping[str, Any] | CatalogDocument) -> ImportResult:
        return await self.transfer.import_data(payload)
