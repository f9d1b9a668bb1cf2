"""
Dataset service for create/update/delete with link maintenance.
"""

from __future__ import annotations

import logging

from datacatalog.models.base import utc_now
from datacatalog.persistence.base import DeleteOp, PersistenceBackend, UpdateOp
from datacatalog.schemas.dataset import DatasetCreate, DatasetRead, DatasetUpdate
from datacatalog.schemas.enums import Collection, LinkSide
from datacatalog.services.base import BaseService
from datacatalog.services.link_service import LinkService
from datacatalog.store.entity_store import EntityStore

logger = logging.getLogger(__name__)


class DatasetService(BaseService[DatasetRead]):
    """Service for Dataset CRUD operations."""

    def __init__(self, backend: PersistenceBackend, store: EntityStore, links: LinkService):
        super().__init__(backend, store, Collection.DATASETS, DatasetRead, "Dataset")
        self.links = links

    async def add_dataset(self, data: DatasetCreate) -> DatasetRead:
        """Create a dataset, then link it to the selected data types."""
        data_type_ids = await self.links.validate_targets(data.linked_data_type_ids, LinkSide.DATASET)

        record = data.model_dump(exclude={"linked_data_type_ids"})
        record["created_at"] = utc_now()
        dataset_id = await self.backend.create_record(Collection.DATASETS, record)

        if data_type_ids:
            await self.links.replace_links(dataset_id, data_type_ids, LinkSide.DATASET)

        logger.info(f"Added dataset '{data.name}' ({dataset_id}) with {len(data_type_ids)} data type(s)")
        return await self.require(dataset_id)

    async def update_dataset(self, dataset_id: str, data: DatasetUpdate) -> DatasetRead:
        """Update a dataset; field changes and link replacement commit together."""
        await self.require(dataset_id)

        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True, exclude={"linked_data_type_ids"}).items()
            if value is not None
        }

        ops = []
        if changes:
            ops.append(UpdateOp(Collection.DATASETS, dataset_id, changes))
        if data.linked_data_type_ids is not None:
            data_type_ids = await self.links.validate_targets(data.linked_data_type_ids, LinkSide.DATASET)
            ops.extend(self.links.build_replace_ops(dataset_id, data_type_ids, LinkSide.DATASET))

        await self.backend.batch(ops)
        logger.info(f"Updated dataset {dataset_id}")
        return await self.require(dataset_id)

    async def delete_dataset(self, dataset_id: str) -> None:
        """Delete a dataset and all of its links in one batch."""
        await self.require(dataset_id)
        ops = self.links.build_replace_ops(dataset_id, [], LinkSide.DATASET)
        ops.append(DeleteOp(Collection.DATASETS, dataset_id))
        await self.backend.batch(ops)
        logger.info(f"Deleted dataset {dataset_id}")
