"""
DataType service for create/update/delete with link maintenance.
"""

from __future__ import annotations

import logging

from datacatalog.models.base import utc_now
from datacatalog.persistence.base import DeleteOp, PersistenceBackend, UpdateOp
from datacatalog.schemas.data_type import DataTypeCreate, DataTypeRead, DataTypeUpdate
from datacatalog.schemas.enums import Collection, LinkSide
from datacatalog.services.base import BaseService
from datacatalog.services.category_service import CategoryService
from datacatalog.services.link_service import LinkService
from datacatalog.store.entity_store import EntityStore

logger = logging.getLogger(__name__)


class DataTypeService(BaseService[DataTypeRead]):
    """Service for DataType CRUD operations."""

    def __init__(
        self,
        backend: PersistenceBackend,
        store: EntityStore,
        links: LinkService,
        categories: CategoryService,
    ):
        super().__init__(backend, store, Collection.DATA_TYPES, DataTypeRead, "Data type")
        self.links = links
        self.categories = categories

    async def add_data_type(self, data: DataTypeCreate) -> DataTypeRead:
        """
        Create a data type, then link it to the selected datasets.

        The category and every selected dataset are validated first, so a
        rejected request writes nothing. Links are only written once the data
        type has been confirmed created.
        """
        category = await self.categories.resolve_category_name(data.category)
        dataset_ids = await self.links.validate_targets(data.linked_dataset_ids, LinkSide.DATA_TYPE)

        record = data.model_dump(exclude={"linked_dataset_ids"})
        record["category"] = category
        record["created_at"] = utc_now()
        data_type_id = await self.backend.create_record(Collection.DATA_TYPES, record)

        if dataset_ids:
            await self.links.replace_links(data_type_id, dataset_ids, LinkSide.DATA_TYPE)

        logger.info(f"Added data type '{data.name}' ({data_type_id}) with {len(dataset_ids)} dataset(s)")
        return await self.require(data_type_id)

    async def update_data_type(self, data_type_id: str, data: DataTypeUpdate) -> DataTypeRead:
        """
        Update a data type and, when a selection is given, replace its links.

        Field changes and link replacement commit in one batch.
        """
        await self.require(data_type_id)

        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True, exclude={"linked_dataset_ids"}).items()
            if value is not None
        }
        if "category" in changes:
            changes["category"] = await self.categories.resolve_category_name(changes["category"])

        ops = []
        if changes:
            ops.append(UpdateOp(Collection.DATA_TYPES, data_type_id, changes))
        if data.linked_dataset_ids is not None:
            dataset_ids = await self.links.validate_targets(data.linked_dataset_ids, LinkSide.DATA_TYPE)
            ops.extend(self.links.build_replace_ops(data_type_id, dataset_ids, LinkSide.DATA_TYPE))

        await self.backend.batch(ops)
        logger.info(f"Updated data type {data_type_id}")
        return await self.require(data_type_id)

    async def delete_data_type(self, data_type_id: str) -> None:
        """Delete a data type and all of its links in one batch."""
        await self.require(data_type_id)
        ops = self.links.build_replace_ops(data_type_id, [], LinkSide.DATA_TYPE)
        ops.append(DeleteOp(Collection.DATA_TYPES, data_type_id))
        await self.backend.batch(ops)
        logger.info(f"Deleted data type {data_type_id}")
