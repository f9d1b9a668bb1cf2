"""
Transfer service - full-graph export and atomic replace-import.

Export formats:
- JSON: one document with the four collections as named arrays. Ids are
  kept verbatim, so the document can be imported again.
- CSV: four labeled sections for spreadsheets. Export only.

Import replaces *everything*. The payload is validated completely before
any write; the clear-and-insert then runs as a single transaction, so a
failure leaves the previous data in place.
"""

from __future__ import annotations

import asyncio
import csv
import io
import json
import logging
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from datacatalog.models.base import new_id
from datacatalog.persistence.base import BatchOp, ClearOp, CreateOp, PersistenceBackend
from datacatalog.schemas.category import CategoryRead
from datacatalog.schemas.data_type import DataTypeRead
from datacatalog.schemas.dataset import DatasetRead
from datacatalog.schemas.enums import Collection
from datacatalog.schemas.link import LinkRead
from datacatalog.schemas.transfer import CatalogDocument, ImportResult
from datacatalog.services.exceptions import OperationInProgressError, ValidationError
from datacatalog.store.entity_store import EntityStore

logger = logging.getLogger(__name__)

# Children are cleared before parents and inserted after them
_CLEAR_ORDER = (Collection.LINKS, Collection.DATA_TYPES, Collection.DATASETS, Collection.CATEGORIES)

_MAX_REPORTED_ERRORS = 5


def _csv_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _describe_errors(error: PydanticValidationError) -> str:
    """Summarize pydantic errors as 'dataTypes.0.name: Field required; ...'."""
    parts = []
    for detail in error.errors()[:_MAX_REPORTED_ERRORS]:
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    remaining = error.error_count() - len(parts)
    if remaining > 0:
        parts.append(f"and {remaining} more")
    return "; ".join(parts)


class TransferService:
    """Service for exporting and importing the whole catalog."""

    def __init__(self, backend: PersistenceBackend, store: EntityStore):
        self.backend = backend
        self.store = store
        self._import_lock = asyncio.Lock()

    @property
    def import_in_progress(self) -> bool:
        return self._import_lock.locked()

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    async def export_document(self) -> CatalogDocument:
        """Read all four collections from the backend, without the placeholder."""
        data_types = await self.backend.list_records(Collection.DATA_TYPES)
        datasets = await self.backend.list_records(Collection.DATASETS)
        categories = await self.backend.list_records(Collection.CATEGORIES)
        links = await self.backend.list_records(Collection.LINKS)

        return CatalogDocument(
            data_types=[DataTypeRead.model_validate(record) for record in data_types],
            datasets=[DatasetRead.model_validate(record) for record in datasets],
            categories=[
                CategoryRead.model_validate(record)
                for record in categories
                if not self.store.is_placeholder(record["name"])
            ],
            data_type_datasets=[LinkRead.model_validate(record) for record in links],
        )

    async def export_json(self) -> str:
        """Export the catalog as a re-importable JSON document."""
        document = await self.export_document()
        return document.model_dump_json(by_alias=True, indent=2)

    async def export_csv(self) -> str:
        """
        Export the catalog as four labeled CSV sections.

        Every value is quoted and embedded quotes are doubled. This format
        cannot be imported.
        """
        document = await self.export_document()
        names_by_data_type = {data_type.id: data_type.name for data_type in document.data_types}
        names_by_dataset = {dataset.id: dataset.name for dataset in document.datasets}

        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")

        def section(label: str, header: list[str], rows: list[list[Any]]) -> None:
            if buffer.tell():
                buffer.write("\n")
            buffer.write(f"{label}\n")
            writer.writerow(header)
            for row in rows:
                writer.writerow([_csv_value(value) for value in row])

        data_type_fields = list(DataTypeRead.model_fields)
        section(
            "Data Types",
            data_type_fields,
            [[getattr(item, field) for field in data_type_fields] for item in document.data_types],
        )
        dataset_fields = list(DatasetRead.model_fields)
        section(
            "Datasets",
            dataset_fields,
            [[getattr(item, field) for field in dataset_fields] for item in document.datasets],
        )
        section(
            "Categories",
            ["id", "name", "description"],
            [[item.id, item.name, item.description] for item in document.categories],
        )
        section(
            "Data Type Datasets",
            ["id", "data_type_id", "data_type_name", "dataset_id", "dataset_name"],
            [
                [
                    link.id,
                    link.data_type_id,
                    names_by_data_type.get(link.data_type_id, ""),
                    link.dataset_id,
                    names_by_dataset.get(link.dataset_id, ""),
                ]
                for link in document.data_type_datasets
            ],
        )
        return buffer.getvalue()

    # -------------------------------------------------------------------------
    # Import
    # -------------------------------------------------------------------------

    def parse_payload(self, payload: str | bytes | Mapping[str, Any] | CatalogDocument) -> CatalogDocument:
        """Validate an import payload without touching storage."""
        if isinstance(payload, CatalogDocument):
            return payload
        if isinstance(payload, (str, bytes, bytearray)):
            try:
                payload = json.loads(payload)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise ValidationError(f"Import file is not valid JSON: {e}") from e
        if not isinstance(payload, Mapping):
            raise ValidationError("Import payload must be a JSON object with four arrays")

        try:
            return CatalogDocument.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid import payload: {_describe_errors(e)}") from e

    def _categories_to_write(self, document: CatalogDocument) -> tuple[list[CategoryRead], list[DataTypeRead]]:
        """
        Drop the placeholder and add categories that imported data types
        reference but the payload does not define.

        Every data type's category is rewritten to the stored spelling of
        its category, so later exact-name matches (rename, delete) find it.
        """
        placeholder = self.store.category_settings.placeholder_name
        categories = [
            category for category in document.categories if not self.store.is_placeholder(category)
        ]
        # lowercased name -> stored spelling
        known = {category.name.lower(): category.name for category in categories}

        data_types = []
        for data_type in document.data_types:
            name = data_type.category.strip()
            if not name or self.store.is_placeholder(name):
                stored_name = placeholder
            elif name.lower() in known:
                stored_name = known[name.lower()]
            else:
                categories.append(CategoryRead(id=new_id(), name=name, description=""))
                known[name.lower()] = name
                stored_name = name
            if stored_name != data_type.category:
                data_type = data_type.model_copy(update={"category": stored_name})
            data_types.append(data_type)
        return categories, data_types

    async def import_data(self, payload: str | bytes | Mapping[str, Any] | CatalogDocument) -> ImportResult:
        """
        Replace the whole catalog with the payload.

        Callers must confirm with the user first: all current data is deleted.
        Raises ValidationError (nothing written) for a bad payload,
        OperationInProgressError when another import is running, and
        PersistenceError (nothing changed) when the transaction fails.
        """
        if self._import_lock.locked():
            raise OperationInProgressError("Import")

        async with self._import_lock:
            try:
                document = self.parse_payload(payload)
            except ValidationError as e:
                logger.warning(f"Rejected import: {e.message}")
                raise

            categories, data_types = self._categories_to_write(document)

            ops: list[BatchOp] = [ClearOp(collection) for collection in _CLEAR_ORDER]
            ops.extend(CreateOp(Collection.CATEGORIES, category.model_dump()) for category in categories)
            ops.extend(CreateOp(Collection.DATA_TYPES, data_type.model_dump()) for data_type in data_types)
            ops.extend(CreateOp(Collection.DATASETS, dataset.model_dump()) for dataset in document.datasets)
            ops.extend(CreateOp(Collection.LINKS, link.model_dump()) for link in document.data_type_datasets)

            await self.backend.batch(ops)

            result = ImportResult(
                data_types=len(data_types),
                datasets=len(document.datasets),
                categories=len(categories),
                links=len(document.data_type_datasets),
            )
            logger.info(
                f"Imported {result.data_types} data types, {result.datasets} datasets, "
                f"{result.categories} categories and {result.links} links"
            )
            return result
