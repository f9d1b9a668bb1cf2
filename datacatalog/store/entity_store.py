"""
In-memory entity store.

Holds the latest snapshot of each collection and answers every read query
synchronously. Snapshots are swapped in whole by the live sync adapter;
nothing else mutates the store.

Design notes:
- links are indexed both ways (id -> set of linked ids), rebuilt on every
  link snapshot, so join and count queries never scan nested loops
- join results follow the order of the target collection, not the order
  of the links
- the "Uncategorized" placeholder is appended to the category view when no
  stored category carries that name
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable
from typing import Any

from datacatalog.core.config import CategorySettings, get_settings
from datacatalog.schemas.category import CategoryRead
from datacatalog.schemas.data_type import DataTypeRead
from datacatalog.schemas.dataset import DatasetRead
from datacatalog.schemas.enums import Collection, CompletionStatus, Priority
from datacatalog.schemas.link import LinkRead
from datacatalog.schemas.report import DashboardStats, ProgressSummary

logger = logging.getLogger(__name__)

__all__ = ["EntityStore", "ChangeListener"]

ChangeListener = Callable[[Collection], None]

_SCHEMAS: dict[Collection, type] = {
    Collection.DATA_TYPES: DataTypeRead,
    Collection.DATASETS: DatasetRead,
    Collection.CATEGORIES: CategoryRead,
    Collection.LINKS: LinkRead,
}


class EntityStore:
    """Read model of the catalog: four collections plus derived queries."""

    def __init__(self, category_settings: CategorySettings | None = None):
        self.category_settings = category_settings or get_settings().category

        self._data_types: list[DataTypeRead] = []
        self._datasets: list[DatasetRead] = []
        self._categories: list[CategoryRead] = []
        self._links: list[LinkRead] = []

        self._data_types_by_id: dict[str, DataTypeRead] = {}
        self._datasets_by_id: dict[str, DatasetRead] = {}
        self._dataset_ids_by_data_type: dict[str, set[str]] = {}
        self._data_type_ids_by_dataset: dict[str, set[str]] = {}

        self._loaded: set[Collection] = set()
        self._listeners: list[ChangeListener] = []

    # -------------------------------------------------------------------------
    # Snapshot replacement
    # -------------------------------------------------------------------------

    def replace_collection(self, collection: Collection, records: Iterable[Any]) -> None:
        """
        Replace one collection with a full snapshot.

        Records may be dicts or objects with matching attributes. The previous
        contents are discarded; nothing is merged.
        """
        schema = _SCHEMAS[collection]
        items = [
            record if isinstance(record, schema) else schema.model_validate(record)
            for record in records
        ]

        if collection is Collection.DATA_TYPES:
            self._data_types = items
            self._data_types_by_id = {item.id: item for item in items}
        elif collection is Collection.DATASETS:
            self._datasets = items
            self._datasets_by_id = {item.id: item for item in items}
        elif collection is Collection.CATEGORIES:
            self._categories = items
        else:
            self._links = items
            self._rebuild_link_index()

        self._loaded.add(collection)
        logger.debug(f"Replaced {collection} snapshot ({len(items)} records)")
        for listener in list(self._listeners):
            listener(collection)

    def _rebuild_link_index(self) -> None:
        by_data_type: dict[str, set[str]] = {}
        by_dataset: dict[str, set[str]] = {}
        for link in self._links:
            by_data_type.setdefault(link.data_type_id, set()).add(link.dataset_id)
            by_dataset.setdefault(link.dataset_id, set()).add(link.data_type_id)
        self._dataset_ids_by_data_type = by_data_type
        self._data_type_ids_by_dataset = by_dataset

    def add_listener(self, listener: ChangeListener) -> Callable[[], None]:
        """Call ``listener(collection)`` after every snapshot; returns a remover."""
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def clear(self) -> None:
        """Forget all state (used when the catalog closes)."""
        for collection in Collection:
            self.replace_collection(collection, [])
        self._loaded.clear()

    def is_collection_loaded(self, collection: Collection) -> bool:
        return collection in self._loaded

    @property
    def is_loaded(self) -> bool:
        """True once every collection has received at least one snapshot."""
        return len(self._loaded) == len(Collection)

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    @property
    def data_types(self) -> list[DataTypeRead]:
        return list(self._data_types)

    @property
    def datasets(self) -> list[DatasetRead]:
        return list(self._datasets)

    @property
    def links(self) -> list[LinkRead]:
        return list(self._links)

    @property
    def stored_categories(self) -> list[CategoryRead]:
        """Categories exactly as persisted, without the placeholder."""
        return list(self._categories)

    @property
    def placeholder_category(self) -> CategoryRead:
        return CategoryRead(
            id=self.category_settings.placeholder_id,
            name=self.category_settings.placeholder_name,
            description=self.category_settings.placeholder_description,
        )

    @property
    def categories(self) -> list[CategoryRead]:
        """Categories as consumers see them: always includes the placeholder."""
        categories = list(self._categories)
        placeholder = self.category_settings.placeholder_name
        if not any(category.name == placeholder for category in categories):
            categories.append(self.placeholder_category)
        return categories

    def is_placeholder(self, category: CategoryRead | str) -> bool:
        """Check whether a category (or category name) is the placeholder."""
        name = category.name if isinstance(category, CategoryRead) else category
        return name.strip().lower() == self.category_settings.placeholder_name.lower()

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_data_type_by_id(self, data_type_id: str) -> DataTypeRead | None:
        return self._data_types_by_id.get(data_type_id)

    def get_dataset_by_id(self, dataset_id: str) -> DatasetRead | None:
        return self._datasets_by_id.get(dataset_id)

    def get_category_by_id(self, category_id: str) -> CategoryRead | None:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def get_category_by_name(self, name: str) -> CategoryRead | None:
        """Case-insensitive category lookup, placeholder included."""
        lowered = name.strip().lower()
        for category in self.categories:
            if category.name.lower() == lowered:
                return category
        return None

    # -------------------------------------------------------------------------
    # Joins
    # -------------------------------------------------------------------------

    def get_linked_dataset_ids(self, data_type_id: str) -> set[str]:
        return set(self._dataset_ids_by_data_type.get(data_type_id, ()))

    def get_linked_data_type_ids(self, dataset_id: str) -> set[str]:
        return set(self._data_type_ids_by_dataset.get(dataset_id, ()))

    def get_datasets_for_data_type(self, data_type_id: str) -> list[DatasetRead]:
        """Datasets linked to a data type, in dataset collection order."""
        dataset_ids = self._dataset_ids_by_data_type.get(data_type_id)
        if not dataset_ids:
            return []
        return [dataset for dataset in self._datasets if dataset.id in dataset_ids]

    def get_data_types_for_dataset(self, dataset_id: str) -> list[DataTypeRead]:
        """Data types linked to a dataset, in data type collection order."""
        data_type_ids = self._data_type_ids_by_dataset.get(dataset_id)
        if not data_type_ids:
            return []
        return [data_type for data_type in self._data_types if data_type.id in data_type_ids]

    def get_link_count(self, dataset_id: str) -> int:
        """Number of data types linked to a dataset."""
        return len(self._data_type_ids_by_dataset.get(dataset_id, ()))

    get_data_type_count_for_dataset = get_link_count

    def get_dataset_count_for_data_type(self, data_type_id: str) -> int:
        return len(self._dataset_ids_by_data_type.get(data_type_id, ()))

    def get_data_types_in_category(self, category_name: str) -> list[DataTypeRead]:
        return [data_type for data_type in self._data_types if data_type.category == category_name]

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    def progress_summary(self) -> ProgressSummary:
        total = len(self._data_types)
        linked = sum(1 for data_type in self._data_types if self.get_datasets_for_data_type(data_type.id))
        statuses = Counter(data_type.completion_status for data_type in self._data_types)
        priorities = Counter(data_type.priority for data_type in self._data_types)
        return ProgressSummary(
            total_data_types=total,
            linked_data_types=linked,
            # Half rounds up
            percent_linked=(linked * 200 + total) // (2 * total) if total else 0,
            by_completion_status={status.value: statuses.get(status, 0) for status in CompletionStatus},
            by_priority={priority.value: priorities.get(priority, 0) for priority in Priority},
        )

    def dashboard_stats(self, recent: int = 5) -> DashboardStats:
        newest_first = sorted(self._data_types, key=lambda data_type: data_type.created_at, reverse=True)
        return DashboardStats(
            data_types=len(self._data_types),
            datasets=len(self._datasets),
            categories=len(self.categories),
            recent_data_types=newest_first[:recent],
        )
