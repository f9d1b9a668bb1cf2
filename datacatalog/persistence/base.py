"""
Persistence backend interface.

The catalog core never talks to a database directly; it needs a small set of
primitives:

- create/update/delete a single record
- query records by one field
- commit a list of write operations all-or-nothing
- subscribe to whole-collection snapshots

Records cross this boundary as plain dicts keyed by field name, with the
public ``id`` included and storage internals excluded.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from datacatalog.schemas.enums import Collection

logger = logging.getLogger(__name__)

__all__ = [
    "ENTITY_NAMES",
    "Record",
    "SnapshotCallback",
    "ErrorCallback",
    "CreateOp",
    "UpdateOp",
    "DeleteOp",
    "DeleteWhereOp",
    "UpdateWhereOp",
    "ClearOp",
    "BatchOp",
    "Subscription",
    "PersistenceBackend",
]

ENTITY_NAMES: dict[Collection, str] = {
    Collection.DATA_TYPES: "Data type",
    Collection.DATASETS: "Dataset",
    Collection.CATEGORIES: "Category",
    Collection.LINKS: "Link",
}

Record = dict[str, Any]
SnapshotCallback = Callable[[list[Record]], None]
ErrorCallback = Callable[[Exception], None]


# =============================================================================
# Batch operations
# =============================================================================


@dataclass(frozen=True)
class CreateOp:
    """Insert one record. ``data`` may carry an ``id`` to preserve it."""

    collection: Collection
    data: Record


@dataclass(frozen=True)
class UpdateOp:
    """Patch one record by id."""

    collection: Collection
    record_id: str
    changes: Record


@dataclass(frozen=True)
class DeleteOp:
    """Delete one record by id."""

    collection: Collection
    record_id: str


@dataclass(frozen=True)
class DeleteWhereOp:
    """Delete every record whose ``field`` equals ``value``."""

    collection: Collection
    field: str
    value: Any


@dataclass(frozen=True)
class UpdateWhereOp:
    """Patch every record whose ``field`` equals ``value``."""

    collection: Collection
    field: str
    value: Any
    changes: Record


@dataclass(frozen=True)
class ClearOp:
    """Delete every record of a collection."""

    collection: Collection


BatchOp = CreateOp | UpdateOp | DeleteOp | DeleteWhereOp | UpdateWhereOp | ClearOp


# =============================================================================
# Subscriptions
# =============================================================================


@dataclass(eq=False)
class Subscription:
    """
    Handle for one collection subscription.

    Call ``unsubscribe()`` to stop receiving snapshots; calling it again
    is a no-op.
    """

    collection: Collection
    on_change: SnapshotCallback
    on_error: ErrorCallback | None = None
    _cancel: Callable[[Subscription], None] | None = field(default=None, repr=False)
    active: bool = True

    def deliver(self, records: list[Record]) -> None:
        """Hand a snapshot to the subscriber, routing callback failures to on_error."""
        if not self.active:
            return
        try:
            self.on_change(records)
        except Exception as exc:
            logger.exception(f"Snapshot callback for {self.collection} failed")
            self.fail(exc)

    def fail(self, exc: Exception) -> None:
        """Report a subscription error to the subscriber."""
        if self.active and self.on_error is not None:
            self.on_error(exc)

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        if self._cancel is not None:
            self._cancel(self)


# =============================================================================
# Backend
# =============================================================================


class PersistenceBackend(ABC):
    """
    Abstract base class for catalog storage.

    Implementations must publish a fresh snapshot of every collection touched
    by a write to that collection's subscribers once the write commits.
    """

    @abstractmethod
    async def create_record(self, collection: Collection, data: Record) -> str:
        """Insert a record and return its id."""
        ...

    @abstractmethod
    async def update_record(self, collection: Collection, record_id: str, changes: Record) -> None:
        """Patch a record. Raises NotFoundError if it does not exist."""
        ...

    @abstractmethod
    async def delete_record(self, collection: Collection, record_id: str) -> None:
        """Delete a record. Raises NotFoundError if it does not exist."""
        ...

    @abstractmethod
    async def query_where(self, collection: Collection, field: str, value: Any) -> list[Record]:
        """Return every record whose ``field`` equals ``value``, in insertion order."""
        ...

    @abstractmethod
    async def list_records(self, collection: Collection) -> list[Record]:
        """Return the whole collection in insertion order."""
        ...

    @abstractmethod
    async def batch(self, ops: Sequence[BatchOp]) -> None:
        """Apply ``ops`` in order, all-or-nothing."""
        ...

    @abstractmethod
    async def subscribe(
        self,
        collection: Collection,
        on_change: SnapshotCallback,
        on_error: ErrorCallback | None = None,
    ) -> Subscription:
        """Deliver the current snapshot now and after every committed change."""
        ...

    async def start(self) -> None:
        """Initialize the backend (called when the catalog opens)."""
        pass

    async def stop(self) -> None:
        """Release resources (called when the catalog closes)."""
        pass
