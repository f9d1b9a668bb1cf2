"""
Live sync adapter - keeps the entity store in step with the backend.

Each collection is subscribed independently. Every delivered snapshot is
authoritative and replaces the store's copy of that collection; no ordering
between collections is assumed.
"""

from __future__ import annotations

import logging

from datacatalog.persistence.base import PersistenceBackend, Record, Subscription
from datacatalog.schemas.enums import Collection
from datacatalog.store.entity_store import EntityStore

logger = logging.getLogger(__name__)

__all__ = ["LiveSyncAdapter"]


class LiveSyncAdapter:
    """Feeds backend snapshots into an EntityStore."""

    def __init__(self, backend: PersistenceBackend, store: EntityStore):
        self.backend = backend
        self.store = store
        self.last_error: str | None = None
        self._subscriptions: dict[Collection, Subscription] = {}

    @property
    def is_running(self) -> bool:
        return bool(self._subscriptions)

    async def start(self) -> None:
        """Subscribe to every collection. Safe to call when already running."""
        for collection in Collection:
            if collection in self._subscriptions:
                continue
            self._subscriptions[collection] = await self.backend.subscribe(
                collection,
                on_change=self._snapshot_handler(collection),
                on_error=self._error_handler(collection),
            )
        logger.info("Live sync started")

    def stop(self) -> None:
        """Cancel every subscription."""
        for subscription in self._subscriptions.values():
            subscription.unsubscribe()
        self._subscriptions.clear()
        logger.info("Live sync stopped")

    def _snapshot_handler(self, collection: Collection):
        def on_change(records: list[Record]) -> None:
            self.store.replace_collection(collection, records)

        return on_change

    def _error_handler(self, collection: Collection):
        def on_error(exc: Exception) -> None:
            self.last_error = f"Failed to load {collection}."
            logger.error(f"Live sync error for {collection}: {exc}")

        return on_error
