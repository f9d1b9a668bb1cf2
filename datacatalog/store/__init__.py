"""
In-memory read model and its live sync adapter.
"""

from datacatalog.store.entity_store import EntityStore
from datacatalog.store.sync import LiveSyncAdapter

__all__ = [
    "EntityStore",
    "LiveSyncAdapter",
]
