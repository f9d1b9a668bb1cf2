"""
Persistence backends.

Re-exports the backend interface and batch operations:
    from datacatalog.persistence import SQLBackend, CreateOp, DeleteWhereOp
"""

from datacatalog.persistence.base import (
    BatchOp,
    ClearOp,
    CreateOp,
    DeleteOp,
    DeleteWhereOp,
    PersistenceBackend,
    Record,
    Subscription,
    UpdateOp,
    UpdateWhereOp,
)
from datacatalog.persistence.sql import SQLBackend

__all__ = [
    "BatchOp",
    "ClearOp",
    "CreateOp",
    "DeleteOp",
    "DeleteWhereOp",
    "PersistenceBackend",
    "Record",
    "SQLBackend",
    "Subscription",
    "UpdateOp",
    "UpdateWhereOp",
]
