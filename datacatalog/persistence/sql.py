"""
SQL persistence backend on SQLAlchemy's asyncio engine.

Every write runs in one transaction: a batch either commits completely or
rolls back completely. After a commit, each touched collection is re-read
and pushed to its subscribers as a whole snapshot.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from datacatalog.core.config import Settings
from datacatalog.database import create_engine, create_session_factory, init_db
from datacatalog.models.base import BaseTableModel
from datacatalog.models.category import Category
from datacatalog.models.data_type import DataType
from datacatalog.models.data_type_dataset import DataTypeDataset
from datacatalog.models.dataset import Dataset
from datacatalog.persistence.base import (
    ENTITY_NAMES,
    BatchOp,
    ClearOp,
    CreateOp,
    DeleteOp,
    DeleteWhereOp,
    ErrorCallback,
    PersistenceBackend,
    Record,
    SnapshotCallback,
    Subscription,
    UpdateOp,
    UpdateWhereOp,
)
from datacatalog.schemas.enums import Collection
from datacatalog.services.exceptions import NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)

__all__ = ["COLLECTION_MODELS", "SQLBackend"]

COLLECTION_MODELS: dict[Collection, type[BaseTableModel]] = {
    Collection.DATA_TYPES: DataType,
    Collection.DATASETS: Dataset,
    Collection.CATEGORIES: Category,
    Collection.LINKS: DataTypeDataset,
}

# Fields that storage owns; callers may never write them through an update
_PROTECTED_FIELDS = frozenset({"pk", "id"})


class SQLBackend(PersistenceBackend):
    """
    PersistenceBackend over an async SQLAlchemy session factory.

    Usage:
        backend = SQLBackend.from_settings(get_settings())
        await backend.start()
        record_id = await backend.create_record(Collection.CATEGORIES, {"name": "Transport"})
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        engine: AsyncEngine | None = None,
        create_tables: bool = False,
    ):
        self.session_factory = session_factory
        self.engine = engine
        self.create_tables = create_tables
        self._subscriptions: dict[Collection, list[Subscription]] = {c: [] for c in Collection}
        # Snapshot reads are numbered so that a slow, older read never
        # overwrites a newer one that was delivered first
        self._read_counter = itertools.count(1)
        self._delivered: dict[Collection, int] = {c: 0 for c in Collection}

    @classmethod
    def from_settings(cls, settings: Settings) -> SQLBackend:
        engine = create_engine(settings)
        return cls(
            create_session_factory(engine),
            engine=engine,
            create_tables=settings.create_tables,
        )

    async def start(self) -> None:
        if self.create_tables and self.engine is not None:
            await init_db(self.engine)

    async def stop(self) -> None:
        for subscriptions in self._subscriptions.values():
            for subscription in list(subscriptions):
                subscription.unsubscribe()
        if self.engine is not None:
            await self.engine.dispose()

    # -------------------------------------------------------------------------
    # Single-record primitives
    # -------------------------------------------------------------------------

    async def create_record(self, collection: Collection, data: Record) -> str:
        results = await self._commit([CreateOp(collection, data)])
        return results[0]

    async def update_record(self, collection: Collection, record_id: str, changes: Record) -> None:
        await self._commit([UpdateOp(collection, record_id, changes)])

    async def delete_record(self, collection: Collection, record_id: str) -> None:
        await self._commit([DeleteOp(collection, record_id)])

    async def batch(self, ops: Sequence[BatchOp]) -> None:
        if not ops:
            return
        await self._commit(ops)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def query_where(self, collection: Collection, field: str, value: Any) -> list[Record]:
        model = COLLECTION_MODELS[collection]
        column = self._column(model, field)
        stmt = select(model).where(column == value).order_by(model.pk)
        return await self._fetch(stmt)

    async def list_records(self, collection: Collection) -> list[Record]:
        model = COLLECTION_MODELS[collection]
        stmt = select(model).order_by(model.pk)
        return await self._fetch(stmt)

    async def _fetch(self, stmt) -> list[Record]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return [self._to_record(obj) for obj in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Read failed: {e}")
            raise PersistenceError(f"Could not read from storage: {e.__class__.__name__}") from e

    # -------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------

    async def subscribe(
        self,
        collection: Collection,
        on_change: SnapshotCallback,
        on_error: ErrorCallback | None = None,
    ) -> Subscription:
        subscription = Subscription(
            collection=collection,
            on_change=on_change,
            on_error=on_error,
            _cancel=self._remove_subscription,
        )
        self._subscriptions[collection].append(subscription)
        try:
            records = await self.list_records(collection)
        except PersistenceError as e:
            subscription.fail(e)
        else:
            subscription.deliver(records)
        return subscription

    def _remove_subscription(self, subscription: Subscription) -> None:
        subscriptions = self._subscriptions[subscription.collection]
        if subscription in subscriptions:
            subscriptions.remove(subscription)

    async def _publish(self, collections: set[Collection]) -> None:
        """Push a fresh snapshot of each touched collection to its subscribers."""
        for collection in Collection:
            if collection not in collections or not self._subscriptions[collection]:
                continue
            read_number = next(self._read_counter)
            try:
                records = await self.list_records(collection)
            except PersistenceError as e:
                for subscription in list(self._subscriptions[collection]):
                    subscription.fail(e)
                continue
            if read_number < self._delivered[collection]:
                logger.debug(f"Skipping stale {collection} snapshot")
                continue
            self._delivered[collection] = read_number
            for subscription in list(self._subscriptions[collection]):
                subscription.deliver(list(records))

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    async def _commit(self, ops: Sequence[BatchOp]) -> list[str | None]:
        """Apply ops in one transaction, then publish snapshots."""
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    results = [await self._apply(session, op) for op in ops]
        except SQLAlchemyError as e:
            logger.error(f"Transaction of {len(ops)} operation(s) rolled back: {e}")
            raise PersistenceError(
                f"Storage rejected the write and nothing was changed ({e.__class__.__name__})"
            ) from e

        await self._publish({op.collection for op in ops})
        return results

    async def _apply(self, session: AsyncSession, op: BatchOp) -> str | None:
        model = COLLECTION_MODELS[op.collection]

        if isinstance(op, CreateOp):
            data = {key: value for key, value in op.data.items() if key != "pk"}
            if data.get("id") is None:
                data.pop("id", None)
            obj = model(**data)
            session.add(obj)
            await session.flush()
            return obj.id

        if isinstance(op, UpdateOp):
            changes = self._checked_changes(model, op.changes)
            result = await session.execute(
                update(model).where(model.id == op.record_id).values(**changes)
            )
            if result.rowcount == 0:
                raise NotFoundError(ENTITY_NAMES[op.collection], op.record_id)
            return op.record_id

        if isinstance(op, DeleteOp):
            result = await session.execute(delete(model).where(model.id == op.record_id))
            if result.rowcount == 0:
                raise NotFoundError(ENTITY_NAMES[op.collection], op.record_id)
            return op.record_id

        if isinstance(op, DeleteWhereOp):
            column = self._column(model, op.field)
            await session.execute(delete(model).where(column == op.value))
            return None

        if isinstance(op, UpdateWhereOp):
            column = self._column(model, op.field)
            changes = self._checked_changes(model, op.changes)
            await session.execute(update(model).where(column == op.value).values(**changes))
            return None

        if isinstance(op, ClearOp):
            await session.execute(delete(model))
            return None

        raise TypeError(f"Unsupported batch operation: {op!r}")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _column(model: type[BaseTableModel], field: str):
        if field == "pk" or field not in model.model_fields:
            raise ValidationError(f"Unknown field '{field}' for {model.__tablename__}", field=field)
        return getattr(model, field)

    @staticmethod
    def _checked_changes(model: type[BaseTableModel], changes: Record) -> Record:
        protected = _PROTECTED_FIELDS.intersection(changes)
        if protected:
            raise ValidationError(
                f"Field '{sorted(protected)[0]}' cannot be changed",
                field=sorted(protected)[0],
            )
        unknown = [key for key in changes if key not in model.model_fields]
        if unknown:
            raise ValidationError(f"Unknown field '{unknown[0]}' for {model.__tablename__}", field=unknown[0])
        return changes

    @staticmethod
    def _to_record(obj: BaseTableModel) -> Record:
        return obj.model_dump(exclude={"pk"})
