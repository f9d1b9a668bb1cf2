"""
Link service - maintains the data type / dataset join set.

Links are never added or removed one at a time: the caller always states the
complete set of ids an item should be linked to, and the service swaps the
old set for the new one in a single batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from datacatalog.persistence.base import (
    ENTITY_NAMES,
    BatchOp,
    CreateOp,
    DeleteWhereOp,
    PersistenceBackend,
)
from datacatalog.schemas.enums import Collection, LinkSide
from datacatalog.schemas.link import LinkRead
from datacatalog.services.base import BaseService
from datacatalog.services.exceptions import NotFoundError, ReferentialError
from datacatalog.store.entity_store import EntityStore

logger = logging.getLogger(__name__)


def unique_ids(ids: Iterable[str]) -> list[str]:
    """Drop repeated ids, keeping first-occurrence order."""
    return list(dict.fromkeys(ids))


class LinkService(BaseService[LinkRead]):
    """Service for replacing the link set of one data type or dataset."""

    def __init__(self, backend: PersistenceBackend, store: EntityStore):
        super().__init__(backend, store, Collection.LINKS, LinkRead, "Link")

    async def linked_ids(self, item_id: str, side: LinkSide | str) -> list[str]:
        """Ids currently linked to an item, read from the backend."""
        side = LinkSide(side)
        records = await self.backend.query_where(Collection.LINKS, side.own_field, item_id)
        return unique_ids(record[side.other_field] for record in records)

    async def validate_targets(self, linked_ids: Iterable[str], side: LinkSide | str) -> list[str]:
        """
        Check that every id exists on the opposite side of the relation.

        Returns the ids de-duplicated. Raises ReferentialError naming every
        missing id; nothing is written either way.
        """
        side = LinkSide(side)
        targets = unique_ids(linked_ids)
        if not targets:
            return targets
        existing = {
            record["id"] for record in await self.backend.list_records(side.other_collection)
        }
        missing = [target for target in targets if target not in existing]
        if missing:
            raise ReferentialError(ENTITY_NAMES[side.other_collection].lower(), missing)
        return targets

    def build_replace_ops(
        self,
        item_id: str,
        linked_ids: Iterable[str],
        side: LinkSide | str,
    ) -> list[BatchOp]:
        """
        Operations that make ``linked_ids`` the complete link set of ``item_id``.

        Targets must already be validated. The returned ops are meant to be
        committed in one batch, optionally together with other writes.
        """
        side = LinkSide(side)
        ops: list[BatchOp] = [DeleteWhereOp(Collection.LINKS, side.own_field, item_id)]
        for target in unique_ids(linked_ids):
            ops.append(
                CreateOp(
                    Collection.LINKS,
                    {side.own_field: item_id, side.other_field: target},
                )
            )
        return ops

    async def replace_links(
        self,
        item_id: str,
        new_linked_ids: Iterable[str],
        side: LinkSide | str,
    ) -> list[str]:
        """
        Set the complete link list of a data type or dataset.

        1. Validate the item and every target before writing anything
        2. Delete all existing links of the item and insert the new ones,
           as one atomic batch

        Returns the linked ids in the order they were given.
        """
        side = LinkSide(side)
        owners = await self.backend.query_where(side.own_collection, "id", item_id)
        if not owners:
            raise NotFoundError(ENTITY_NAMES[side.own_collection], item_id)

        targets = await self.validate_targets(new_linked_ids, side)
        await self.backend.batch(self.build_replace_ops(item_id, targets, side))
        logger.info(f"Replaced links of {side} '{item_id}' with {len(targets)} link(s)")
        return targets
