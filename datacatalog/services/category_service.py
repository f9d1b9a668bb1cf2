"""
Category service - category CRUD with cascading rules.

Data types reference categories by name, so:
- renaming a category rewrites every data type in it, in the same batch
- deleting a category moves its data types to "Uncategorized", in the same batch
- the "Uncategorized" placeholder can never be created, renamed or deleted
"""

from __future__ import annotations

import logging

from datacatalog.persistence.base import (
    DeleteOp,
    PersistenceBackend,
    UpdateOp,
    UpdateWhereOp,
)
from datacatalog.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from datacatalog.schemas.enums import Collection
from datacatalog.services.base import BaseService
from datacatalog.services.exceptions import ConflictError, ValidationError
from datacatalog.store.entity_store import EntityStore

logger = logging.getLogger(__name__)


class CategoryService(BaseService[CategoryRead]):
    """Service for Category CRUD operations."""

    def __init__(self, backend: PersistenceBackend, store: EntityStore):
        super().__init__(backend, store, Collection.CATEGORIES, CategoryRead, "Category")

    @property
    def placeholder_name(self) -> str:
        return self.store.category_settings.placeholder_name

    def _is_placeholder_name(self, name: str) -> bool:
        return self.store.is_placeholder(name)

    async def _stored(self) -> list[CategoryRead]:
        return [
            CategoryRead.model_validate(record)
            for record in await self.backend.list_records(Collection.CATEGORIES)
        ]

    async def _find_by_name(self, name: str) -> CategoryRead | None:
        """Case-insensitive lookup among stored categories."""
        lowered = name.strip().lower()
        for category in await self._stored():
            if category.name.lower() == lowered:
                return category
        return None

    async def resolve_category_name(self, name: str | None) -> str:
        """
        Map a requested category name to the stored spelling.

        Empty names and the placeholder map to "Uncategorized". Raises
        ValidationError when no such category exists.
        """
        name = (name or "").strip()
        if not name or self._is_placeholder_name(name):
            return self.placeholder_name

        category = await self._find_by_name(name)
        if category is None:
            raise ValidationError(f"Category '{name}' does not exist", field="category")
        return category.name

    async def add_category(self, data: CategoryCreate) -> CategoryRead:
        """Create a category with a unique (case-insensitive) name."""
        name = data.name.strip()
        if not name:
            raise ValidationError("Category name is required", field="name")
        if self._is_placeholder_name(name):
            raise ValidationError(f"'{self.placeholder_name}' is reserved", field="name")
        if await self._find_by_name(name) is not None:
            raise ConflictError("Category", "name", name)

        category_id = await self.backend.create_record(
            Collection.CATEGORIES,
            {"name": name, "description": data.description},
        )
        logger.info(f"Added category '{name}' ({category_id})")
        return await self.require(category_id)

    async def update_category(self, category_id: str, data: CategoryUpdate) -> CategoryRead:
        """
        Update a category. A rename is applied to every data type in the
        category within the same batch.
        """
        if category_id == self.store.category_settings.placeholder_id:
            raise ValidationError(f"'{self.placeholder_name}' cannot be edited")
        current = await self.require(category_id)
        if self._is_placeholder_name(current.name):
            raise ValidationError(f"'{self.placeholder_name}' cannot be edited")

        changes: dict[str, str] = {}
        if data.description is not None:
            changes["description"] = data.description

        new_name = data.name.strip() if data.name is not None else None
        renamed = bool(new_name) and new_name != current.name
        if data.name is not None and not new_name:
            raise ValidationError("Category name is required", field="name")
        if renamed:
            if self._is_placeholder_name(new_name):
                raise ValidationError(f"'{self.placeholder_name}' is reserved", field="name")
            clash = await self._find_by_name(new_name)
            if clash is not None and clash.id != category_id:
                raise ConflictError("Category", "name", new_name)
            changes["name"] = new_name

        if not changes:
            return current

        ops = [UpdateOp(Collection.CATEGORIES, category_id, changes)]
        if renamed:
            ops.append(
                UpdateWhereOp(
                    Collection.DATA_TYPES,
                    "category",
                    current.name,
                    {"category": new_name},
                )
            )
        await self.backend.batch(ops)
        if renamed:
            logger.info(f"Renamed category '{current.name}' to '{new_name}'")
        return await self.require(category_id)

    async def delete_category(self, category_id: str, cascade: bool = True) -> int:
        """
        Delete a category.

        With ``cascade`` (the default) its data types are moved to
        "Uncategorized" in the same batch. Without it, a category that is
        still in use is rejected. Returns the number of data types moved.
        """
        if category_id == self.store.category_settings.placeholder_id:
            raise ValidationError(f"'{self.placeholder_name}' cannot be deleted")
        current = await self.require(category_id)
        if self._is_placeholder_name(current.name):
            raise ValidationError(f"'{self.placeholder_name}' cannot be deleted")

        members = await self.backend.query_where(Collection.DATA_TYPES, "category", current.name)
        if members and not cascade:
            raise ConflictError(
                "Category",
                "name",
                current.name,
                message=f"Category '{current.name}' is still used by {len(members)} data type(s)",
            )

        await self.backend.batch(
            [
                UpdateWhereOp(
                    Collection.DATA_TYPES,
                    "category",
                    current.name,
                    {"category": self.placeholder_name},
                ),
                DeleteOp(Collection.CATEGORIES, category_id),
            ]
        )
        logger.info(
            f"Deleted category '{current.name}', moved {len(members)} data type(s) "
            f"to '{self.placeholder_name}'"
        )
        return len(members)
