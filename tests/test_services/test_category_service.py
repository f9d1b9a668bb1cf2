"""Tests for category CRUD and cascades."""

import pytest

from datacatalog.catalog import Catalog
from datacatalog.schemas.category import CategoryCreate, CategoryUpdate
from datacatalog.services.exceptions import ConflictError, NotFoundError, ValidationError


def category_id(catalog: Catalog, name: str) -> str:
    return catalog.store.get_category_by_name(name).id


def categories_of(catalog: Catalog) -> dict[str, str]:
    return {data_type.name: data_type.category for data_type in catalog.store.data_types}


class TestAddCategory:
    """Tests for creating categories."""

    @pytest.mark.asyncio
    async def test_add(self, catalog: Catalog):
        category = await catalog.add_category(CategoryCreate(name="  Water ", description="Rivers"))
        assert category.name == "Water"
        assert category.description == "Rivers"
        assert [c.name for c in catalog.store.categories] == ["Water", "Uncategorized"]

    @pytest.mark.asyncio
    async def test_duplicate_name_ignores_case(self, catalog: Catalog):
        await catalog.add_category(CategoryCreate(name="Water"))
        with pytest.raises(ConflictError):
            await catalog.add_category(CategoryCreate(name="WATER"))
        assert len(catalog.store.stored_categories) == 1

    @pytest.mark.asyncio
    async def test_placeholder_reserved(self, catalog: Catalog):
        with pytest.raises(ValidationError):
            await catalog.add_category(CategoryCreate(name="uncategorized"))

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, catalog: Catalog):
        with pytest.raises(ValidationError):
            await catalog.add_category(CategoryCreate(name="   "))


class TestUpdateCategory:
    """Tests for renames and description edits."""

    @pytest.mark.asyncio
    async def test_rename_cascades_to_data_types(self, seeded_catalog: Catalog):
        """Test every data type in the category follows the rename."""
        transport = category_id(seeded_catalog, "Transport")

        updated = await seeded_catalog.update_category(transport, CategoryUpdate(name="Mobility"))

        assert updated.name == "Mobility"
        assert categories_of(seeded_catalog) == {
            "Roads": "Mobility",
            "Bus Stops": "Mobility",
            "Land Use": "Environment",
        }

    @pytest.mark.asyncio
    async def test_description_only(self, seeded_catalog: Catalog):
        transport = category_id(seeded_catalog, "Transport")
        updated = await seeded_catalog.update_category(transport, CategoryUpdate(description="Streets"))
        assert updated.name == "Transport"
        assert updated.description == "Streets"
        assert categories_of(seeded_catalog)["Roads"] == "Transport"

    @pytest.mark.asyncio
    async def test_change_case_only(self, seeded_catalog: Catalog):
        transport = category_id(seeded_catalog, "Transport")
        updated = await seeded_catalog.update_category(transport, CategoryUpdate(name="TRANSPORT"))
        assert updated.name == "TRANSPORT"
        assert categories_of(seeded_catalog)["Roads"] == "TRANSPORT"

    @pytest.mark.asyncio
    async def test_rename_onto_existing_name(self, seeded_catalog: Catalog):
        transport = category_id(seeded_catalog, "Transport")
        with pytest.raises(ConflictError):
            await seeded_catalog.update_category(transport, CategoryUpdate(name="environment"))
        assert categories_of(seeded_catalog)["Roads"] == "Transport"

    @pytest.mark.asyncio
    async def test_placeholder_cannot_be_edited(self, catalog: Catalog):
        with pytest.raises(ValidationError):
            await catalog.update_category("uncategorized", CategoryUpdate(name="Misc"))

    @pytest.mark.asyncio
    async def test_unknown_category(self, catalog: Catalog):
        with pytest.raises(NotFoundError):
            await catalog.update_category("missing", CategoryUpdate(name="Misc"))


class TestDeleteCategory:
    """Tests for deleting categories."""

    @pytest.mark.asyncio
    async def test_delete_moves_members_to_placeholder(self, seeded_catalog: Catalog):
        transport = category_id(seeded_catalog, "Transport")

        moved = await seeded_catalog.delete_category(transport)

        assert moved == 2
        assert categories_of(seeded_catalog) == {
            "Roads": "Uncategorized",
            "Bus Stops": "Uncategorized",
            "Land Use": "Environment",
        }
        assert [c.name for c in seeded_catalog.store.categories] == ["Environment", "Uncategorized"]

    @pytest.mark.asyncio
    async def test_delete_without_cascade_refuses_in_use(self, seeded_catalog: Catalog):
        transport = category_id(seeded_catalog, "Transport")
        with pytest.raises(ConflictError) as exc_info:
            await seeded_catalog.delete_category(transport, cascade=False)
        assert "still used by 2" in exc_info.value.message
        assert seeded_catalog.store.get_category_by_name("Transport") is not None

    @pytest.mark.asyncio
    async def test_delete_unused_without_cascade(self, catalog: Catalog):
        water = await catalog.add_category(CategoryCreate(name="Water"))
        assert await catalog.delete_category(water.id, cascade=False) == 0
        assert catalog.store.stored_categories == []

    @pytest.mark.asyncio
    async def test_placeholder_cannot_be_deleted(self, catalog: Catalog):
        with pytest.raises(ValidationError):
            await catalog.delete_category("uncategorized")


class TestResolveCategoryName:
    """Tests for mapping requested names onto stored categories."""

    @pytest.mark.asyncio
    async def test_empty_means_placeholder(self, catalog: Catalog):
        assert await catalog.categories.resolve_category_name("") == "Uncategorized"
        assert await catalog.categories.resolve_category_name(None) == "Uncategorized"

    @pytest.mark.asyncio
    async def test_stored_spelling_returned(self, seeded_catalog: Catalog):
        assert await seeded_catalog.categories.resolve_category_name("ENVIRONMENT") == "Environment"

    @pytest.mark.asyncio
    async def test_unknown_name(self, catalog: Catalog):
        with pytest.raises(ValidationError):
            await catalog.categories.resolve_category_name("Water")
