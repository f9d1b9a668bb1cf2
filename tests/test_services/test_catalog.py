"""Tests for the catalog context lifecycle."""

import pytest

from datacatalog.catalog import Catalog
from datacatalog.core.config import Settings
from datacatalog.schemas.category import CategoryCreate


@pytest.mark.asyncio
async def test_context_manager_opens_and_closes(test_settings: Settings):
    async with Catalog.from_settings(test_settings) as catalog:
        assert catalog.store.is_loaded
        assert catalog.sync.is_running
    assert not catalog.sync.is_running
    assert not catalog.store.is_loaded


@pytest.mark.asyncio
async def test_data_survives_reopen(test_settings: Settings):
    """Test a second catalog over the same database sees committed data."""
    async with Catalog.from_settings(test_settings) as catalog:
        await catalog.add_category(CategoryCreate(name="Transport"))

    async with Catalog.from_settings(test_settings) as reopened:
        assert [c.name for c in reopened.store.stored_categories] == ["Transport"]


@pytest.mark.asyncio
async def test_two_catalogs_share_nothing(test_settings: Settings, tmp_path):
    other_settings = test_settings.model_copy(
        update={"database_url": f"sqlite+aiosqlite:///{tmp_path / 'other.db'}"}
    )
    async with Catalog.from_settings(test_settings) as first, Catalog.from_settings(other_settings) as second:
        await first.add_category(CategoryCreate(name="Transport"))
        assert second.store.stored_categories == []
