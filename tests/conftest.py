"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from datacatalog.api.deps import get_catalog
from datacatalog.catalog import Catalog
from datacatalog.core.config import Settings
from datacatalog.main import app
from datacatalog.persistence.sql import SQLBackend
from datacatalog.schemas.category import CategoryCreate
from datacatalog.schemas.data_type import DataTypeCreate
from datacatalog.schemas.dataset import DatasetCreate
from datacatalog.store.entity_store import EntityStore


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Test settings with a throwaway SQLite database per test."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        create_tables=True,
        debug=False,
    )


@pytest.fixture
async def backend(test_settings: Settings) -> AsyncGenerator[SQLBackend, None]:
    """A started SQL backend with empty tables."""
    backend = SQLBackend.from_settings(test_settings)
    await backend.start()
    yield backend
    await backend.stop()


@pytest.fixture
def store(test_settings: Settings) -> EntityStore:
    return EntityStore(test_settings.category)


@pytest.fixture
async def catalog(test_settings: Settings) -> AsyncGenerator[Catalog, None]:
    """An opened catalog: tables created and every collection subscribed."""
    catalog = Catalog.from_settings(test_settings)
    await catalog.open()
    yield catalog
    await catalog.close()


@pytest.fixture
async def seeded_catalog(catalog: Catalog) -> Catalog:
    """
    Catalog with two categories, three datasets and three data types.

    Roads (Transport) -> OSM, Census
    Bus Stops (Transport) -> OSM
    Land Use (Environment) -> nothing
    Elevation Model is linked to no data type
    """
    await catalog.add_category(CategoryCreate(name="Transport", description="Moving around"))
    await catalog.add_category(CategoryCreate(name="Environment"))

    osm = await catalog.add_dataset(DatasetCreate(name="OSM", source_type="Open"))
    census = await catalog.add_dataset(DatasetCreate(name="Census", source_type="Government"))
    await catalog.add_dataset(DatasetCreate(name="Elevation Model"))

    await catalog.add_data_type(
        DataTypeCreate(name="Roads", category="Transport", linked_dataset_ids=[osm.id, census.id])
    )
    await catalog.add_data_type(
        DataTypeCreate(name="Bus Stops", category="transport", linked_dataset_ids=[osm.id])
    )
    await catalog.add_data_type(DataTypeCreate(name="Land Use", category="Environment"))
    return catalog


@pytest.fixture
async def client(catalog: Catalog) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client bound to the test catalog."""
    app.dependency_overrides[get_catalog] = lambda: catalog

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()

