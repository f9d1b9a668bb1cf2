"""
API dependencies for FastAPI route handlers.

Provides:
- Catalog context dependency (opened in the application lifespan)
- Entity store dependency for read-only routes
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from datacatalog.catalog import Catalog
from datacatalog.store.entity_store import EntityStore

__all__ = [
    "CatalogDep",
    "StoreDep",
    "get_catalog",
    "get_store",
]


def get_catalog(request: Request) -> Catalog:
    """Dependency that provides the application's catalog context."""
    return request.app.state.catalog


def get_store(catalog: Annotated[Catalog, Depends(get_catalog)]) -> EntityStore:
    """Dependency that provides the live entity store."""
    return catalog.store


# Type aliases for dependencies
CatalogDep = Annotated[Catalog, Depends(get_catalog)]
StoreDep = Annotated[EntityStore, Depends(get_store)]
