"""
Category API endpoints.

- GET /categories - List categories, including the placeholder
- POST /categories - Create category
- PATCH /categories/{category_id} - Rename or re-describe a category
- DELETE /categories/{category_id} - Delete category
- GET /categories/{category_id}/data-types - Data types in a category
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query, status

from datacatalog.api.deps import CatalogDep, StoreDep
from datacatalog.api.utils import raise_not_found
from datacatalog.schemas.category import CategoryCreate, CategoryDeleteResult, CategoryRead, CategoryUpdate
from datacatalog.schemas.data_type import DataTypeRead

router = APIRouter()

CategoryId = Path(..., description="The identifier of the category", examples=["uncategorized"])


@router.get("", response_model=list[CategoryRead])
async def list_categories(store: StoreDep):
    """List stored categories followed by the placeholder when it is not stored."""
    return store.categories


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(
    catalog: CatalogDep,
    data: CategoryCreate,
):
    """Create a new category. Names are unique, ignoring case."""
    return await catalog.add_category(data)


@router.patch("/{category_id}", response_model=CategoryRead)
async def update_category(
    catalog: CatalogDep,
    data: CategoryUpdate,
    category_id: str = CategoryId,
):
    """Update a category. A rename is applied to every data type using it."""
    return await catalog.update_category(category_id, data)


@router.delete("/{category_id}", response_model=CategoryDeleteResult)
async def delete_category(
    catalog: CatalogDep,
    category_id: str = CategoryId,
    cascade: bool = Query(
        default=True,
        description="Move data types to the placeholder category; when false, refuse if any use it",
    ),
):
    """Delete a category."""
    reassigned = await catalog.delete_category(category_id, cascade=cascade)
    return CategoryDeleteResult(reassigned_data_types=reassigned)


@router.get("/{category_id}/data-types", response_model=list[DataTypeRead])
async def list_category_data_types(
    store: StoreDep,
    category_id: str = CategoryId,
):
    """List the data types assigned to a category."""
    category = store.get_category_by_id(category_id)
    if category is None:
        raise_not_found("Category")
    return store.get_data_types_in_category(category.name)
