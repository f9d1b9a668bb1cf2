"""
Data type API endpoints.

CRUD operations for data types:
- GET /data-types - List data types (optionally filtered)
- POST /data-types - Create data type with its dataset links
- GET /data-types/{data_type_id} - Get data type
- PATCH /data-types/{data_type_id} - Update data type
- DELETE /data-types/{data_type_id} - Delete data type and its links

Link endpoints:
- GET /data-types/{data_type_id}/datasets - Datasets satisfying the data type
- PUT /data-types/{data_type_id}/datasets - Replace the linked dataset set
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query, status

from datacatalog.api.deps import CatalogDep, StoreDep
from datacatalog.api.utils import get_or_404
from datacatalog.schemas.data_type import DataTypeCreate, DataTypeRead, DataTypeUpdate
from datacatalog.schemas.dataset import DatasetRead
from datacatalog.schemas.enums import CompletionStatus, LinkSide, Priority
from datacatalog.schemas.link import LinkSelection

router = APIRouter()

DataTypeId = Path(
    ...,
    description="The identifier of the data type",
    examples=["3f2b9c1de4a54f0f8a6b2c7d9e0f1a2b"],
)


@router.get("", response_model=list[DataTypeRead])
async def list_data_types(
    store: StoreDep,
    category: str | None = Query(
        default=None,
        description="Only data types in this category",
        examples=["Transport"],
    ),
    completion_status: CompletionStatus | None = Query(default=None, description="Filter by completion status"),
    priority: Priority | None = Query(default=None, description="Filter by priority"),
    search: str | None = Query(
        default=None,
        description="Search in data type name or description",
        examples=["road"],
    ),
):
    """List data types in insertion order."""
    items = store.get_data_types_in_category(category) if category else store.data_types
    if completion_status is not None:
        items = [item for item in items if item.completion_status == completion_status]
    if priority is not None:
        items = [item for item in items if item.priority == priority]
    if search:
        needle = search.lower()
        items = [item for item in items if needle in item.name.lower() or needle in item.description.lower()]
    return items


@router.post("", response_model=DataTypeRead, status_code=status.HTTP_201_CREATED)
async def create_data_type(
    catalog: CatalogDep,
    data: DataTypeCreate,
):
    """Create a new data type, linked to the selected datasets."""
    return await catalog.add_data_type(data)


@router.get("/{data_type_id}", response_model=DataTypeRead)
async def get_data_type(
    catalog: CatalogDep,
    data_type_id: str = DataTypeId,
):
    """Get a single data type by id."""
    return await get_or_404(catalog.data_types, data_type_id)


@router.patch("/{data_type_id}", response_model=DataTypeRead)
async def update_data_type(
    catalog: CatalogDep,
    data: DataTypeUpdate,
    data_type_id: str = DataTypeId,
):
    """Update a data type. A supplied dataset selection replaces the current links."""
    return await catalog.update_data_type(data_type_id, data)


@router.delete("/{data_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_data_type(
    catalog: CatalogDep,
    data_type_id: str = DataTypeId,
):
    """Delete a data type together with all of its links."""
    await catalog.delete_data_type(data_type_id)


@router.get("/{data_type_id}/datasets", response_model=list[DatasetRead])
async def list_data_type_datasets(
    catalog: CatalogDep,
    data_type_id: str = DataTypeId,
):
    """List the datasets linked to a data type."""
    await get_or_404(catalog.data_types, data_type_id)
    return catalog.store.get_datasets_for_data_type(data_type_id)


@router.put("/{data_type_id}/datasets", response_model=LinkSelection)
async def replace_data_type_datasets(
    catalog: CatalogDep,
    selection: LinkSelection,
    data_type_id: str = DataTypeId,
):
    """Replace the full set of datasets linked to a data type."""
    ids = await catalog.replace_links(data_type_id, selection.ids, LinkSide.DATA_TYPE)
    return LinkSelection(ids=ids)
