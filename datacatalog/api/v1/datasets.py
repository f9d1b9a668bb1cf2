"""
Dataset API endpoints.

CRUD operations for datasets:
- GET /datasets - List datasets with their link counts
- POST /datasets - Create dataset with its data type links
- GET /datasets/{dataset_id} - Get dataset
- PATCH /datasets/{dataset_id} - Update dataset
- DELETE /datasets/{dataset_id} - Delete dataset and its links

Link endpoints:
- GET /datasets/{dataset_id}/data-types - Data types the dataset satisfies
- PUT /datasets/{dataset_id}/data-types - Replace the linked data type set
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query, status

from datacatalog.api.deps import CatalogDep, StoreDep
from datacatalog.api.utils import get_or_404
from datacatalog.schemas.data_type import DataTypeRead
from datacatalog.schemas.dataset import DatasetCreate, DatasetRead, DatasetSummary, DatasetUpdate
from datacatalog.schemas.enums import LinkSide
from datacatalog.schemas.link import LinkSelection

router = APIRouter()

DatasetId = Path(
    ...,
    description="The identifier of the dataset",
    examples=["440e8400e29b41d4a716446655440000"],
)


@router.get("", response_model=list[DatasetSummary])
async def list_datasets(
    store: StoreDep,
    source_type: str | None = Query(
        default=None,
        description="Filter datasets by source type",
        examples=["Government"],
    ),
    search: str | None = Query(
        default=None,
        description="Search in dataset name or description",
        examples=["population"],
    ),
):
    """List all datasets, each with the number of linked data types."""
    items = store.datasets
    if source_type:
        items = [item for item in items if item.source_type == source_type]
    if search:
        needle = search.lower()
        items = [item for item in items if needle in item.name.lower() or needle in item.description.lower()]
    return [
        DatasetSummary(**item.model_dump(), link_count=store.get_link_count(item.id))
        for item in items
    ]


@router.post("", response_model=DatasetRead, status_code=status.HTTP_201_CREATED)
async def create_dataset(
    catalog: CatalogDep,
    data: DatasetCreate,
):
    """Create a new dataset, linked to the selected data types."""
    return await catalog.add_dataset(data)


@router.get("/{dataset_id}", response_model=DatasetSummary)
async def get_dataset(
    catalog: CatalogDep,
    dataset_id: str = DatasetId,
):
    """Get a single dataset by id."""
    dataset = await get_or_404(catalog.datasets, dataset_id)
    return DatasetSummary(**dataset.model_dump(), link_count=catalog.store.get_link_count(dataset_id))


@router.patch("/{dataset_id}", response_model=DatasetRead)
async def update_dataset(
    catalog: CatalogDep,
    data: DatasetUpdate,
    dataset_id: str = DatasetId,
):
    """Update a dataset. A supplied data type selection replaces the current links."""
    return await catalog.update_dataset(dataset_id, data)


@router.delete("/{dataset_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dataset(
    catalog: CatalogDep,
    dataset_id: str = DatasetId,
):
    """Delete a dataset together with all of its links."""
    await catalog.delete_dataset(dataset_id)


@router.get("/{dataset_id}/data-types", response_model=list[DataTypeRead])
async def list_dataset_data_types(
    catalog: CatalogDep,
    dataset_id: str = DatasetId,
):
    """List the data types a dataset is linked to."""
    await get_or_404(catalog.datasets, dataset_id)
    return catalog.store.get_data_types_for_dataset(dataset_id)


@router.put("/{dataset_id}/data-types", response_model=LinkSelection)
async def replace_dataset_data_types(
    catalog: CatalogDep,
    selection: LinkSelection,
    dataset_id: str = DatasetId,
):
    """Replace the full set of data types linked to a dataset."""
    ids = await catalog.replace_links(dataset_id, selection.ids, LinkSide.DATASET)
    return LinkSelection(ids=ids)
