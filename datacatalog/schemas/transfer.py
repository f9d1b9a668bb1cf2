"""
Import/export document schemas.

The JSON export is one document with four named arrays. The same schema
validates import payloads, so a payload is checked completely before the
import touches storage.
"""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field, model_validator

from datacatalog.schemas.category import CategoryRead
from datacatalog.schemas.data_type import DataTypeRead
from datacatalog.schemas.dataset import DatasetRead
from datacatalog.schemas.link import LinkRead

__all__ = [
    "CatalogDocument",
    "ImportResult",
]


def _duplicates(values: list[str]) -> list[str]:
    return sorted(value for value, count in Counter(values).items() if count > 1)


class CatalogDocument(BaseModel):
    """
    The full entity graph.

    All four arrays are required. Besides per-record validation, the
    document must be internally consistent:
    - ids are unique within each array
    - category names are unique (case-insensitive)
    - each link pair appears once
    - every link endpoint is present in the document
    """

    model_config = ConfigDict(populate_by_name=True)

    data_types: list[DataTypeRead] = Field(alias="dataTypes")
    datasets: list[DatasetRead] = Field(alias="datasets")
    categories: list[CategoryRead] = Field(alias="categories")
    data_type_datasets: list[LinkRead] = Field(alias="dataTypeDatasets")

    @model_validator(mode="after")
    def check_consistency(self) -> CatalogDocument:
        for label, records in (
            ("dataTypes", self.data_types),
            ("datasets", self.datasets),
            ("categories", self.categories),
            ("dataTypeDatasets", self.data_type_datasets),
        ):
            dupes = _duplicates([record.id for record in records])
            if dupes:
                raise ValueError(f"{label} contains duplicate ids: {', '.join(dupes)}")

        dupes = _duplicates([category.name.lower() for category in self.categories])
        if dupes:
            raise ValueError(f"categories contains duplicate names: {', '.join(dupes)}")

        pairs = [(link.data_type_id, link.dataset_id) for link in self.data_type_datasets]
        if len(set(pairs)) != len(pairs):
            raise ValueError("dataTypeDatasets contains duplicate data type/dataset pairs")

        data_type_ids = {data_type.id for data_type in self.data_types}
        dataset_ids = {dataset.id for dataset in self.datasets}
        for link in self.data_type_datasets:
            if link.data_type_id not in data_type_ids:
                raise ValueError(
                    f"link '{link.id}' references unknown data type '{link.data_type_id}'"
                )
            if link.dataset_id not in dataset_ids:
                raise ValueError(
                    f"link '{link.id}' references unknown dataset '{link.dataset_id}'"
                )
        return self


class ImportResult(BaseModel):
    """Counts of records written by an import."""

    data_types: int = Field(description="Data types imported")
    datasets: int = Field(description="Datasets imported")
    categories: int = Field(description="Categories written, including backfilled ones")
    links: int = Field(description="Links imported")
