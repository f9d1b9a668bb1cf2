"""
Dataset request/response schemas.

Patterns:
- DatasetBase: Shared validation for create/read
- DatasetCreate: new dataset plus its initial data type selection
- DatasetUpdate: partial update (all optional)
- DatasetRead: full record, as held by the store and written to exports
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from datacatalog.schemas.validators import TextFieldsMixin, parse_bool_field

__all__ = [
    "DatasetBase",
    "DatasetCreate",
    "DatasetUpdate",
    "DatasetRead",
    "DatasetSummary",
    "DATASET_TEXT_FIELDS",
]

DATASET_TEXT_FIELDS = (
    "url",
    "description",
    "source_organization",
    "source_type",
    "geographic_coverage",
    "temporal_coverage",
    "format",
    "resolution",
    "access_type",
    "license",
    "quality_notes",
    "used_in_projects",
    "notes",
)


class DatasetBase(TextFieldsMixin, BaseModel):
    """Shared fields for dataset create/read."""

    __text_fields__ = DATASET_TEXT_FIELDS

    name: str = Field(min_length=1, max_length=255, description="Dataset name")
    url: str = Field(default="", max_length=1000, description="Source URL")
    description: str = Field(default="")
    source_organization: str = Field(default="", max_length=255)
    source_type: str = Field(default="", max_length=100)
    geographic_coverage: str = Field(default="")
    temporal_coverage: str = Field(default="")
    format: str = Field(default="", max_length=100)
    resolution: str = Field(default="", max_length=255)
    access_type: str = Field(default="", max_length=100)
    license: str = Field(default="", max_length=255)
    is_validated: bool = Field(default=False, description="Checked by a reviewer")
    is_primary_example: bool = Field(default=False, description="Best example for its data types")
    quality_notes: str = Field(default="")
    used_in_projects: str = Field(default="")
    notes: str = Field(default="")

    @field_validator("is_validated", "is_primary_example", mode="before")
    @classmethod
    def parse_flags(cls, v):
        """Accept "true"/"false" spellings from hand-edited exports."""
        if v is None:
            return False
        return parse_bool_field(v)


class DatasetCreate(DatasetBase):
    """Schema for creating a dataset together with its data type links."""

    linked_data_type_ids: list[str] = Field(
        default_factory=list,
        description="Data types the new dataset satisfies",
    )


class DatasetUpdate(TextFieldsMixin, BaseModel):
    """Schema for updating an existing dataset. All fields optional."""

    __text_fields__ = DATASET_TEXT_FIELDS

    name: str | None = Field(default=None, min_length=1, max_length=255)
    url: str | None = Field(default=None, max_length=1000)
    description: str | None = None
    source_organization: str | None = Field(default=None, max_length=255)
    source_type: str | None = Field(default=None, max_length=100)
    geographic_coverage: str | None = None
    temporal_coverage: str | None = None
    format: str | None = Field(default=None, max_length=100)
    resolution: str | None = Field(default=None, max_length=255)
    access_type: str | None = Field(default=None, max_length=100)
    license: str | None = Field(default=None, max_length=255)
    is_validated: bool | None = None
    is_primary_example: bool | None = None
    quality_notes: str | None = None
    used_in_projects: str | None = None
    notes: str | None = None
    linked_data_type_ids: list[str] | None = Field(
        default=None,
        description="Complete data type selection; omit to leave links unchanged",
    )


class DatasetRead(DatasetBase):
    """Full dataset record."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(min_length=1, description="Unique identifier")
    created_at: datetime = Field(description="When the dataset was created")


class DatasetSummary(DatasetRead):
    """Dataset with the number of data types it satisfies, for list views."""

    link_count: int = Field(default=0, description="Number of linked data types")
