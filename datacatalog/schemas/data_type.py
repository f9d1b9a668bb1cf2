"""
DataType request/response schemas.

Patterns:
- DataTypeBase: Shared validation for create/update
- DataTypeCreate: new data type plus its initial dataset selection
- DataTypeUpdate: partial update (all optional)
- DataTypeRead: full record, as held by the store and written to exports
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from datacatalog.schemas.enums import CompletionStatus, Priority, RdlsStatus
from datacatalog.schemas.validators import TextFieldsMixin

__all__ = [
    "DataTypeBase",
    "DataTypeCreate",
    "DataTypeUpdate",
    "DataTypeRead",
    "DATA_TYPE_TEXT_FIELDS",
]

DATA_TYPE_TEXT_FIELDS = (
    "uid",
    "description",
    "category",
    "data_format",
    "minimum_criteria",
    "notes",
    "key_attributes",
    "applicable_standards",
    "iso_indicators",
    "rdls_component",
    "rdls_notes",
)


class DataTypeBase(TextFieldsMixin, BaseModel):
    """Shared fields for data type create/read."""

    __text_fields__ = DATA_TYPE_TEXT_FIELDS

    uid: str = Field(default="", max_length=100, description="User-facing code")
    name: str = Field(min_length=1, max_length=255, description="Data type name")
    description: str = Field(default="", description="What the data type covers")
    category: str = Field(
        default="",
        max_length=255,
        description="Category name (empty means Uncategorized)",
    )
    priority: Priority = Field(default=Priority.UNASSIGNED)
    completion_status: CompletionStatus = Field(default=CompletionStatus.NOT_STARTED)
    data_format: str = Field(default="", description="Expected data format")
    minimum_criteria: str = Field(default="", description="Minimum acceptance criteria")
    notes: str = Field(default="")
    key_attributes: str = Field(default="", description="Key attributes (JSON text)")
    applicable_standards: str = Field(default="")
    iso_indicators: str = Field(default="")
    rdls_can_handle: RdlsStatus = Field(default=RdlsStatus.UNASSIGNED)
    rdls_component: str = Field(default="")
    rdls_notes: str = Field(default="")


class DataTypeCreate(DataTypeBase):
    """Schema for creating a data type together with its dataset links."""

    linked_dataset_ids: list[str] = Field(
        default_factory=list,
        description="Datasets to link the new data type to",
    )


class DataTypeUpdate(TextFieldsMixin, BaseModel):
    """Schema for updating an existing data type. All fields optional."""

    __text_fields__ = DATA_TYPE_TEXT_FIELDS

    uid: str | None = Field(default=None, max_length=100)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    category: str | None = Field(default=None, max_length=255)
    priority: Priority | None = None
    completion_status: CompletionStatus | None = None
    data_format: str | None = None
    minimum_criteria: str | None = None
    notes: str | None = None
    key_attributes: str | None = None
    applicable_standards: str | None = None
    iso_indicators: str | None = None
    rdls_can_handle: RdlsStatus | None = None
    rdls_component: str | None = None
    rdls_notes: str | None = None
    linked_dataset_ids: list[str] | None = Field(
        default=None,
        description="Complete dataset selection; omit to leave links unchanged",
    )


class DataTypeRead(DataTypeBase):
    """Full data type record."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(min_length=1, description="Unique identifier")
    created_at: datetime = Field(description="When the data type was created")
