"""DataTypeDataset (link) schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "LinkRead",
    "LinkSelection",
]


class LinkRead(BaseModel):
    """One edge of the data type / dataset relation."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(min_length=1, description="Unique identifier")
    data_type_id: str = Field(min_length=1)
    dataset_id: str = Field(min_length=1)


class LinkSelection(BaseModel):
    """The complete set of ids an item should be linked to."""

    ids: list[str] = Field(default_factory=list, description="Ids on the opposite side")
