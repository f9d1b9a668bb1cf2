"""Category request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from datacatalog.schemas.validators import TextFieldsMixin

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryRead",
    "CategoryDeleteResult",
]


class CategoryCreate(TextFieldsMixin, BaseModel):
    """Schema for creating a category."""

    __text_fields__ = ("description",)

    name: str = Field(min_length=1, max_length=255, description="Unique category name")
    description: str = Field(default="", description="What belongs in the category")


class CategoryUpdate(TextFieldsMixin, BaseModel):
    """Schema for renaming or re-describing a category."""

    __text_fields__ = ("description",)

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None


class CategoryRead(TextFieldsMixin, BaseModel):
    """Full category record."""

    __text_fields__ = ("description",)

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(min_length=1, description="Unique identifier")
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(default="")


class CategoryDeleteResult(BaseModel):
    """Outcome of a category deletion."""

    reassigned_data_types: int = Field(description="Data types moved to the placeholder category")
