"""
Category model - a grouping label attached to data types.

The name is the join key used by DataType.category, so it is unique.
The "Uncategorized" placeholder is never stored here.
"""

from __future__ import annotations

from sqlalchemy import Column, String, Text, UniqueConstraint
from sqlmodel import Field

from datacatalog.models.base import BaseTableModel

__all__ = ["Category"]


class Category(BaseTableModel, table=True):
    """A named group of data types."""

    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("name", name="uq_categories_name"),
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        max_length=255,
    )
    description: str = Field(
        default="",
        sa_column=Column(Text, nullable=False, server_default=""),
    )
