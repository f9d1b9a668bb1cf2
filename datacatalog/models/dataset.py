"""
Dataset model - a concrete real-world data source.

Design notes:
- coverage and access metadata are free text; the catalog does not
  interpret them
- a dataset can satisfy any number of data types through DataTypeDataset
"""

from __future__ import annotations

from sqlalchemy import Column, Index, String, Text
from sqlmodel import Field

from datacatalog.models.base import TimestampedTableModel

__all__ = ["Dataset"]


class Dataset(TimestampedTableModel, table=True):
    """
    An external data source that satisfies one or more data types.

    Examples: OSM building footprints for Nairobi, a national census table.
    """

    __tablename__ = "datasets"
    __table_args__ = (
        Index("idx_datasets_name", "name"),
        Index("idx_datasets_source_type", "source_type"),
    )

    # Identification
    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        max_length=255,
    )
    url: str = Field(
        default="",
        sa_column=Column(String(1000), nullable=False, server_default=""),
        description="URL to the external source",
    )
    description: str = Field(
        default="",
        sa_column=Column(Text, nullable=False, server_default=""),
    )

    # Source information
    source_organization: str = Field(default="", sa_column=Column(String(255), nullable=False, server_default=""))
    source_type: str = Field(default="", sa_column=Column(String(100), nullable=False, server_default=""))

    # Coverage
    geographic_coverage: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    temporal_coverage: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    format: str = Field(default="", sa_column=Column(String(100), nullable=False, server_default=""))
    resolution: str = Field(default="", sa_column=Column(String(255), nullable=False, server_default=""))
    access_type: str = Field(default="", sa_column=Column(String(100), nullable=False, server_default=""))
    license: str = Field(default="", sa_column=Column(String(255), nullable=False, server_default=""))

    # Review flags
    is_validated: bool = Field(default=False)
    is_primary_example: bool = Field(default=False)

    # Notes
    quality_notes: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    used_in_projects: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    notes: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
