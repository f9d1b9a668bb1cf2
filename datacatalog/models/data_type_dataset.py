"""
DataTypeDataset model - one edge of the data type / dataset relation.

Design notes:
- foreign keys point at the public string ids so that imported links keep
  resolving after ids are preserved verbatim
- the (data_type_id, dataset_id) pair is unique: links have set semantics
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, String, UniqueConstraint
from sqlmodel import Field

from datacatalog.models.base import BaseTableModel

__all__ = ["DataTypeDataset"]


class DataTypeDataset(BaseTableModel, table=True):
    """A dataset satisfies a data type."""

    __tablename__ = "data_type_datasets"
    __table_args__ = (
        UniqueConstraint("data_type_id", "dataset_id", name="uq_data_type_datasets_pair"),
        Index("idx_data_type_datasets_data_type", "data_type_id"),
        Index("idx_data_type_datasets_dataset", "dataset_id"),
    )

    data_type_id: str = Field(
        sa_column=Column(String(64), ForeignKey("data_types.id"), nullable=False),
    )
    dataset_id: str = Field(
        sa_column=Column(String(64), ForeignKey("datasets.id"), nullable=False),
    )
