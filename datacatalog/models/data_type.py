"""
DataType model - an abstract category of data a project needs.

Design notes:
- category is stored as the category *name*, not a foreign key. Renames and
  deletes of categories rewrite it explicitly (see CategoryService).
- priority, completion_status and rdls_can_handle are stored as VARCHAR
  holding the enum value; rows load back as enum members
"""

from __future__ import annotations

from enum import StrEnum

from sqlalchemy import Column, Index, String, Text
from sqlalchemy import Enum as SAEnum
from sqlmodel import Field

from datacatalog.models.base import TimestampedTableModel
from datacatalog.schemas.enums import CompletionStatus, Priority, RdlsStatus

__all__ = ["DataType"]


def _enum_column(enum_class: type[StrEnum]) -> Column:
    """VARCHAR column that stores enum values, not member names."""
    return Column(
        SAEnum(
            enum_class,
            native_enum=False,
            length=50,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
    )


class DataType(TimestampedTableModel, table=True):
    """A cataloged category of information the project needs."""

    __tablename__ = "data_types"
    __table_args__ = (
        Index("idx_data_types_category", "category"),
        Index("idx_data_types_completion_status", "completion_status"),
    )

    # Identification
    uid: str = Field(
        default="",
        sa_column=Column(String(100), nullable=False, server_default=""),
        description="User-facing code (e.g., 'INF-001')",
    )
    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        max_length=255,
    )
    description: str = Field(
        default="",
        sa_column=Column(Text, nullable=False, server_default=""),
    )
    category: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Name of the owning category",
    )

    # Tracking
    priority: Priority = Field(
        default=Priority.UNASSIGNED,
        sa_column=_enum_column(Priority),
    )
    completion_status: CompletionStatus = Field(
        default=CompletionStatus.NOT_STARTED,
        sa_column=_enum_column(CompletionStatus),
    )

    # Technical details
    data_format: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    minimum_criteria: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    notes: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    key_attributes: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    applicable_standards: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    iso_indicators: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))

    # RDLS coverage
    rdls_can_handle: RdlsStatus = Field(
        default=RdlsStatus.UNASSIGNED,
        sa_column=_enum_column(RdlsStatus),
    )
    rdls_component: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    rdls_notes: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
