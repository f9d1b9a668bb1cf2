"""
Base SQLModel classes with common fields.

Design decisions:
- Use SQLModel for combined Pydantic + SQLAlchemy functionality
- Integer autoincrement primary key fixes insertion order (never exported)
- String public identifier, generated when not supplied and preserved on import

Note on Column reuse: SQLAlchemy Column objects cannot be shared between
tables. When using inheritance, we must define columns without sa_column
or use sa_column_kwargs to avoid sharing Column objects.
"""

from __future__ import annotations

import uuid as uuid_lib
from datetime import UTC, datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

__all__ = [
    "SQLModel",
    "BaseTableModel",
    "TimestampedTableModel",
    "new_id",
    "utc_now",
]


def utc_now() -> datetime:
    """Get current UTC time."""
    return datetime.now(UTC)


def new_id() -> str:
    """Generate a new public record identifier."""
    return uuid_lib.uuid4().hex


class BaseTableModel(SQLModel):
    """
    Base class for all catalog table models.

    Provides:
    - pk: Internal primary key (insertion order, never exposed)
    - id: Public identifier (used in links, exports and API responses)

    Usage:
        class Category(BaseTableModel, table=True):
            __tablename__ = "categories"
            name: str = Field(max_length=255)

    Note: Subclasses must set table=True to create actual tables.
    """

    # Primary key - internal use only, never exposed
    pk: int | None = Field(
        default=None,
        primary_key=True,
    )

    # Public identifier - used everywhere outside the database
    id: str = Field(
        default_factory=new_id,
        max_length=64,
        unique=True,
        index=True,
    )


class TimestampedTableModel(BaseTableModel):
    """Base class for records that carry a creation timestamp."""

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=sa.DateTime(timezone=True),
    )
