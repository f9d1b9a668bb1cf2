"""Derived report schemas (progress and dashboard views)."""

from __future__ import annotations

from pydantic import BaseModel, Field

from datacatalog.schemas.data_type import DataTypeRead

__all__ = [
    "ProgressSummary",
    "DashboardStats",
]


class ProgressSummary(BaseModel):
    """How many data types already have at least one dataset."""

    total_data_types: int
    linked_data_types: int
    percent_linked: int = Field(description="Rounded percentage, 0 when there are no data types")
    by_completion_status: dict[str, int] = Field(default_factory=dict)
    by_priority: dict[str, int] = Field(default_factory=dict)


class DashboardStats(BaseModel):
    """Collection sizes and the most recently created data types."""

    data_types: int
    datasets: int
    categories: int = Field(description="Includes the placeholder category")
    recent_data_types: list[DataTypeRead] = Field(default_factory=list)
