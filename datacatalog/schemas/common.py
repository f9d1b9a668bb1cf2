"""
Common Pydantic schemas shared across the application.

Provides:
- Error response schema
- Health check schema
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ErrorResponse",
    "HealthResponse",
]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    detail: str = Field(description="Human-readable error message")

    model_config = ConfigDict(json_schema_extra={"example": {"detail": "Dataset not found"}})


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Health status")
    app: str = Field(description="Application name")
    synced: bool = Field(default=False, description="All collections received a snapshot")
