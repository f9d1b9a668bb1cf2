"""
Pydantic schemas for request/response validation.

Re-exports all schemas for convenient importing:
    from datacatalog.schemas import DataTypeCreate, DataTypeRead, Priority
"""

# Common schemas
from datacatalog.schemas.common import (
    ErrorResponse,
    HealthResponse,
)

# Enums
from datacatalog.schemas.enums import (
    Collection,
    CompletionStatus,
    LinkSide,
    Priority,
    RdlsStatus,
)

# Entity schemas - DataType
from datacatalog.schemas.data_type import (
    DataTypeBase,
    DataTypeCreate,
    DataTypeRead,
    DataTypeUpdate,
)

# Entity schemas - Dataset
from datacatalog.schemas.dataset import (
    DatasetBase,
    DatasetCreate,
    DatasetRead,
    DatasetSummary,
    DatasetUpdate,
)

# Entity schemas - Category
from datacatalog.schemas.category import (
    CategoryCreate,
    CategoryDeleteResult,
    CategoryRead,
    CategoryUpdate,
)

# Entity schemas - Link
from datacatalog.schemas.link import (
    LinkRead,
    LinkSelection,
)

# Import/export
from datacatalog.schemas.transfer import (
    CatalogDocument,
    ImportResult,
)

# Reports
from datacatalog.schemas.report import (
    DashboardStats,
    ProgressSummary,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Enums
    "Collection",
    "CompletionStatus",
    "LinkSide",
    "Priority",
    "RdlsStatus",
    # DataType
    "DataTypeBase",
    "DataTypeCreate",
    "DataTypeRead",
    "DataTypeUpdate",
    # Dataset
    "DatasetBase",
    "DatasetCreate",
    "DatasetRead",
    "DatasetSummary",
    "DatasetUpdate",
    # Category
    "CategoryCreate",
    "CategoryDeleteResult",
    "CategoryRead",
    "CategoryUpdate",
    # Link
    "LinkRead",
    "LinkSelection",
    # Transfer
    "CatalogDocument",
    "ImportResult",
    # Reports
    "DashboardStats",
    "ProgressSummary",
]
