"""
SQLModel/SQLAlchemy ORM models.

Models are imported lazily to avoid circular import issues.
Import specific models directly:
    from datacatalog.models.data_type import DataType
    from datacatalog.models.dataset import Dataset

Or import all at once (after all modules are loaded):
    from datacatalog.models import DataType, Dataset, Category
"""

# Re-export SQLModel for convenience
from sqlmodel import SQLModel

# Lazy imports - these are only resolved when accessed
# This avoids import-time type resolution issues in SQLModel

__all__ = [
    "SQLModel",
    # Base
    "BaseTableModel",
    "TimestampedTableModel",
    # Models
    "DataType",
    "Dataset",
    "Category",
    "DataTypeDataset",
]


def __getattr__(name: str):
    """
    Lazy import of models to avoid circular import issues.

    This is called when an attribute is accessed that doesn't exist
    in the module namespace. We use it to defer model imports until
    they're actually needed.
    """
    if name == "BaseTableModel":
        from datacatalog.models.base import BaseTableModel
        return BaseTableModel
    elif name == "TimestampedTableModel":
        from datacatalog.models.base import TimestampedTableModel
        return TimestampedTableModel
    elif name == "DataType":
        from datacatalog.models.data_type import DataType
        return DataType
    elif name == "Dataset":
        from datacatalog.models.dataset import Dataset
        return Dataset
    elif name == "Category":
        from datacatalog.models.category import Category
        return Category
    elif name == "DataTypeDataset":
        from datacatalog.models.data_type_dataset import DataTypeDataset
        return DataTypeDataset

    raise AttributeError(f"module 'datacatalog.models' has no attribute '{name}'")
