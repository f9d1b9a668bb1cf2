"""
Enum definitions for the Data Catalog application.

All enums are defined as StrEnum for JSON serialization compatibility.
Database stores these as VARCHAR - validation happens at the Pydantic layer.
"""

from enum import StrEnum

__all__ = [
    "Priority",
    "CompletionStatus",
    "RdlsStatus",
    "Collection",
    "LinkSide",
]


class Priority(StrEnum):
    """How important a data type is to the project."""

    ESSENTIAL = "Essential"
    BENEFICIAL = "Beneficial"
    LOW = "Low"
    UNASSIGNED = "Unassigned"


class CompletionStatus(StrEnum):
    """How far along the search for a data type's datasets is."""

    COMPLETE = "Complete"
    IN_PROGRESS = "In Progress"
    NOT_STARTED = "Not Started"


class RdlsStatus(StrEnum):
    """Whether the Risk Data Library Standard can describe a data type."""

    YES = "Yes"
    NO = "No"
    PARTIAL = "Partial"
    CHECK = "Check"
    UNASSIGNED = "Unassigned"


class Collection(StrEnum):
    """
    The four live collections.

    Values double as the array keys of the JSON export document.
    """

    DATA_TYPES = "dataTypes"
    DATASETS = "datasets"
    CATEGORIES = "categories"
    LINKS = "dataTypeDatasets"


class LinkSide(StrEnum):
    """Which endpoint of the relation a link replacement is anchored on."""

    DATA_TYPE = "dataType"
    DATASET = "dataset"

    @property
    def own_field(self) -> str:
        """Link field holding the anchor item's id."""
        return "data_type_id" if self is LinkSide.DATA_TYPE else "dataset_id"

    @property
    def other_field(self) -> str:
        """Link field holding the linked items' ids."""
        return "dataset_id" if self is LinkSide.DATA_TYPE else "data_type_id"

    @property
    def own_collection(self) -> Collection:
        return Collection.DATA_TYPES if self is LinkSide.DATA_TYPE else Collection.DATASETS

    @property
    def other_collection(self) -> Collection:
        return Collection.DATASETS if self is LinkSide.DATA_TYPE else Collection.DATA_TYPES
