"""Tests for enum definitions."""

from datacatalog.schemas.enums import (
    Collection,
    CompletionStatus,
    LinkSide,
    Priority,
    RdlsStatus,
)


class TestEnumValues:
    """Test enum values are correctly defined."""

    def test_priority_values(self):
        """Test Priority enum has expected values."""
        assert Priority.ESSENTIAL == "Essential"
        assert Priority.BENEFICIAL == "Beneficial"
        assert Priority.LOW == "Low"
        assert Priority.UNASSIGNED == "Unassigned"
        assert len(Priority) == 4

    def test_completion_status_values(self):
        """Test CompletionStatus uses the display spellings."""
        assert CompletionStatus.COMPLETE == "Complete"
        assert CompletionStatus.IN_PROGRESS == "In Progress"
        assert CompletionStatus.NOT_STARTED == "Not Started"
        assert len(CompletionStatus) == 3

    def test_rdls_status_values(self):
        assert {s.value for s in RdlsStatus} == {"Yes", "No", "Partial", "Check", "Unassigned"}

    def test_collection_values_are_export_keys(self):
        """Test collection values match the JSON export array names."""
        assert [c.value for c in Collection] == [
            "dataTypes",
            "datasets",
            "categories",
            "dataTypeDatasets",
        ]


class TestLinkSide:
    """Test LinkSide field and collection mapping."""

    def test_data_type_side(self):
        side = LinkSide.DATA_TYPE
        assert side.own_field == "data_type_id"
        assert side.other_field == "dataset_id"
        assert side.own_collection is Collection.DATA_TYPES
        assert side.other_collection is Collection.DATASETS

    def test_dataset_side(self):
        side = LinkSide.DATASET
        assert side.own_field == "dataset_id"
        assert side.other_field == "data_type_id"
        assert side.own_collection is Collection.DATASETS
        assert side.other_collection is Collection.DATA_TYPES

    def test_parse_from_string(self):
        assert LinkSide("dataType") is LinkSide.DATA_TYPE
