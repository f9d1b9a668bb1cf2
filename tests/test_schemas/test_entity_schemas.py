"""Tests for data type, dataset and category schemas."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from datacatalog.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from datacatalog.schemas.data_type import DataTypeCreate, DataTypeRead, DataTypeUpdate
from datacatalog.schemas.dataset import DatasetCreate, DatasetRead, DatasetSummary, DatasetUpdate
from datacatalog.schemas.enums import CompletionStatus, Priority, RdlsStatus
from datacatalog.schemas.validators import empty_if_none, parse_bool_field


class TestValidators:
    """Tests for the shared field validators."""

    def test_empty_if_none(self):
        assert empty_if_none(None) == ""
        assert empty_if_none("text") == "text"

    @pytest.mark.parametrize("value", ["true", "Yes", " 1 "])
    def test_parse_bool_truthy(self, value):
        assert parse_bool_field(value) is True

    @pytest.mark.parametrize("value", ["false", "no", "0", ""])
    def test_parse_bool_falsy(self, value):
        assert parse_bool_field(value) is False

    def test_parse_bool_passthrough(self):
        assert parse_bool_field(True) is True


class TestDataTypeSchemas:
    """Tests for DataType schemas."""

    def test_minimal_create(self):
        """Test only the name is required."""
        data = DataTypeCreate(name="Roads")
        assert data.category == ""
        assert data.priority == Priority.UNASSIGNED
        assert data.completion_status == CompletionStatus.NOT_STARTED
        assert data.rdls_can_handle == RdlsStatus.UNASSIGNED
        assert data.linked_dataset_ids == []

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            DataTypeCreate(name="")

    def test_null_text_becomes_empty(self):
        """Test nulls from older exports are read as empty strings."""
        data = DataTypeCreate(name="Roads", description=None, notes=None, category=None)
        assert data.description == ""
        assert data.notes == ""
        assert data.category == ""

    def test_invalid_priority_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            DataTypeCreate(name="Roads", priority="Urgent")
        assert "priority" in str(exc_info.value)

    def test_status_display_spelling(self):
        data = DataTypeCreate(name="Roads", completion_status="In Progress")
        assert data.completion_status is CompletionStatus.IN_PROGRESS

    def test_update_all_optional(self):
        update = DataTypeUpdate()
        assert update.model_dump(exclude_unset=True) == {}
        assert update.linked_dataset_ids is None

    def test_update_explicit_empty_selection(self):
        update = DataTypeUpdate(linked_dataset_ids=[])
        assert update.linked_dataset_ids == []

    def test_read_requires_id_and_created_at(self):
        with pytest.raises(ValidationError):
            DataTypeRead(name="Roads")

        data = DataTypeRead(id="T1", name="Roads", created_at=datetime(2024, 1, 1, tzinfo=UTC))
        assert data.id == "T1"


class TestDatasetSchemas:
    """Tests for Dataset schemas."""

    def test_minimal_create(self):
        data = DatasetCreate(name="OSM")
        assert data.is_validated is False
        assert data.is_primary_example is False
        assert data.linked_data_type_ids == []

    def test_string_flags_parsed(self):
        """Test hand-edited exports with string booleans are accepted."""
        data = DatasetCreate(name="OSM", is_validated="true", is_primary_example=None)
        assert data.is_validated is True
        assert data.is_primary_example is False

    def test_url_length_limit(self):
        with pytest.raises(ValidationError):
            DatasetCreate(name="OSM", url="x" * 1001)

    def test_update_partial(self):
        update = DatasetUpdate(license="ODbL")
        assert update.model_dump(exclude_unset=True) == {"license": "ODbL"}

    def test_summary_extends_read(self):
        read = DatasetRead(id="D1", name="OSM", created_at=datetime(2024, 1, 1, tzinfo=UTC))
        summary = DatasetSummary(**read.model_dump(), link_count=3)
        assert summary.link_count == 3
        assert summary.name == "OSM"


class TestCategorySchemas:
    """Tests for Category schemas."""

    def test_create(self):
        category = CategoryCreate(name="Transport")
        assert category.description == ""

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            CategoryCreate(name="")

    def test_update_optional(self):
        assert CategoryUpdate().model_dump(exclude_unset=True) == {}

    def test_read_null_description(self):
        category = CategoryRead(id="C1", name="Transport", description=None)
        assert category.description == ""
