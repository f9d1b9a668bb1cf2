"""Tests for BaseTableModel and model inheritance."""

from datetime import datetime

from sqlmodel import SQLModel

from datacatalog.models.base import BaseTableModel, TimestampedTableModel, new_id, utc_now
from datacatalog.models.category import Category
from datacatalog.models.data_type import DataType


class TestUtcNow:
    """Test the utc_now helper function."""

    def test_returns_datetime(self):
        """Test utc_now returns a datetime object."""
        result = utc_now()
        assert isinstance(result, datetime)

    def test_has_timezone(self):
        """Test utc_now returns timezone-aware datetime."""
        result = utc_now()
        assert result.tzinfo is not None


class TestNewId:
    """Test public id generation."""

    def test_is_hex_string(self):
        value = new_id()
        assert isinstance(value, str)
        assert len(value) == 32
        int(value, 16)

    def test_ids_are_unique(self):
        assert len({new_id() for _ in range(100)}) == 100


class TestBaseTableModel:
    """Test BaseTableModel base class features."""

    def test_is_sqlmodel_subclass(self):
        """Test BaseTableModel inherits from SQLModel."""
        assert issubclass(BaseTableModel, SQLModel)

    def test_has_internal_and_public_keys(self):
        """Test BaseTableModel has the pk column and the public id."""
        fields = BaseTableModel.model_fields
        assert "pk" in fields
        assert "id" in fields

    def test_timestamped_adds_created_at(self):
        assert "created_at" in TimestampedTableModel.model_fields
        assert "created_at" not in BaseTableModel.model_fields

    def test_id_generated_when_missing(self):
        """Test a new record gets a public id without a database round trip."""
        category = Category(name="Transport")
        assert category.id
        assert category.pk is None

    def test_supplied_id_kept(self):
        category = Category(id="cat-1", name="Transport")
        assert category.id == "cat-1"

    def test_data_type_defaults(self):
        data_type = DataType(name="Roads", category="Transport")
        assert data_type.priority == "Unassigned"
        assert data_type.completion_status == "Not Started"
        assert data_type.rdls_can_handle == "Unassigned"
        assert data_type.description == ""
        assert data_type.created_at.tzinfo is not None
