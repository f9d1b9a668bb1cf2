"""Tests for model imports and table names."""

import pytest


class TestModelImports:
    """Test that all models can be imported correctly."""

    def test_import_base_model(self):
        """Test BaseTableModel can be imported."""
        from datacatalog.models import BaseTableModel

        assert BaseTableModel is not None

    def test_import_data_type(self):
        """Test DataType model can be imported."""
        from datacatalog.models import DataType

        assert DataType.__tablename__ == "data_types"

    def test_import_dataset(self):
        """Test Dataset model can be imported."""
        from datacatalog.models import Dataset

        assert Dataset.__tablename__ == "datasets"

    def test_import_category(self):
        """Test Category model can be imported."""
        from datacatalog.models import Category

        assert Category.__tablename__ == "categories"

    def test_import_link(self):
        """Test DataTypeDataset model can be imported."""
        from datacatalog.models import DataTypeDataset

        assert DataTypeDataset.__tablename__ == "data_type_datasets"

    def test_unknown_attribute(self):
        import datacatalog.models as models

        with pytest.raises(AttributeError):
            models.NotAModel  # noqa: B018


class TestLinkTable:
    """Test the link table constraints."""

    def test_pair_is_unique(self):
        from datacatalog.models import DataTypeDataset

        constraints = {c.name for c in DataTypeDataset.__table__.constraints}
        assert "uq_data_type_datasets_pair" in constraints

    def test_foreign_keys_use_public_ids(self):
        from datacatalog.models import DataTypeDataset

        targets = {fk.target_fullname for fk in DataTypeDataset.__table__.foreign_keys}
        assert targets == {"data_types.id", "datasets.id"}
