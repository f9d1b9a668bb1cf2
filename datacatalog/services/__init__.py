"""
Services package - business logic layer.

Re-exports all service classes for convenient importing.
"""

from datacatalog.services.base import BaseService
from datacatalog.services.category_service import CategoryService
from datacatalog.services.data_type_service import DataTypeService
from datacatalog.services.dataset_service import DatasetService
from datacatalog.services.link_service import LinkService
from datacatalog.services.transfer_service import TransferService

__all__ = [
    "BaseService",
    "CategoryService",
    "DataTypeService",
    "DatasetService",
    "LinkService",
    "TransferService",
]
