"""
API v1 router - aggregates all endpoint routers.
"""

from fastapi import APIRouter

from datacatalog.api.v1.categories import router as categories_router
from datacatalog.api.v1.data_types import router as data_types_router
from datacatalog.api.v1.datasets import router as datasets_router
from datacatalog.api.v1.reports import router as reports_router
from datacatalog.api.v1.transfer import router as transfer_router

api_router = APIRouter()

# Include all routers with their prefixes and tags
api_router.include_router(data_types_router, prefix="/data-types", tags=["Data Types"])
api_router.include_router(datasets_router, prefix="/datasets", tags=["Datasets"])
api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(transfer_router, prefix="/transfer", tags=["Import/Export"])
api_router.include_router(reports_router, prefix="/reports", tags=["Reports"])
