"""
Import/export API endpoints.

- GET /transfer/export.json - Download the whole catalog as JSON
- GET /transfer/export.csv - Download the whole catalog as sectioned CSV
- POST /transfer/import - Replace the whole catalog with a JSON document
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import Response

from datacatalog.api.deps import CatalogDep
from datacatalog.core.config import get_settings
from datacatalog.schemas.common import ErrorResponse
from datacatalog.schemas.transfer import ImportResult

router = APIRouter()


def _attachment(extension: str) -> dict[str, str]:
    filename = f"{get_settings().export_filename}.{extension}"
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get("/export.json")
async def export_json(catalog: CatalogDep):
    """Export every collection as one re-importable JSON document."""
    content = await catalog.export_json()
    return Response(content=content, media_type="application/json", headers=_attachment("json"))


@router.get("/export.csv")
async def export_csv(catalog: CatalogDep):
    """Export every collection as labeled CSV sections."""
    content = await catalog.export_csv()
    return Response(content=content, media_type="text/csv", headers=_attachment("csv"))


@router.post(
    "/import",
    response_model=ImportResult,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed import document"},
        409: {"model": ErrorResponse, "description": "Another import is running"},
    },
)
async def import_catalog(catalog: CatalogDep, request: Request):
    """
    Replace the whole catalog with the posted JSON document.

    All existing data types, datasets, categories and links are deleted.
    The body is read raw so malformed files are reported with the catalog's
    own validation messages.
    """
    body = await request.body()
    return await catalog.import_data(body)
