"""
Common utilities for API routes.

Provides helper functions to reduce boilerplate in route handlers.
"""

from __future__ import annotations

from typing import NoReturn, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel

from datacatalog.services.base import BaseService

T = TypeVar("T", bound=BaseModel)


def raise_not_found(entity_name: str) -> NoReturn:
    """Raise a 404 HTTPException for a not found entity."""
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity_name} not found",
    )


async def get_or_404(service: BaseService[T], record_id: str) -> T:
    """
    Get a record by id or raise 404.

    The live store is consulted first; the backend answers when the
    snapshot has not caught up yet.

    Usage:
        dataset = await get_or_404(catalog.datasets, dataset_id)
    """
    record = service.get(record_id)
    if record is None:
        record = await service.fetch(record_id)
    if record is None:
        raise_not_found(service.entity_name)
    return record
