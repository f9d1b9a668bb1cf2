"""Progress and dashboard endpoints, computed from the live store."""

from __future__ import annotations

from fastapi import APIRouter, Query

from datacatalog.api.deps import StoreDep
from datacatalog.schemas.report import DashboardStats, ProgressSummary

router = APIRouter()


@router.get("/progress", response_model=ProgressSummary)
async def progress(store: StoreDep):
    """How many data types have at least one dataset."""
    return store.progress_summary()


@router.get("/dashboard", response_model=DashboardStats)
async def dashboard(
    store: StoreDep,
    recent: int = Query(default=5, ge=0, le=50, description="Number of recent data types"),
):
    """Collection counts and the most recently created data types."""
    return store.dashboard_stats(recent=recent)
