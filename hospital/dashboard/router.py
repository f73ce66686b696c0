"""
Dashboard Router - Overview statistics for the hospital front page.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from ..dependencies import get_storage
from ..storage import Storage
from .schemas import DashboardStats
from .service import get_dashboard_stats

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(
    date: Optional[str] = Query(None, description="Day to count appointments for (YYYY-MM-DD), defaults to today"),
    storage: Storage = Depends(get_storage)
):
    """
    Get summary counts for the dashboard
    """
    return get_dashboard_stats(storage, date)
