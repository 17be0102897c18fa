"""
Dashboard Routes

GET /dashboard - Aggregate placement figures and application status breakdown
"""

from fastapi import APIRouter, Depends

from app.db.store import DataStore, get_store
from app.schemas.schemas import DashboardResponse
from app.services.dashboard_service import get_dashboard_stats

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(store: DataStore = Depends(get_store)):
    """
    Totals, placement rate, average package (LPA), top branch and the
    per-status application breakdown. Figures whose read failed are zero
    and listed in failed_reads.
    """
    return await get_dashboard_stats(store)
