"""
Dashboard statistics endpoint for API v1.
"""

from fastapi import APIRouter, Depends

from portfolio_api.app.api.deps import get_storage
from portfolio_api.app.core.security import get_current_user
from portfolio_api.app.schemas.stats import DashboardStats
from portfolio_api.app.services.storage import Storage

router = APIRouter()


@router.get("", response_model=DashboardStats)
async def get_stats(
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> DashboardStats:
    """Return record totals and the unread message count (admin only)."""
    return await storage.statistics.overview()
