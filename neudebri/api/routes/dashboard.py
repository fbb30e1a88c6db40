"""Dashboard aggregate endpoint."""

from fastapi import APIRouter, Depends

from neudebri.core.dependencies import Identity, get_identity, get_stats_service
from neudebri.schemas import DashboardStats
from neudebri.services import StatsService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    identity: Identity = Depends(get_identity),
    stats: StatsService = Depends(get_stats_service),
):
    """Counters for the dashboard cards, scoped to ``userId``/``role``."""
    return stats.get_dashboard_stats(identity.user_id, identity.role)
