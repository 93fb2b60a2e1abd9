"""Stats router - derived analytics for the current player."""
from fastapi import APIRouter, Depends

from app.database import get_database
from app.models.stats import ChartSeries, Dashboard, PlayerSummary
from app.routers.session import get_current_player_id
from app.services.stats_service import StatsService


router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/summary", response_model=PlayerSummary)
async def get_summary(
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """Totals, win rate, average rating, rank and recent matches."""
    return await StatsService(db).summary(player_id)


@router.get("/dashboard", response_model=Dashboard)
async def get_dashboard(
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """Summary plus up to three active objectives."""
    return await StatsService(db).dashboard(player_id)


@router.get("/charts", response_model=ChartSeries)
async def get_charts(
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """Result distribution, per-match contributions and passing trend."""
    return await StatsService(db).charts(player_id)
