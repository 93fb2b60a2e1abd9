"""Stats service - analytics views over a player's records."""
from app.models.stats import ChartSeries, Dashboard, PlayerSummary
from app.services.game_service import GameService
from app.services.goal_service import GoalService
from app.utils.analytics import active_goals, summarize
from app.utils.charts import build_chart_series


class StatsService:
    """Computes derived views; holds no state between calls."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.game_service = GameService(db)
        self.goal_service = GoalService(db)

    async def summary(self, player_id: str) -> PlayerSummary:
        games = await self.game_service.list_games(player_id)
        return summarize(games)

    async def dashboard(self, player_id: str) -> Dashboard:
        """Summary plus the first few active objectives."""
        games = await self.game_service.list_games(player_id)
        goals = await self.goal_service.list_goals(player_id)
        return Dashboard(summary=summarize(games), active_goals=active_goals(goals))

    async def charts(self, player_id: str) -> ChartSeries:
        games = await self.game_service.list_games(player_id)
        return build_chart_series(games)
