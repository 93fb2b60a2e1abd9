"""Integration tests for analytics endpoints."""
import pytest

from conftest import game_doc, goal_doc


@pytest.mark.asyncio
class TestStats:
    """Tests for derived views."""

    async def test_summary(self, app_client, player_headers, mock_db):
        """Test summary totals and rating."""
        mock_db["games"].find.return_value.to_list.return_value = [
            game_doc(goals=2, assists=1, result="Win"),
            game_doc(goals=0, assists=0, result="Draw"),
        ]

        response = await app_client.get("/stats/summary", headers=player_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total_games"] == 2
        assert data["win_rate"] == 50
        assert data["average_rating"] == 6.9
        assert data["rank"] == "Rookie"

    async def test_summary_no_games(self, app_client, player_headers):
        """Test average rating is null without games."""
        response = await app_client.get("/stats/summary", headers=player_headers)

        data = response.json()
        assert data["average_rating"] is None
        assert data["win_rate"] == 0

    async def test_dashboard(self, app_client, player_headers, mock_db):
        """Test dashboard includes active objectives."""
        mock_db["goals"].find.return_value.to_list.return_value = [
            goal_doc(title="Assists", current_value=3, target_value=10)
        ]

        response = await app_client.get("/stats/dashboard", headers=player_headers)

        assert response.status_code == 200
        assert response.json()["active_goals"][0]["progress_percent"] == 30

    async def test_charts_omit_empty_results(self, app_client, player_headers, mock_db):
        """Test the result distribution has no zero slices."""
        mock_db["games"].find.return_value.to_list.return_value = [
            game_doc(result="Win", opponent="Red Lions FC"),
            game_doc(result="Loss", opponent="Blue Hawks"),
        ]

        response = await app_client.get("/stats/charts", headers=player_headers)

        data = response.json()
        assert [s["name"] for s in data["result_distribution"]] == ["Wins", "Losses"]
        assert data["contributions"][0]["opponent"] == "RED"
        assert data["contributions"][0]["full_opponent"] == "Red Lions FC"
        assert data["passing_trend"] == [{"passes": 20}, {"passes": 20}]
