"""Derived analytics view models."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from app.models.game import Game
from app.models.goal import Goal


class PlayerRank(str, Enum):
    """Coarse tier label derived from cumulative goals."""

    ROOKIE = "Rookie"
    STARTER = "Starter"
    STAR = "Star"
    LEGEND = "Legend"


class RatedGame(BaseModel):
    """A game together with its match rating."""

    game: Game
    rating: float


class PlayerSummary(BaseModel):
    """Per-player aggregate metrics."""

    total_games: int
    total_goals: int
    total_assists: int
    total_minutes: int
    goals_per_game: float
    wins: int
    win_rate: float
    average_rating: Optional[float] = None  # None when no games logged
    rank: PlayerRank
    recent_matches: list[RatedGame]


class Dashboard(BaseModel):
    """Summary plus the first few active objectives."""

    summary: PlayerSummary
    active_goals: list[Goal]


class ResultShare(BaseModel):
    """One slice of the result distribution."""

    name: str
    value: int


class ContributionPoint(BaseModel):
    """Per-match contribution row."""

    opponent: str
    full_opponent: str
    goals: int
    assists: int
    passes: int


class PassingPoint(BaseModel):
    """Per-match passing row."""

    passes: int


class ChartSeries(BaseModel):
    """All chart series for a player's games."""

    result_distribution: list[ResultShare]
    contributions: list[ContributionPoint]
    passing_trend: list[PassingPoint]
