"""
Aggregation engine: per-player metrics derived from a game collection.

Everything here is a pure function of its inputs and safe to recompute on
every request. Games may be ``Game`` models or raw store documents; missing
numeric fields count as 0.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Sequence

from app.models.game import Game, Result
from app.models.goal import Goal
from app.models.stats import PlayerRank, PlayerSummary, RatedGame
from app.utils.dates import parse_match_date


BASE_RATING = Decimal("6.0")
GOAL_WEIGHT = Decimal("0.5")
ASSIST_WEIGHT = Decimal("0.3")
RESULT_ADJUSTMENT = {
    Result.WIN: Decimal("0.5"),
    Result.DRAW: Decimal("0"),
    Result.LOSS: Decimal("-0.5"),
}
MIN_RATING = Decimal("1.0")
MAX_RATING = Decimal("10.0")

# (minimum total goals, rank), highest first
RANK_THRESHOLDS = (
    (20, PlayerRank.LEGEND),
    (10, PlayerRank.STAR),
    (5, PlayerRank.STARTER),
)

RECENT_MATCHES_LIMIT = 5
DASHBOARD_GOALS_LIMIT = 3

_ONE_DECIMAL = Decimal("0.1")


def _field(game, name: str, default=0):
    if isinstance(game, dict):
        value = game.get(name)
    else:
        value = getattr(game, name, None)
    return default if value is None else value


def _round_one(value: Decimal) -> Decimal:
    return value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)


def _rating_decimal(game) -> Decimal:
    rating = BASE_RATING
    rating += GOAL_WEIGHT * _field(game, "goals")
    rating += ASSIST_WEIGHT * _field(game, "assists")
    result = _field(game, "result", None)
    if result is not None:
        rating += RESULT_ADJUSTMENT.get(Result(result), Decimal("0"))
    rating = min(MAX_RATING, max(MIN_RATING, rating))
    return _round_one(rating)


def match_rating(game) -> float:
    """
    Synthetic single-game performance score.

    6.0 base, +0.5 per goal, +0.3 per assist, +0.5 for a win, -0.5 for a
    loss, clamped to [1.0, 10.0] and rounded half-up to one decimal.

    Examples:
        >>> match_rating({"goals": 2, "assists": 1, "result": "Win"})
        7.8
    """
    return float(_rating_decimal(game))


def average_rating(games: Sequence) -> Optional[float]:
    """Mean of per-game ratings, or None when there are no games."""
    if not games:
        return None
    total = sum((_rating_decimal(g) for g in games), Decimal("0"))
    return float(_round_one(total / len(games)))


def player_rank(total_goals: int) -> PlayerRank:
    """Tier label for a cumulative goal count."""
    for threshold, rank in RANK_THRESHOLDS:
        if total_goals >= threshold:
            return rank
    return PlayerRank.ROOKIE


def total_of(games: Iterable, name: str) -> int:
    """Sum of a numeric field across games."""
    return sum(_field(g, name) for g in games)


def count_wins(games: Iterable) -> int:
    return sum(1 for g in games if _field(g, "result", None) == Result.WIN)


def win_rate(games: Sequence) -> float:
    """Percentage of games won; 0 for an empty collection."""
    if not games:
        return 0.0
    return count_wins(games) / len(games) * 100


def sort_by_date_desc(games: Iterable) -> list:
    """Most recent first; games on the same day keep their input order."""
    return sorted(
        games,
        key=lambda g: parse_match_date(_field(g, "date", None)),
        reverse=True,
    )


def recent_matches(games: Iterable, limit: int = RECENT_MATCHES_LIMIT) -> list:
    """The ``limit`` most recent games."""
    return sort_by_date_desc(games)[:limit]


def match_history(games: Iterable, result: Optional[Result] = None) -> list:
    """Games optionally filtered by result, most recent first."""
    if result is not None:
        games = [g for g in games if _field(g, "result", None) == result]
    return sort_by_date_desc(games)


def active_goals(goals: Iterable[Goal], limit: int = DASHBOARD_GOALS_LIMIT) -> list[Goal]:
    """First ``limit`` objectives that are not completed."""
    return [g for g in goals if not g.completed][:limit]


def summarize(games: Sequence[Game]) -> PlayerSummary:
    """Build the full aggregate summary for one player's games."""
    total_games = len(games)
    total_goals = total_of(games, "goals")
    goals_per_game = _round_one(Decimal(total_goals) / Decimal(total_games or 1))

    return PlayerSummary(
        total_games=total_games,
        total_goals=total_goals,
        total_assists=total_of(games, "assists"),
        total_minutes=total_of(games, "duration"),
        goals_per_game=float(goals_per_game),
        wins=count_wins(games),
        win_rate=win_rate(games),
        average_rating=average_rating(games),
        rank=player_rank(total_goals),
        recent_matches=[
            RatedGame(game=g, rating=match_rating(g)) for g in recent_matches(games)
        ],
    )
