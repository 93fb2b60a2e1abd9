"""Chart series builder: row-oriented views over a game collection."""
from typing import Sequence

from app.models.game import Game, Result
from app.models.stats import ChartSeries, ContributionPoint, PassingPoint, ResultShare


RESULT_LABELS = (
    (Result.WIN, "Wins"),
    (Result.DRAW, "Draws"),
    (Result.LOSS, "Losses"),
)

SHORT_LABEL_LENGTH = 3


def short_label(opponent: str) -> str:
    """First three characters of the opponent name, upper-cased."""
    return opponent[:SHORT_LABEL_LENGTH].upper()


def result_distribution(games: Sequence[Game]) -> list[ResultShare]:
    """Win/draw/loss counts, leaving out empty categories."""
    shares = [
        ResultShare(name=label, value=sum(1 for g in games if g.result == result))
        for result, label in RESULT_LABELS
    ]
    return [share for share in shares if share.value > 0]


def contribution_series(games: Sequence[Game]) -> list[ContributionPoint]:
    """One row per game, in collection order."""
    return [
        ContributionPoint(
            opponent=short_label(g.opponent),
            full_opponent=g.opponent,
            goals=g.goals or 0,
            assists=g.assists or 0,
            passes=g.passes or 0,
        )
        for g in games
    ]


def passing_trend(games: Sequence[Game]) -> list[PassingPoint]:
    """Passes per game, in collection order."""
    return [PassingPoint(passes=g.passes or 0) for g in games]


def build_chart_series(games: Sequence[Game]) -> ChartSeries:
    return ChartSeries(
        result_distribution=result_distribution(games),
        contributions=contribution_series(games),
        passing_trend=passing_trend(games),
    )
