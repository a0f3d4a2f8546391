"""FastAPI dependencies: hand the startup-built services to route functions."""
from dataclasses import dataclass
from typing import Any

from fastapi import Request

from scoreboard.application.leaderboard_maintainer import LeaderboardMaintainer
from scoreboard.application.ranking_view import RankingViewBuilder


@dataclass
class ScoreboardServices:
    """Store handles and services constructed once at process start."""

    ledger: Any
    leaderboard_store: Any
    word_repo: Any
    translation_repo: Any
    maintainer: LeaderboardMaintainer
    ranking: RankingViewBuilder
    persistence: str = "json"
    database: Any = None

    @classmethod
    def from_stores(
        cls,
        ledger,
        leaderboard_store,
        word_repo,
        translation_repo,
        leaderboard_size: int = 30,
        persistence: str = "json",
        database=None,
    ) -> "ScoreboardServices":
        return cls(
            ledger=ledger,
            leaderboard_store=leaderboard_store,
            word_repo=word_repo,
            translation_repo=translation_repo,
            maintainer=LeaderboardMaintainer(leaderboard_store),
            ranking=RankingViewBuilder(leaderboard_store, default_size=leaderboard_size),
            persistence=persistence,
            database=database,
        )


def get_services(request: Request) -> ScoreboardServices:
    return request.app.state.services
