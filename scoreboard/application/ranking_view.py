"""Use case: build the ranked top-N leaderboard view."""
import logging
from typing import List

from scoreboard.domain.errors import LeaderboardReadError, StoreError
from scoreboard.domain.leaderboard import RankedEntry, rank_entries

log = logging.getLogger("scoreboard.leaderboard")

DEFAULT_TOP_N = 30


class RankingViewBuilder:
    """Reads the whole leaderboard store and ranks it on every call.

    Nothing is cached between calls. The scan is not a snapshot: writes that
    land while it runs may or may not be included.
    """

    def __init__(self, store, default_size: int = DEFAULT_TOP_N):
        self._store = store
        self._default_size = default_size

    def build_top_n(self, n: int | None = None) -> List[RankedEntry]:
        n = self._default_size if n is None else n
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        try:
            # Drain the scan completely before ranking: a partial read must
            # fail the request instead of producing a shorter board.
            entries = list(self._store.scan())
        except StoreError as exc:
            log.error("Failed to fetch leaderboard: %s", exc)
            raise LeaderboardReadError(str(exc)) from exc
        return rank_entries(entries, n)
