"""Keeps each player's leaderboard entry at their best validated score."""
import logging

from scoreboard.domain.enums import UpdateOutcome
from scoreboard.domain.errors import StoreError
from scoreboard.domain.leaderboard import LeaderboardEntry

log = logging.getLogger("scoreboard.leaderboard")


class LeaderboardMaintainer:
    """Compare-and-possibly-replace against the leaderboard store.

    The store must provide ``get(player_name)`` and ``put_if_higher(entry)``.
    The read avoids a write when the stored best already wins; the write
    itself is conditional inside the store, so a concurrent higher score is
    never overwritten.
    """

    def __init__(self, store):
        self._store = store

    def consider_update(
        self,
        player_name: str,
        score: int,
        round_number: int,
        category: str | None = None,
    ) -> UpdateOutcome:
        """Never raises for persistence failures; they come back as FAILED."""
        candidate = LeaderboardEntry(
            player_name=player_name,
            score=score,
            round=round_number,
            category=category,
        )
        try:
            current = self._store.get(player_name)
            if not candidate.beats(current):
                log.debug("Kept best %d for %s (candidate %d)", current.score, player_name, score)
                return UpdateOutcome.SKIPPED
            written = self._store.put_if_higher(candidate)
        except StoreError as exc:
            log.error("Failed to update leaderboard for player %s: %s", player_name, exc)
            return UpdateOutcome.FAILED

        if not written:
            # A concurrent submission stored an equal or higher score first.
            log.info("Leaderboard write for %s superseded by a concurrent best", player_name)
            return UpdateOutcome.SKIPPED
        log.info("New best %d for %s", score, player_name)
        return UpdateOutcome.UPDATED
