"""Leaderboard persistence (JSON file keyed by player name)."""
import threading
from typing import Iterator

from scoreboard.domain.errors import StoreError
from scoreboard.domain.leaderboard import LeaderboardEntry
from scoreboard.infrastructure.repositories.json_files import read_json, write_json_atomic


def _decode(row) -> LeaderboardEntry:
    try:
        return LeaderboardEntry.from_dict(row)
    except (KeyError, TypeError, ValueError) as exc:
        raise StoreError(f"malformed leaderboard row {row!r}: {exc}") from exc


class LeaderboardRepository:
    """File-based best-score store.

    The conditional write reads, compares and replaces the whole file under a
    per-instance lock, so it is atomic within one process.
    """

    def __init__(self, data_path: str = "data/leaderboard.json"):
        self._data_path = data_path
        self._lock = threading.Lock()

    def get(self, player_name: str) -> LeaderboardEntry | None:
        row = self._load().get(player_name)
        return _decode(row) if row is not None else None

    def put_if_higher(self, entry: LeaderboardEntry) -> bool:
        """Store ``entry`` unless the player already has an equal or higher score.

        Returns True when the entry was written.
        """
        with self._lock:
            rows = self._load()
            current = rows.get(entry.player_name)
            if not entry.beats(_decode(current) if current is not None else None):
                return False
            rows[entry.player_name] = entry.to_dict()
            write_json_atomic(self._data_path, rows)
            return True

    def scan(self) -> Iterator[LeaderboardEntry]:
        """Yield every entry, in file order."""
        for row in self._load().values():
            yield _decode(row)

    def _load(self) -> dict:
        rows = read_json(self._data_path, default={})
        if not isinstance(rows, dict):
            raise StoreError(f"leaderboard file holds {type(rows).__name__}, expected an object")
        return rows
