"""Leaderboard entries and position ranking."""
from dataclasses import dataclass, asdict
from typing import Iterable, List


@dataclass(frozen=True)
class LeaderboardEntry:
    """A player's best known result. One per player name."""

    player_name: str
    score: int
    round: int
    category: str | None = None

    def beats(self, other: "LeaderboardEntry | None") -> bool:
        """True when this entry should replace ``other`` as the player's best."""
        return other is None or other.score < self.score

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "LeaderboardEntry":
        return cls(
            player_name=data["player_name"],
            score=int(data["score"]),
            round=int(data["round"]),
            category=data.get("category"),
        )


@dataclass(frozen=True)
class RankedEntry:
    entry: LeaderboardEntry
    rank: int

    def to_dict(self) -> dict:
        return {**self.entry.to_dict(), "rank": self.rank}


def ranking_key(entry: LeaderboardEntry) -> tuple:
    """Score descending, then player name ascending (code point order)."""
    return (-entry.score, entry.player_name)


def rank_entries(entries: Iterable[LeaderboardEntry], limit: int) -> List[RankedEntry]:
    """Sort, assign position ranks 1..N and keep the first ``limit`` entries.

    Ties never share a rank: equal scores are ordered by player name and
    each position increments the rank by one.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    ordered = sorted(entries, key=ranking_key)
    return [
        RankedEntry(entry=entry, rank=position)
        for position, entry in enumerate(ordered[:limit], start=1)
    ]
