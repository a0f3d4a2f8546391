"""Score submission value objects."""
from dataclasses import dataclass, asdict
from datetime import datetime, timezone

SCORE_TYPE_GAME = "game"


@dataclass(frozen=True)
class ScoreSubmission:
    """A round result that passed validation."""

    player_name: str
    score: int
    round: int
    time: int
    category: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ScoreEvent:
    """Immutable ledger record of one submission.

    ``timestamp`` is assigned by the server in unix seconds. It is not
    guaranteed to be monotonic across requests.
    """

    player_name: str
    score: int
    round: int
    time: int
    category: str | None
    timestamp: int
    score_type: str = SCORE_TYPE_GAME

    @classmethod
    def from_submission(cls, submission: ScoreSubmission, recorded_at: datetime | None = None) -> "ScoreEvent":
        recorded_at = recorded_at or datetime.now(timezone.utc)
        return cls(
            player_name=submission.player_name,
            score=submission.score,
            round=submission.round,
            time=submission.time,
            category=submission.category,
            timestamp=int(recorded_at.timestamp()),
        )

    def to_dict(self) -> dict:
        return asdict(self)
