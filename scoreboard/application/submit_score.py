"""Use case: validate, record and rank a submitted round result."""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from scoreboard.application.leaderboard_maintainer import LeaderboardMaintainer
from scoreboard.domain.enums import UpdateOutcome
from scoreboard.domain.errors import LedgerWriteError, StoreError
from scoreboard.domain.score import ScoreEvent, ScoreSubmission
from scoreboard.domain.validation import validate_submission

log = logging.getLogger("scoreboard.submission")


@dataclass(frozen=True)
class SubmissionResult:
    submission: ScoreSubmission
    event: ScoreEvent
    leaderboard_outcome: UpdateOutcome


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def submit_score(
    player_name,
    score,
    round_number,
    time_seconds,
    category=None,
    *,
    ledger,
    maintainer: LeaderboardMaintainer,
    clock: Callable[[], datetime] = _utcnow,
) -> SubmissionResult:
    """
    Process one submission: validate -> ledger -> leaderboard.

    Raises ScoreValidationError before anything is written.
    Raises LedgerWriteError if the ledger does not record the event; the
    leaderboard is not touched in that case.
    A leaderboard failure is reported in the result, never raised.
    """
    submission = validate_submission(player_name, score, round_number, time_seconds, category)

    event = ScoreEvent.from_submission(submission, recorded_at=clock())
    try:
        ledger.append(event)
    except StoreError as exc:
        log.error("Failed to save score for player %s: %s", submission.player_name, exc)
        raise LedgerWriteError(str(exc)) from exc

    outcome = maintainer.consider_update(
        submission.player_name,
        submission.score,
        submission.round,
        submission.category,
    )
    log.info(
        "Score submitted: player=%s score=%d round=%d time=%d category=%s leaderboard=%s",
        submission.player_name, submission.score, submission.round,
        submission.time, submission.category, outcome.value,
    )
    return SubmissionResult(submission=submission, event=event, leaderboard_outcome=outcome)
