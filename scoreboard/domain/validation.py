"""Validation guards for submitted round results."""
from scoreboard.domain.errors import ScoreValidationError
from scoreboard.domain.score import ScoreSubmission


class SubmissionRules:
    """Inclusive bounds for every submitted field."""

    NAME_MIN_LENGTH = 1
    NAME_MAX_LENGTH = 20
    SCORE_MIN = 0
    SCORE_MAX = 1_000_000
    ROUND_MIN = 1
    ROUND_MAX = 5
    TIME_MIN = 0
    TIME_MAX = 3_600


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_player_name(player_name) -> None:
    """Raises unless the name has 1-20 Unicode code points.

    ``len`` on ``str`` counts code points, so multi-byte scripts are measured
    by characters, not by their UTF-8 size.
    """
    if not isinstance(player_name, str) or not (
        SubmissionRules.NAME_MIN_LENGTH <= len(player_name) <= SubmissionRules.NAME_MAX_LENGTH
    ):
        raise ScoreValidationError("player_name", "Player name must be 1-20 characters")


def validate_score(score) -> None:
    if not _is_int(score) or not (SubmissionRules.SCORE_MIN <= score <= SubmissionRules.SCORE_MAX):
        raise ScoreValidationError("score", "Invalid score range")


def validate_round(round_number) -> None:
    if not _is_int(round_number) or not (
        SubmissionRules.ROUND_MIN <= round_number <= SubmissionRules.ROUND_MAX
    ):
        raise ScoreValidationError("round", "Invalid round")


def validate_time(time_seconds) -> None:
    if not _is_int(time_seconds) or not (
        SubmissionRules.TIME_MIN <= time_seconds <= SubmissionRules.TIME_MAX
    ):
        raise ScoreValidationError("time", "Invalid time")


def normalize_category(category) -> str | None:
    if category is None:
        return None
    category = str(category).strip()
    return category or None


def validate_submission(
    player_name,
    score,
    round_number,
    time_seconds,
    category=None,
) -> ScoreSubmission:
    """Check every rule in order and return the normalized submission.

    The first violated rule is reported. No side effects.
    """
    validate_player_name(player_name)
    validate_score(score)
    validate_round(round_number)
    validate_time(time_seconds)

    return ScoreSubmission(
        player_name=player_name,
        score=score,
        round=round_number,
        time=time_seconds,
        category=normalize_category(category),
    )
