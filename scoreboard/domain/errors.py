"""Typed failures raised across component boundaries."""


class ScoreValidationError(ValueError):
    """A submitted result broke an input rule. Client-caused, never retried."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class StoreError(RuntimeError):
    """A persistence backend failed to complete an operation."""


class LedgerWriteError(RuntimeError):
    """The score ledger did not record the event. Fatal to the submission."""


class LeaderboardReadError(RuntimeError):
    """The leaderboard could not be scanned in full."""


class TranslationNotFoundError(LookupError):
    def __init__(self, word_id: str, language: str):
        super().__init__(f"translation not found for word_id: {word_id}, language: {language}")
        self.word_id = word_id
        self.language = language
