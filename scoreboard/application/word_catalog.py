"""Use cases: list word categories and fetch words for a round."""
from typing import List

from scoreboard.domain.catalog import CategoryConfig, WordItem
from scoreboard.domain.enums import WordCategory, WordLanguage
from scoreboard.domain.validation import SubmissionRules

DEFAULT_LANGUAGE = WordLanguage.JAPANESE.value


def parse_round(round_param: str) -> int:
    """Parse a path round parameter; raises ValueError outside 1..5."""
    try:
        round_number = int(round_param)
    except (TypeError, ValueError):
        raise ValueError("Invalid round parameter")
    if not SubmissionRules.ROUND_MIN <= round_number <= SubmissionRules.ROUND_MAX:
        raise ValueError("Invalid round parameter")
    return round_number


def fetch_words(word_repo, category: str, round_param: str, language: str | None = None) -> List[WordItem]:
    """
    Validate the partition key and query the catalog.
    Raises ValueError on an invalid category, language or round.
    Backend failures propagate as StoreError.
    """
    if category not in WordCategory.values():
        raise ValueError("Invalid category parameter")
    language = language or DEFAULT_LANGUAGE
    if language not in WordLanguage.values():
        raise ValueError("Invalid language parameter")
    round_number = parse_round(round_param)
    return word_repo.find(category, round_number, language)


def list_categories(language: str | None = None) -> list:
    """Localized category metadata; unknown languages fall back to Japanese."""
    try:
        ui_language = WordLanguage(language or DEFAULT_LANGUAGE)
    except ValueError:
        ui_language = WordLanguage.JAPANESE
    return CategoryConfig.describe(ui_language)
