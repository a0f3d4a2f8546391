"""Use case: look up a word's translation."""
from scoreboard.domain.enums import TranslationLanguage
from scoreboard.domain.errors import TranslationNotFoundError


def lookup_translation(translation_repo, word_id: str, language: str | None) -> str:
    """Return the translation string.

    Raises ValueError for a missing word id or an unsupported language and
    TranslationNotFoundError when no translation exists.
    """
    if not word_id:
        raise ValueError("word_id parameter is required")
    if not language:
        raise ValueError("language query parameter is required")
    if language not in TranslationLanguage.values():
        raise ValueError("Invalid language parameter")

    item = translation_repo.get(word_id, language)
    if item is None:
        raise TranslationNotFoundError(word_id, language)
    return item.translation
