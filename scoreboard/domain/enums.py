"""Enums and value objects used across the domain."""
from enum import Enum


class WordCategory(str, Enum):
    BEGINNER_WORDS = "beginner_words"
    INTERMEDIATE_WORDS = "intermediate_words"
    BEGINNER_CONVERSATION = "beginner_conversation"
    INTERMEDIATE_CONVERSATION = "intermediate_conversation"

    @staticmethod
    def values() -> list:
        return [c.value for c in WordCategory]


class WordLanguage(str, Enum):
    """Languages the word catalog is partitioned by."""

    JAPANESE = "jp"
    ENGLISH = "en"

    @staticmethod
    def values() -> list:
        return [lang.value for lang in WordLanguage]


class TranslationLanguage(str, Enum):
    """Target languages accepted by the translation lookup."""

    JAPANESE = "jp"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    CHINESE = "zh"
    KOREAN = "ko"

    @staticmethod
    def values() -> list:
        return [lang.value for lang in TranslationLanguage]


class WordType(str, Enum):
    NORMAL = "normal"
    BONUS = "bonus"
    DEBUFF = "debuff"


class UpdateOutcome(str, Enum):
    """Result of considering a score against a player's recorded best."""

    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"
