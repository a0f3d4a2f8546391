"""Word catalog items and localized category metadata."""
from dataclasses import dataclass, asdict

from scoreboard.domain.enums import WordCategory, WordLanguage


@dataclass(frozen=True)
class WordItem:
    category: str
    word_id: str
    word: str
    round: int
    type: str
    language: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "WordItem":
        return cls(
            category=data["category"],
            word_id=data["word_id"],
            word=data["word"],
            round=int(data["round"]),
            type=data.get("type", "normal"),
            language=data["language"],
        )


@dataclass(frozen=True)
class TranslationItem:
    word_id: str
    language: str
    translation: str
    category: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TranslationItem":
        return cls(
            word_id=data["word_id"],
            language=data["language"],
            translation=data["translation"],
            category=data.get("category"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


class CategoryConfig:
    """Display metadata for each word category, per UI language."""

    ICONS = {
        WordCategory.BEGINNER_WORDS: "📚",
        WordCategory.INTERMEDIATE_WORDS: "🎓",
        WordCategory.BEGINNER_CONVERSATION: "💬",
        WordCategory.INTERMEDIATE_CONVERSATION: "🗣️",
    }

    LABELS = {
        WordLanguage.ENGLISH: {
            WordCategory.BEGINNER_WORDS: (
                "Beginner Words",
                "Basic words used in daily life",
            ),
            WordCategory.INTERMEDIATE_WORDS: (
                "Intermediate Words",
                "More complex and specialized words",
            ),
            WordCategory.BEGINNER_CONVERSATION: (
                "Beginner Conversation",
                "Short daily conversation expressions",
            ),
            WordCategory.INTERMEDIATE_CONVERSATION: (
                "Intermediate Conversation",
                "More complex and longer conversation expressions",
            ),
        },
        WordLanguage.JAPANESE: {
            WordCategory.BEGINNER_WORDS: (
                "初級単語",
                "日常生活でよく使う基本的な単語",
            ),
            WordCategory.INTERMEDIATE_WORDS: (
                "中級単語",
                "より複雑で専門的な単語",
            ),
            WordCategory.BEGINNER_CONVERSATION: (
                "初級会話",
                "日常的な短い会話表現",
            ),
            WordCategory.INTERMEDIATE_CONVERSATION: (
                "中級会話",
                "より複雑で長い会話表現",
            ),
        },
    }

    @staticmethod
    def describe(language: WordLanguage) -> list:
        labels = CategoryConfig.LABELS[language]
        return [
            {
                "id": category.value,
                "name": labels[category][0],
                "description": labels[category][1],
                "icon": CategoryConfig.ICONS[category],
            }
            for category in WordCategory
        ]
