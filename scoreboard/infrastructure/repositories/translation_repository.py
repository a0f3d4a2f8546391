"""Translation lookup persistence (JSON file, read-only)."""
from scoreboard.domain.catalog import TranslationItem
from scoreboard.infrastructure.repositories.json_files import read_json


class TranslationRepository:
    """File-based translations keyed by (word_id, language)."""

    def __init__(self, data_path: str = "data/translations.json"):
        self._data_path = data_path

    def get(self, word_id: str, language: str) -> TranslationItem | None:
        for row in read_json(self._data_path, default=[]):
            if row.get("word_id") == word_id and row.get("language") == language:
                return TranslationItem.from_dict(row)
        return None
