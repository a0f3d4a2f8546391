"""Word catalog persistence (JSON file, read-only)."""
from typing import List

from scoreboard.domain.catalog import WordItem
from scoreboard.infrastructure.repositories.json_files import read_json


class WordRepository:
    """File-based word catalog."""

    def __init__(self, data_path: str = "data/words.json"):
        self._data_path = data_path

    def find(self, category: str, round_number: int, language: str) -> List[WordItem]:
        items = [WordItem.from_dict(row) for row in read_json(self._data_path, default=[])]
        return [
            w for w in items
            if w.category == category and w.round == round_number and w.language == language
        ]
