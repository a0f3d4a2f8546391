"""Seed the word catalog and translations from JSON files."""
import json
import logging
import os

from sqlalchemy import Table, delete, func, insert, select

from scoreboard.domain.catalog import TranslationItem, WordItem
from scoreboard.infrastructure.repositories.json_files import write_json_atomic

log = logging.getLogger("scoreboard.seed")

WORDS_SEED_FILE = "words.json"
TRANSLATIONS_SEED_FILE = "translations.json"


def load_seed(json_path: str, item_cls) -> list:
    """Parse a seed file into dicts, validating each row through ``item_cls``."""
    if not os.path.exists(json_path):
        return []
    with open(json_path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return [item_cls.from_dict(item).to_dict() for item in raw]


def seed_table(session_factory, table: Table, rows: list) -> int:
    """Load ``rows`` into ``table``.

    Seeds when empty OR when the table count differs from the seed count.
    Truncates and re-seeds on mismatch. Returns the number of rows seeded
    (0 if already up to date).
    """
    if not rows:
        return 0

    with session_factory() as session:
        existing = session.execute(select(func.count()).select_from(table)).scalar_one()
        if existing == len(rows):
            return 0

        if existing > 0:
            log.info(
                "%s has %d rows, seed has %d. Truncating and re-seeding.",
                table.name, existing, len(rows),
            )
            session.execute(delete(table))

        session.execute(insert(table), rows)
        session.commit()
        return len(rows)


def seed_json_file(target_path: str, rows: list) -> int:
    """Write ``rows`` to a JSON-backend catalog file that does not exist yet."""
    if not rows or os.path.exists(target_path):
        return 0
    write_json_atomic(target_path, rows)
    return len(rows)


def seed_catalog(seed_dir: str, words_target, translations_target) -> dict:
    """Seed both catalogs from ``seed_dir``.

    Each target is either a ``(session_factory, table)`` pair for SQL or a
    file path for the JSON backend.
    """
    words = load_seed(os.path.join(seed_dir, WORDS_SEED_FILE), WordItem)
    translations = load_seed(os.path.join(seed_dir, TRANSLATIONS_SEED_FILE), TranslationItem)

    counts = {}
    for name, target, rows in (
        ("words", words_target, words),
        ("translations", translations_target, translations),
    ):
        if isinstance(target, str):
            counts[name] = seed_json_file(target, rows)
        else:
            counts[name] = seed_table(target[0], target[1], rows)
        if counts[name]:
            log.info("Seeded %d %s.", counts[name], name)
    return counts
