"""SQL-backed translation lookup."""
from sqlalchemy import Table, select
from sqlalchemy.exc import SQLAlchemyError

from scoreboard.domain.catalog import TranslationItem
from scoreboard.domain.errors import StoreError


class PgTranslationRepository:
    def __init__(self, session_factory, table: Table):
        self._sf = session_factory
        self._table = table

    def get(self, word_id: str, language: str) -> TranslationItem | None:
        table = self._table
        stmt = select(table).where(table.c.word_id == word_id).where(table.c.language == language)
        try:
            with self._sf() as session:
                row = session.execute(stmt).mappings().first()
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to get translation: {exc}") from exc
        return TranslationItem.from_dict(row) if row else None
