"""SQL-backed word catalog."""
from typing import List

from sqlalchemy import Table, select
from sqlalchemy.exc import SQLAlchemyError

from scoreboard.domain.catalog import WordItem
from scoreboard.domain.errors import StoreError


class PgWordRepository:
    def __init__(self, session_factory, table: Table):
        self._sf = session_factory
        self._table = table

    def find(self, category: str, round_number: int, language: str) -> List[WordItem]:
        table = self._table
        stmt = (
            select(table)
            .where(table.c.category == category)
            .where(table.c.round == round_number)
            .where(table.c.language == language)
            .order_by(table.c.word_id)
        )
        try:
            with self._sf() as session:
                rows = session.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to query words table: {exc}") from exc
        return [WordItem.from_dict(r) for r in rows]
