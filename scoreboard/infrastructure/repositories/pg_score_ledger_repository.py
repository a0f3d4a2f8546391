"""SQL-backed score ledger."""
from sqlalchemy import Table, insert
from sqlalchemy.exc import SQLAlchemyError

from scoreboard.domain.errors import StoreError
from scoreboard.domain.score import ScoreEvent


class PgScoreLedgerRepository:
    """Append-only score events via PostgreSQL."""

    def __init__(self, session_factory, table: Table):
        self._sf = session_factory
        self._table = table

    def append(self, event: ScoreEvent) -> None:
        try:
            with self._sf() as session:
                session.execute(insert(self._table).values(**event.to_dict()))
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to insert score event: {exc}") from exc
