"""SQL-backed leaderboard repository."""
from typing import Iterator, List

from sqlalchemy import Table, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError

from scoreboard.domain.errors import StoreError
from scoreboard.domain.leaderboard import LeaderboardEntry

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class PgLeaderboardRepository:
    """Best-score persistence via PostgreSQL (SQLite in tests)."""

    def __init__(self, session_factory, table: Table, page_size: int = 100):
        self._sf = session_factory
        self._table = table
        self._page_size = page_size

    def get(self, player_name: str) -> LeaderboardEntry | None:
        try:
            with self._sf() as session:
                row = session.execute(
                    select(self._table).where(self._table.c.player_name == player_name)
                ).mappings().first()
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to get leaderboard entry: {exc}") from exc
        return LeaderboardEntry.from_dict(row) if row else None

    def put_if_higher(self, entry: LeaderboardEntry) -> bool:
        """Single-statement conditional upsert.

        ``INSERT .. ON CONFLICT (player_name) DO UPDATE .. WHERE stored < new``:
        the comparison runs inside the database, so concurrent writers cannot
        replace a higher score with a lower one. Returns True when a row was
        inserted or updated.
        """
        table = self._table
        try:
            with self._sf() as session:
                dialect = session.get_bind().dialect.name
                insert = _UPSERT_DIALECTS.get(dialect)
                if insert is None:
                    raise StoreError(f"conditional upsert not supported on {dialect}")
                stmt = insert(table).values(**entry.to_dict())
                stmt = stmt.on_conflict_do_update(
                    index_elements=[table.c.player_name],
                    set_={
                        "score": stmt.excluded.score,
                        "round": stmt.excluded.round,
                        "category": stmt.excluded.category,
                    },
                    where=table.c.score < stmt.excluded.score,
                )
                result = session.execute(stmt)
                session.commit()
                return result.rowcount > 0
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to write leaderboard entry: {exc}") from exc

    def scan(self) -> Iterator[LeaderboardEntry]:
        """Yield every entry, one keyset page at a time until exhausted."""
        after = None
        while True:
            page = self._read_page(after)
            yield from page
            if len(page) < self._page_size:
                return
            after = page[-1].player_name

    def _read_page(self, after: str | None) -> List[LeaderboardEntry]:
        table = self._table
        stmt = select(table).order_by(table.c.player_name).limit(self._page_size)
        if after is not None:
            stmt = stmt.where(table.c.player_name > after)
        try:
            with self._sf() as session:
                rows = session.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to scan leaderboard table: {exc}") from exc
        return [LeaderboardEntry.from_dict(r) for r in rows]
