"""Database engine and session factory.

One ``Database`` is constructed at startup and handed to every SQL
repository. Repositories open sessions exactly like a bare sessionmaker:

    with database() as session:
        ...
"""
import logging
from contextlib import contextmanager

from sqlalchemy import MetaData, create_engine
from sqlalchemy.orm import sessionmaker

from scoreboard.config import TableNames
from scoreboard.infrastructure.database.models import ScoreboardTables, define_tables

log = logging.getLogger("scoreboard.startup")


def _masked_host(url: str) -> str:
    return url.split("@")[-1].split("?")[0] if "@" in url else url.split("://")[0]


def _build_engine(url: str, statement_timeout_ms: int = 0):
    """Create a SQLAlchemy engine, logging the masked host."""
    log.info("Initialising database engine -> %s", _masked_host(url))
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False}, echo=False)

    connect_args = {}
    if statement_timeout_ms and url.startswith("postgresql"):
        connect_args["options"] = f"-c statement_timeout={statement_timeout_ms}"
    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_timeout=15,
        pool_recycle=1800,
        pool_pre_ping=True,
        connect_args=connect_args,
        echo=False,
    )


class Database:
    """Owns the engine, the configured tables and the session factory."""

    def __init__(self, url: str, table_names: TableNames, statement_timeout_ms: int = 0):
        self.engine = _build_engine(url, statement_timeout_ms)
        self.metadata = MetaData()
        self.tables: ScoreboardTables = define_tables(self.metadata, table_names)
        self._sessionmaker = sessionmaker(bind=self.engine, expire_on_commit=False)

    def __call__(self):
        return self._managed_session()

    @contextmanager
    def _managed_session(self):
        session = self._sessionmaker()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        """Create every configured table (idempotent)."""
        self.metadata.create_all(bind=self.engine)
        log.info("Tables verified: %s", ", ".join(sorted(self.metadata.tables)))

    def dispose(self) -> None:
        self.engine.dispose()
