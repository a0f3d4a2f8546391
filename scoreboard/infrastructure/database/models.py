"""SQL schema definition.

Table names come from configuration, so the tables are declared at runtime
against a caller-owned MetaData instead of as module-level ORM classes.
"""
from dataclasses import dataclass

from sqlalchemy import (
    BigInteger, Column, Integer, MetaData, SmallInteger, String, Table,
)

from scoreboard.config import TableNames

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
_LEDGER_ID = BigInteger().with_variant(Integer, "sqlite")


@dataclass(frozen=True)
class ScoreboardTables:
    scores: Table
    leaderboard: Table
    words: Table
    translations: Table


def define_tables(metadata: MetaData, names: TableNames) -> ScoreboardTables:
    # -----------------------------------------------------------------------
    # Score ledger (append-only event record)
    # -----------------------------------------------------------------------
    scores = Table(
        names.scores,
        metadata,
        Column("id", _LEDGER_ID, primary_key=True, autoincrement=True),
        Column("player_name", String(64), nullable=False),
        Column("score", Integer, nullable=False),
        Column("round", SmallInteger, nullable=False),
        Column("time", Integer, nullable=False),
        Column("category", String(100), nullable=True),
        Column("timestamp", BigInteger, nullable=False, index=True),
        Column("score_type", String(20), nullable=False, default="game"),
    )

    # -----------------------------------------------------------------------
    # Leaderboard (one row per player, best score only)
    # -----------------------------------------------------------------------
    leaderboard = Table(
        names.leaderboard,
        metadata,
        Column("player_name", String(64), primary_key=True),
        Column("score", Integer, nullable=False),
        Column("round", SmallInteger, nullable=False),
        Column("category", String(100), nullable=True),
    )

    # -----------------------------------------------------------------------
    # Word catalog and translations (read-only for the service)
    # -----------------------------------------------------------------------
    words = Table(
        names.words,
        metadata,
        Column("category", String(50), primary_key=True),
        Column("word_id", String(100), primary_key=True),
        Column("word", String(500), nullable=False),
        Column("round", SmallInteger, nullable=False),
        Column("type", String(10), nullable=False, default="normal"),
        Column("language", String(5), nullable=False),
    )

    translations = Table(
        names.translations,
        metadata,
        Column("word_id", String(100), primary_key=True),
        Column("language", String(5), primary_key=True),
        Column("translation", String(500), nullable=False),
        Column("category", String(50), nullable=True),
        Column("created_at", String(40), nullable=True),
        Column("updated_at", String(40), nullable=True),
    )

    return ScoreboardTables(
        scores=scores,
        leaderboard=leaderboard,
        words=words,
        translations=translations,
    )
