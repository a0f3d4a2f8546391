"""Runtime configuration read from the environment (and an optional .env file).

Table names are required: a missing one is a startup error, not a
per-request one.
"""
import os
import re
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_DIR = os.path.dirname(PACKAGE_DIR)

DEFAULT_DATA_DIR = os.path.join(PACKAGE_DIR, "data")
DEFAULT_SEED_DIR = os.path.join(DEFAULT_DATA_DIR, "seed")
DEFAULT_TRANSLATIONS_TABLE = "typing-game-translations"
DEFAULT_API_PREFIXES = ("/api", "/production/api")

# Matches a postgres(ql):// URL anywhere inside a string.
_PG_URL_RE = re.compile(r"(postgres(?:ql)?(?:\+\w+)?://\S+)")


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing or malformed."""


@dataclass(frozen=True)
class TableNames:
    scores: str
    leaderboard: str
    words: str
    translations: str = DEFAULT_TRANSLATIONS_TABLE


@dataclass(frozen=True)
class Settings:
    tables: TableNames
    database_url: str = ""
    data_dir: str = DEFAULT_DATA_DIR
    seed_dir: str = DEFAULT_SEED_DIR
    api_prefixes: tuple = DEFAULT_API_PREFIXES
    allowed_origins: tuple = ("*",)
    leaderboard_size: int = 30
    scan_page_size: int = 100
    statement_timeout_ms: int = 5000
    log_level: str = "INFO"

    @property
    def persistence(self) -> str:
        return "postgresql" if self.database_url else "json"


def resolve_database_url(raw: str) -> str:
    """Return a clean SQLAlchemy URL from a value pasted into the environment.

    Handles surrounding whitespace and quotes, a full ``psql`` command pasted
    instead of the URL, and the ``postgres://`` scheme SQLAlchemy rejects.
    PostgreSQL URLs without an explicit driver are pinned to psycopg 3.
    """
    raw = (raw or "").strip()

    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ('"', "'"):
        raw = raw[1:-1].strip()

    match = _PG_URL_RE.search(raw)
    url = match.group(1) if match else raw
    url = url.rstrip("'\"").strip()

    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def _split_csv(raw: str) -> tuple:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _normalize_prefix(prefix: str) -> str:
    prefix = "/" + prefix.strip().strip("/")
    return "" if prefix == "/" else prefix


def _int_setting(env: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


def _required(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, "").strip()
    if not value:
        raise ConfigurationError(f"{name} environment variable not set")
    return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``env`` (defaults to ``os.environ`` after .env)."""
    if env is None:
        load_dotenv(os.path.join(PROJECT_DIR, ".env"))
        env = os.environ

    tables = TableNames(
        scores=_required(env, "SCORES_TABLE_NAME"),
        leaderboard=_required(env, "LEADERBOARD_TABLE_NAME"),
        words=_required(env, "WORDS_TABLE_NAME"),
        translations=env.get("TRANSLATIONS_TABLE_NAME", "").strip() or DEFAULT_TRANSLATIONS_TABLE,
    )

    prefixes = _split_csv(env.get("API_PREFIXES", ""))
    prefixes = tuple(_normalize_prefix(p) for p in prefixes) or DEFAULT_API_PREFIXES

    origins = _split_csv(env.get("ALLOWED_ORIGINS", "")) or ("*",)

    return Settings(
        tables=tables,
        database_url=resolve_database_url(env.get("DATABASE_URL", "")),
        data_dir=env.get("DATA_DIR", "").strip() or DEFAULT_DATA_DIR,
        seed_dir=env.get("SEED_DIR", "").strip() or DEFAULT_SEED_DIR,
        api_prefixes=prefixes,
        allowed_origins=origins,
        leaderboard_size=_int_setting(env, "LEADERBOARD_SIZE", 30),
        scan_page_size=_int_setting(env, "LEADERBOARD_SCAN_PAGE_SIZE", 100, minimum=1),
        statement_timeout_ms=_int_setting(env, "DB_STATEMENT_TIMEOUT_MS", 5000),
        log_level=env.get("LOG_LEVEL", "").strip().upper() or "INFO",
    )
