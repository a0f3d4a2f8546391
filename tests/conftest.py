"""
Shared pytest fixtures for the scoreboard test suite.

Strategy:
- Domain tests: pure in-memory, zero I/O.
- Application tests: in-memory fakes for the stores, plus failing fakes for
  the error paths.
- Infrastructure tests: JSON repos in tmp_path, SQL repos on a SQLite file.
- API tests: FastAPI TestClient with JSON repos in tmp_path.
  DATABASE_URL is blanked so the app always uses the JSON fallback in tests.
"""
import os
import tempfile

import pytest

# ---------------------------------------------------------------------------
# Ensure no real database is touched during the test run
# ---------------------------------------------------------------------------
os.environ["DATABASE_URL"] = ""
os.environ.setdefault("SCORES_TABLE_NAME", "test-scores")
os.environ.setdefault("LEADERBOARD_TABLE_NAME", "test-leaderboard")
os.environ.setdefault("WORDS_TABLE_NAME", "test-words")
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="scoreboard_test_"))


from scoreboard.config import DEFAULT_SEED_DIR, Settings, TableNames
from scoreboard.domain.errors import StoreError
from scoreboard.domain.leaderboard import LeaderboardEntry


# ---------------------------------------------------------------------------
# Domain helpers (reusable across many test modules)
# ---------------------------------------------------------------------------

def make_entry(player_name="Alice", score=100, round=1, category=None) -> LeaderboardEntry:
    return LeaderboardEntry(player_name=player_name, score=score, round=round, category=category)


def score_payload(**overrides) -> dict:
    payload = {"player_name": "Alice", "score": 1200, "round": 3, "time": 45, "category": "beginner_words"}
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# In-memory and failing stores
# ---------------------------------------------------------------------------

class InMemoryLedger:
    def __init__(self):
        self.events = []

    def append(self, event):
        self.events.append(event)


class FailingLedger:
    def append(self, event):
        raise StoreError("ledger unavailable")


class InMemoryLeaderboardStore:
    """Dict-backed store honouring the conditional-write contract."""

    def __init__(self, entries=()):
        self.rows = {e.player_name: e for e in entries}
        self.writes = 0

    def get(self, player_name):
        return self.rows.get(player_name)

    def put_if_higher(self, entry):
        if not entry.beats(self.rows.get(entry.player_name)):
            return False
        self.rows[entry.player_name] = entry
        self.writes += 1
        return True

    def scan(self):
        yield from list(self.rows.values())


class FailingLeaderboardStore:
    def __init__(self, fail_get=True, fail_put=True):
        self.fail_get = fail_get
        self.fail_put = fail_put

    def get(self, player_name):
        if self.fail_get:
            raise StoreError("read timeout")
        return None

    def put_if_higher(self, entry):
        if self.fail_put:
            raise StoreError("write timeout")
        return True

    def scan(self):
        raise StoreError("scan failed")


class PartialScanStore(InMemoryLeaderboardStore):
    """Yields the first page, then fails mid-scan."""

    def scan(self):
        rows = list(self.rows.values())
        yield from rows[:1]
        raise StoreError("connection reset during scan")


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def ledger():
    return InMemoryLedger()


@pytest.fixture
def leaderboard_store():
    return InMemoryLeaderboardStore()


# ---------------------------------------------------------------------------
# FastAPI TestClient with JSON-file repos in a temp directory
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path):
    return Settings(
        tables=TableNames(scores="scores", leaderboard="leaderboard", words="words"),
        data_dir=str(tmp_path),
        seed_dir=DEFAULT_SEED_DIR,
    )


@pytest.fixture
def services(settings):
    from scoreboard.main import build_services
    return build_services(settings)


@pytest.fixture
def test_app(settings, services):
    """FastAPI app wired with JSON repos in the tmp directory."""
    from scoreboard.main import create_app
    return create_app(settings, services)


@pytest.fixture
def client(test_app):
    from fastapi.testclient import TestClient
    return TestClient(test_app)
