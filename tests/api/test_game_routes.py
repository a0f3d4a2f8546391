"""
Integration tests for game routes (/api/* and /production/api/*).

Covers:
- /health
- /game/score (accepted / validation errors / malformed body / store failures)
- /game/leaderboard (ranking, ties, truncation, read failure)
- /game/words/{category}/{round}
- /game/categories
- /game/translation/{word_id}
"""
import json
import os

import pytest
from fastapi.testclient import TestClient

from scoreboard.api.dependencies import ScoreboardServices
from scoreboard.main import create_app
from tests.conftest import (
    FailingLedger,
    FailingLeaderboardStore,
    InMemoryLedger,
    InMemoryLeaderboardStore,
    score_payload,
)

PREFIXES = ["/api", "/production/api"]


def _client_with(settings, services, **overrides) -> TestClient:
    stores = {
        "ledger": services.ledger,
        "leaderboard_store": services.leaderboard_store,
        "word_repo": services.word_repo,
        "translation_repo": services.translation_repo,
    }
    stores.update(overrides)
    return TestClient(create_app(settings, ScoreboardServices.from_stores(**stores)))


# ---------------------------------------------------------------------------
# /health
# ---------------------------------------------------------------------------
class TestHealth:
    @pytest.mark.parametrize("prefix", PREFIXES)
    def test_health_under_every_prefix(self, client, prefix):
        resp = client.get(f"{prefix}/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["message"] == "Typing Game API is running"
        assert body["persistence"] == "json"

    def test_unknown_prefix_is_404(self, client):
        assert client.get("/v2/api/health").status_code == 404


# ---------------------------------------------------------------------------
# /game/score
# ---------------------------------------------------------------------------
class TestSubmitScore:
    @pytest.mark.parametrize("prefix", PREFIXES)
    def test_accepted(self, client, prefix):
        resp = client.post(f"{prefix}/game/score", json=score_payload())
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Score submitted successfully"
        assert body["data"] == {
            "player_name": "Alice",
            "score": 1200,
            "round": 3,
            "time": 45,
            "category": "beginner_words",
        }
        assert body["leaderboard_update"] == "updated"

    def test_event_lands_in_ledger_file(self, client, settings):
        client.post("/api/game/score", json=score_payload(player_name="Ledger"))
        path = os.path.join(settings.data_dir, f"{settings.tables.scores}.jsonl")
        with open(path, encoding="utf-8") as f:
            events = [json.loads(line) for line in f]
        assert events[-1]["player_name"] == "Ledger"
        assert events[-1]["score_type"] == "game"
        assert isinstance(events[-1]["timestamp"], int)

    def test_lower_score_skipped(self, client):
        client.post("/api/game/score", json=score_payload(score=100))
        resp = client.post("/api/game/score", json=score_payload(score=90))
        assert resp.status_code == 200
        assert resp.json()["leaderboard_update"] == "skipped"

    def test_time_and_category_optional(self, client):
        resp = client.post("/api/game/score", json={"player_name": "Min", "score": 1, "round": 1})
        assert resp.status_code == 200
        assert resp.json()["data"]["time"] == 0
        assert resp.json()["data"]["category"] is None

    @pytest.mark.parametrize("overrides, message", [
        ({"player_name": ""}, "Player name must be 1-20 characters"),
        ({"player_name": "x" * 21}, "Player name must be 1-20 characters"),
        ({"score": -1}, "Invalid score range"),
        ({"score": 1_000_001}, "Invalid score range"),
        ({"round": 0}, "Invalid round"),
        ({"round": 6}, "Invalid round"),
        ({"time": 3601}, "Invalid time"),
    ])
    def test_rule_violations_are_400(self, client, overrides, message):
        resp = client.post("/api/game/score", json=score_payload(**overrides))
        assert resp.status_code == 400
        assert resp.json() == {"error": message}

    def test_rejected_submission_not_ranked(self, client):
        client.post("/api/game/score", json=score_payload(player_name="Ghost", round=9))
        board = client.get("/api/game/leaderboard").json()["leaderboard"]
        assert "Ghost" not in [e["player_name"] for e in board]

    def test_missing_field_is_400(self, client):
        resp = client.post("/api/game/score", json={"player_name": "Al"})
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_non_integer_score_is_400(self, client):
        resp = client.post("/api/game/score", json=score_payload(score="lots"))
        assert resp.status_code == 400

    @pytest.mark.parametrize("overrides", [
        {"score": True},
        {"score": "100"},
        {"score": 100.0},
        {"round": True},
        {"time": "45"},
        {"player_name": 123},
    ])
    def test_values_are_not_coerced(self, client, overrides):
        resp = client.post("/api/game/score", json=score_payload(**overrides))
        assert resp.status_code == 400
        assert "error" in resp.json()
        board = client.get("/api/game/leaderboard").json()["leaderboard"]
        assert board == []

    def test_invalid_json_is_400(self, client):
        resp = client.post(
            "/api/game/score",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400

    def test_ledger_failure_is_500(self, settings, services):
        store = InMemoryLeaderboardStore()
        client = _client_with(settings, services, ledger=FailingLedger(), leaderboard_store=store)
        resp = client.post("/api/game/score", json=score_payload())
        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to save score"
        assert "details" in resp.json()
        assert store.writes == 0

    def test_leaderboard_failure_still_accepted(self, settings, services):
        ledger = InMemoryLedger()
        client = _client_with(
            settings, services, ledger=ledger, leaderboard_store=FailingLeaderboardStore(),
        )
        resp = client.post("/api/game/score", json=score_payload())
        assert resp.status_code == 200
        assert resp.json()["leaderboard_update"] == "failed"
        assert len(ledger.events) == 1


# ---------------------------------------------------------------------------
# /game/leaderboard
# ---------------------------------------------------------------------------
class TestLeaderboard:
    def test_empty(self, client):
        resp = client.get("/api/game/leaderboard")
        assert resp.status_code == 200
        assert resp.json() == {"leaderboard": []}

    def test_best_score_per_player(self, client):
        client.post("/api/game/score", json=score_payload(player_name="Al", score=50, round=1))
        client.post("/api/game/score", json=score_payload(player_name="Al", score=80, round=2))
        board = client.get("/api/game/leaderboard").json()["leaderboard"]
        assert len(board) == 1
        assert board[0]["score"] == 80
        assert board[0]["round"] == 2
        assert board[0]["rank"] == 1

    def test_ties_ranked_by_name(self, client):
        for name in ("C", "A", "B"):
            client.post("/api/game/score", json=score_payload(player_name=name, score=100))
        board = client.get("/production/api/game/leaderboard").json()["leaderboard"]
        assert [(e["player_name"], e["rank"]) for e in board] == [("A", 1), ("B", 2), ("C", 3)]

    def test_truncated_to_thirty(self, client):
        for i in range(35):
            client.post("/api/game/score", json=score_payload(player_name=f"P{i:02d}", score=i))
        board = client.get("/api/game/leaderboard").json()["leaderboard"]
        assert len(board) == 30
        assert board[0]["player_name"] == "P34"
        assert board[-1]["rank"] == 30

    def test_entry_shape(self, client):
        client.post("/api/game/score", json=score_payload(player_name="Shape"))
        entry = client.get("/api/game/leaderboard").json()["leaderboard"][0]
        assert set(entry) == {"player_name", "score", "round", "category", "rank"}

    def test_malformed_store_file(self, client, settings):
        path = os.path.join(settings.data_dir, f"{settings.tables.leaderboard}.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"Al": {"player_name": "Al", "round": 1}}, f)

        resp = client.post("/api/game/score", json=score_payload(player_name="Al"))
        assert resp.status_code == 200
        assert resp.json()["leaderboard_update"] == "failed"

        resp = client.get("/api/game/leaderboard")
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to fetch leaderboard"}

    def test_read_failure_is_500(self, settings, services):
        client = _client_with(settings, services, leaderboard_store=FailingLeaderboardStore())
        resp = client.get("/api/game/leaderboard")
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to fetch leaderboard"}


# ---------------------------------------------------------------------------
# Word catalog
# ---------------------------------------------------------------------------
class TestWords:
    def test_seeded_words_for_round(self, client):
        resp = client.get("/api/game/words/beginner_words/1")
        assert resp.status_code == 200
        body = resp.json()
        assert body["category"] == "beginner_words"
        assert body["round"] == 1
        assert body["language"] == "jp"
        assert body["words"]
        assert all(w["language"] == "jp" for w in body["words"])

    def test_english_words(self, client):
        resp = client.get("/api/game/words/beginner_words/1", params={"language": "en"})
        assert resp.status_code == 200
        assert all(w["language"] == "en" for w in resp.json()["words"])

    def test_empty_round(self, client):
        resp = client.get("/api/game/words/intermediate_words/5")
        assert resp.status_code == 200
        assert resp.json()["words"] == []

    @pytest.mark.parametrize("path, message", [
        ("/api/game/words/unknown/1", "Invalid category parameter"),
        ("/api/game/words/beginner_words/9", "Invalid round parameter"),
        ("/api/game/words/beginner_words/one", "Invalid round parameter"),
    ])
    def test_invalid_parameters_are_400(self, client, path, message):
        resp = client.get(path)
        assert resp.status_code == 400
        assert resp.json() == {"error": message}

    def test_invalid_language_is_400(self, client):
        resp = client.get("/api/game/words/beginner_words/1", params={"language": "de"})
        assert resp.status_code == 400

    def test_categories(self, client):
        resp = client.get("/api/game/categories", params={"language": "en"})
        assert resp.status_code == 200
        categories = resp.json()["categories"]
        assert len(categories) == 4
        assert {"id", "name", "description", "icon"} <= set(categories[0])


# ---------------------------------------------------------------------------
# Translations
# ---------------------------------------------------------------------------
class TestTranslation:
    def test_found(self, client):
        resp = client.get("/api/game/translation/food_001", params={"language": "es"})
        assert resp.status_code == 200
        assert resp.json() == {"translation": "agua", "word_id": "food_001", "language": "es"}

    def test_missing_language_is_400(self, client):
        resp = client.get("/api/game/translation/food_001")
        assert resp.status_code == 400
        assert resp.json() == {"error": "language query parameter is required"}

    def test_unsupported_language_is_400(self, client):
        resp = client.get("/api/game/translation/food_001", params={"language": "it"})
        assert resp.status_code == 400

    def test_not_found_is_404(self, client):
        resp = client.get("/api/game/translation/nope", params={"language": "es"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "Translation not found"}


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
class TestCors:
    def test_preflight_allowed(self, client):
        resp = client.options("/api/game/score", headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        })
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] in ("*", "http://localhost:3000")


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------
class TestLifespan:
    def test_database_disposed_on_shutdown(self, settings, services):
        class RecordingDatabase:
            disposed = False

            def dispose(self):
                self.disposed = True

        database = RecordingDatabase()
        app = create_app(settings, ScoreboardServices.from_stores(
            services.ledger,
            services.leaderboard_store,
            services.word_repo,
            services.translation_repo,
            persistence="postgresql",
            database=database,
        ))
        with TestClient(app) as client:
            assert client.get("/api/health").json()["persistence"] == "postgresql"
            assert database.disposed is False
        assert database.disposed is True

    def test_json_backend_shutdown_is_clean(self, test_app):
        with TestClient(test_app) as client:
            assert client.get("/api/health").status_code == 200
