"""Game API routes -- health, score submission, leaderboard, words, translations.

The router carries no prefix; ``main.create_app`` mounts it once per
configured prefix.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from scoreboard.api.dependencies import ScoreboardServices, get_services
from scoreboard.application.submit_score import submit_score
from scoreboard.application.translation_lookup import lookup_translation
from scoreboard.application.word_catalog import DEFAULT_LANGUAGE, fetch_words, list_categories
from scoreboard.domain.errors import (
    LeaderboardReadError,
    LedgerWriteError,
    ScoreValidationError,
    StoreError,
    TranslationNotFoundError,
)

log = logging.getLogger("scoreboard.catalog")

router = APIRouter(tags=["game"])


class SubmitScoreRequest(BaseModel):
    # Strict: booleans, floats and numeric strings are rejected, never coerced.
    # Range checks live in the domain validator.
    model_config = ConfigDict(strict=True)

    player_name: str
    score: int
    round: int
    time: int = 0
    category: Optional[str] = None


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


@router.get("/health")
def api_health(services: ScoreboardServices = Depends(get_services)):
    """Liveness probe. Does not touch the database."""
    return {
        "status": "ok",
        "message": "Typing Game API is running",
        "persistence": services.persistence,
    }


# ---------------------------------------------------------------------------
# Scores and leaderboard
# ---------------------------------------------------------------------------

@router.post("/game/score")
def api_submit_score(req: SubmitScoreRequest, services: ScoreboardServices = Depends(get_services)):
    """Record a round result and consider it for the leaderboard."""
    try:
        result = submit_score(
            req.player_name,
            req.score,
            req.round,
            req.time,
            req.category,
            ledger=services.ledger,
            maintainer=services.maintainer,
        )
    except ScoreValidationError as e:
        return _error(400, str(e))
    except LedgerWriteError as e:
        return _error(500, "Failed to save score", details=str(e))

    return {
        "message": "Score submitted successfully",
        "data": result.submission.to_dict(),
        "leaderboard_update": result.leaderboard_outcome.value,
    }


@router.get("/game/leaderboard")
def api_get_leaderboard(services: ScoreboardServices = Depends(get_services)):
    """Top players by best score, position-ranked."""
    try:
        ranked = services.ranking.build_top_n()
    except LeaderboardReadError:
        return _error(500, "Failed to fetch leaderboard")
    return {"leaderboard": [r.to_dict() for r in ranked]}


# ---------------------------------------------------------------------------
# Word catalog and translations
# ---------------------------------------------------------------------------

@router.get("/game/words/{category}/{round_param}")
def api_get_words(
    category: str,
    round_param: str,
    language: str = DEFAULT_LANGUAGE,
    services: ScoreboardServices = Depends(get_services),
):
    try:
        words = fetch_words(services.word_repo, category, round_param, language)
    except ValueError as e:
        return _error(400, str(e))
    except StoreError as e:
        log.error(
            "Failed to fetch words for category %s, round %s, language %s: %s",
            category, round_param, language, e,
        )
        return _error(500, "Failed to fetch words")

    log.info(
        "Fetched %d words for category %s, round %s, language %s",
        len(words), category, round_param, language,
    )
    return {
        "words": [w.to_dict() for w in words],
        "category": category,
        "round": int(round_param),
        "language": language or DEFAULT_LANGUAGE,
    }


@router.get("/game/categories")
def api_get_categories(language: str = DEFAULT_LANGUAGE):
    return {"categories": list_categories(language)}


@router.get("/game/translation/{word_id}")
def api_get_translation(
    word_id: str,
    language: Optional[str] = None,
    services: ScoreboardServices = Depends(get_services),
):
    try:
        translation = lookup_translation(services.translation_repo, word_id, language)
    except ValueError as e:
        return _error(400, str(e))
    except (TranslationNotFoundError, StoreError) as e:
        log.warning("Failed to fetch translation for word_id %s, language %s: %s", word_id, language, e)
        return _error(404, "Translation not found")

    return {"translation": translation, "word_id": word_id, "language": language}
