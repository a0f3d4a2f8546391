"""Entry point. Wires stores into services and mounts the API routes.

Persistence strategy:
  - If DATABASE_URL is set  -> PostgreSQL via SQLAlchemy.
  - Otherwise               -> JSON files under DATA_DIR (development only).
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scoreboard.api.dependencies import ScoreboardServices
from scoreboard.api.routes.game_routes import router as game_router
from scoreboard.config import Settings, load_settings

log = logging.getLogger("scoreboard.startup")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
    )


def build_services(settings: Settings) -> ScoreboardServices:
    """Construct every store once, for the lifetime of the process."""
    from scoreboard.infrastructure.database.seed import seed_catalog

    tables = settings.tables

    if settings.database_url:
        # -- PostgreSQL ------------------------------------------------------
        from scoreboard.infrastructure.database.connection import Database
        from scoreboard.infrastructure.repositories.pg_score_ledger_repository import PgScoreLedgerRepository
        from scoreboard.infrastructure.repositories.pg_leaderboard_repository import PgLeaderboardRepository
        from scoreboard.infrastructure.repositories.pg_word_repository import PgWordRepository
        from scoreboard.infrastructure.repositories.pg_translation_repository import PgTranslationRepository

        database = Database(settings.database_url, tables, settings.statement_timeout_ms)
        database.create_tables()
        t = database.tables

        ledger = PgScoreLedgerRepository(database, t.scores)
        leaderboard_store = PgLeaderboardRepository(database, t.leaderboard, settings.scan_page_size)
        word_repo = PgWordRepository(database, t.words)
        translation_repo = PgTranslationRepository(database, t.translations)
        words_target = (database, t.words)
        translations_target = (database, t.translations)
    else:
        # -- JSON file fallback (dev) -----------------------------------------
        from scoreboard.infrastructure.repositories.score_ledger_repository import ScoreLedgerRepository
        from scoreboard.infrastructure.repositories.leaderboard_repository import LeaderboardRepository
        from scoreboard.infrastructure.repositories.word_repository import WordRepository
        from scoreboard.infrastructure.repositories.translation_repository import TranslationRepository

        database = None
        data_dir = settings.data_dir
        ledger = ScoreLedgerRepository(os.path.join(data_dir, f"{tables.scores}.jsonl"))
        leaderboard_store = LeaderboardRepository(os.path.join(data_dir, f"{tables.leaderboard}.json"))
        words_target = os.path.join(data_dir, f"{tables.words}.json")
        translations_target = os.path.join(data_dir, f"{tables.translations}.json")
        word_repo = WordRepository(words_target)
        translation_repo = TranslationRepository(translations_target)

    # Seeding never blocks startup.
    try:
        seed_catalog(settings.seed_dir, words_target, translations_target)
    except Exception as exc:
        log.warning("Catalog seed skipped: %s: %s", type(exc).__name__, exc)

    log.info("Persistence: %s", settings.persistence)
    return ScoreboardServices.from_stores(
        ledger,
        leaderboard_store,
        word_repo,
        translation_repo,
        leaderboard_size=settings.leaderboard_size,
        persistence=settings.persistence,
        database=database,
    )


@asynccontextmanager
async def _lifespan(app: FastAPI):
    yield
    database = app.state.services.database
    if database is not None:
        database.dispose()
        log.info("Database engine disposed")


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters share the 400 {error} envelope."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def create_app(settings: Settings | None = None, services: ScoreboardServices | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Typing Game Scoreboard",
        description="Score submission and leaderboard service for the typing game.",
        version="1.0.0",
        lifespan=_lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    app.state.settings = settings
    app.state.services = services or build_services(settings)

    for prefix in settings.api_prefixes:
        app.include_router(game_router, prefix=prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("scoreboard.main:app", host="0.0.0.0", port=8080)
