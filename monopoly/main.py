from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
import uvicorn

from monopoly.config import Settings
from monopoly.database import Database
from monopoly.errors import register_error_handlers
from monopoly.routers.games import router as games_router
from monopoly.routers.players import router as players_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the Monopoly service.

    ``database`` is used as-is when given (tests pass one bound to their own
    engine); otherwise one is built from ``settings`` at startup and disposed
    at shutdown.
    """
    settings = settings or Settings.from_env()

    # ✅ Configure logging
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database.from_settings(settings)
        app.state.db = db
        logger.info("Connected to database %s on %s:%s", settings.db_database, settings.db_server, settings.db_port)
        try:
            yield
        finally:
            if database is None:
                await db.dispose()

    # ✅ redirect_slashes=False to avoid automatic redirects
    app = FastAPI(title="Monopoly Service", redirect_slashes=False, lifespan=lifespan)

    # Tests build the app without running the lifespan, so expose an injected db right away
    if database is not None:
        app.state.db = database

    register_error_handlers(app)

    # ✅ Health check
    @app.get("/", response_class=PlainTextResponse)
    async def read_hello():
        return "Hello, CS 262 Monopoly service!"

    # ✅ Register routers
    app.include_router(players_router, prefix="/players", tags=["Players"])
    app.include_router(games_router, prefix="/games", tags=["Games"])

    return app


def run() -> None:
    """Start the service; ``uvicorn monopoly.main:create_app --factory`` works too."""
    settings = Settings.from_env()
    app = create_app(settings)
    logger.info("Listening on port %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
