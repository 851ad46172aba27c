import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster_service.config import Settings
from roster_service.db.session import Database
from roster_service.schemas.health import PingResponse
from .errors import register_exception_handlers
from .routers import players, teams

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API. The store is connected on startup and disposed on shutdown."""
    settings = settings or Settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.database_url, echo=settings.sql_echo)
        await database.connect()
        app.state.database = database
        try:
            yield
        finally:
            await database.disconnect()

    app = FastAPI(
        title="Roster Service API",
        description="API for players and the team hierarchy.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],  # Allows all methods
        allow_headers=["*"],  # Allows all headers
    )

    register_exception_handlers(app)
    app.include_router(players.router)
    app.include_router(teams.router)

    @app.get("/", tags=["Root"])
    async def get_root():
        """Welcome message for the API root."""
        return {"message": "Welcome to the Roster Service API!"}

    @app.get("/api/ping", response_model=PingResponse, tags=["Health"])
    async def ping_api():
        """Simple ping to check API health."""
        return {"status": "ok", "message": "pong"}

    logger.info(f"Application created with {settings!r}")
    return app


app = create_app()
