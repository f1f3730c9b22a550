import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .db import check_connection, make_engine, make_session_factory
from .db_init import ensure_schema
from .routers.pages import router as pages_router
from .routers.players import router as players_router
from .utils.config import Settings
from .utils.player import PlayerRepository

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application with its own engine and repository.
    The lifespan pings the database (fatal on failure) and then makes sure
    the schema exists (non-fatal on failure).
    """
    settings = settings or Settings.from_env()
    engine = make_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        check_connection(engine)
        ensure_schema(engine)
        logger.info(f"Serving players from {settings.database_url}")
        yield
        engine.dispose()

    app = FastAPI(title="Player List", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.player_repository = PlayerRepository(make_session_factory(engine))
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")
    app.include_router(pages_router)
    app.include_router(players_router)

    @app.get("/health")
    def health():
        return {"ok": True, "service": "Player List"}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
