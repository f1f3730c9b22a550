import logging

from fastapi import Request
from fastapi.templating import Jinja2Templates
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .utils.config import Settings
from .utils.player import PlayerRepository

logger = logging.getLogger(__name__)


class StorageUnavailableError(RuntimeError):
    """The database could not be opened or did not answer a ping."""


def _is_memory_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def make_engine(settings: Settings) -> Engine:
    url = make_url(settings.database_url)
    connect_args = {"check_same_thread": False} if url.get_backend_name() == "sqlite" else {}
    pool_args = {"pool_pre_ping": settings.pool_pre_ping}
    # in-memory SQLite gets SingletonThreadPool, which has no overflow or timeout
    if not _is_memory_sqlite(url):
        pool_args.update(
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_timeout=settings.pool_timeout,
        )
    return create_engine(url, connect_args=connect_args, future=True, **pool_args)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def check_connection(engine: Engine) -> None:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.critical(f"Failed to connect to database: {e}")
        raise StorageUnavailableError(str(e)) from e
    logger.info("Database connection successful!")


def get_player_repository(request: Request) -> PlayerRepository:
    return request.app.state.player_repository


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
