import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .models import Base

logger = logging.getLogger(__name__)


def ensure_schema(engine: Engine) -> bool:
    """
    Create the players and matches tables if they are not there yet.
    Safe to run on every start; existing tables are left untouched.

    A storage error here is logged and swallowed, so a broken schema
    only shows up later as failing queries. Returns False in that case.
    """
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
    except SQLAlchemyError as e:
        logger.warning(f"Could not create tables (might already exist): {e}")
        return False
    return True
