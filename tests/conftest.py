import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from playerlist.db import make_engine
from playerlist.db_init import ensure_schema
from playerlist.main import create_app
from playerlist.utils.config import Settings


def insert_player(engine, name: str, created_at=None, use_default: bool = True) -> None:
    """Insert a row directly; created_at falls back to CURRENT_TIMESTAMP unless given."""
    with engine.begin() as conn:
        if use_default and created_at is None:
            conn.execute(text("INSERT INTO players (name) VALUES (:name)"), {"name": name})
        else:
            conn.execute(
                text("INSERT INTO players (name, created_at) VALUES (:name, :created_at)"),
                {"name": name, "created_at": created_at},
            )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(database_url=f"sqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def engine(settings):
    engine = make_engine(settings)
    ensure_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
