import re
import time
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from conftest import insert_player
from playerlist.db import StorageUnavailableError, get_player_repository
from playerlist.main import create_app
from playerlist.routers.pages import kitchen_time
from playerlist.utils.config import Settings


class FailingRepository:
    def list_players(self):
        raise OperationalError("SELECT id, name, created_at FROM players", {}, Exception("unable to open database file"))


def test_index_lists_players_in_order(client, app):
    insert_player(app.state.engine, "Bob")
    insert_player(app.state.engine, "Alice")

    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    body = resp.text
    assert "<title>Player List</title>" in body
    assert body.index("Alice") < body.index("Bob")


def test_index_empty(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "No players yet." in resp.text


def test_index_with_unparseable_timestamp(client, app):
    insert_player(app.state.engine, "Alice", created_at="yesterday")

    resp = client.get("/")
    assert resp.status_code == 200
    assert "Alice" in resp.text


def test_index_repository_failure(client, app):
    insert_player(app.state.engine, "Alice")
    app.dependency_overrides[get_player_repository] = lambda: FailingRepository()
    try:
        resp = client.get("/")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.text == "Error fetching players"
    assert "Alice" not in resp.text


def test_index_missing_table(client, app):
    with app.state.engine.begin() as conn:
        conn.execute(text("DROP TABLE players"))

    resp = client.get("/")
    assert resp.status_code == 500
    assert resp.text == "Error fetching players"


def test_load_content(client):
    started = time.monotonic()
    resp = client.get("/load-content")
    elapsed = time.monotonic() - started

    assert resp.status_code == 200
    assert elapsed >= 0.5
    assert elapsed < 3.0
    assert re.fullmatch(r"<p>Content loaded via HTMX at \d{1,2}:\d{2}(AM|PM)</p>", resp.text)


def test_kitchen_time():
    assert kitchen_time(datetime(2024, 1, 1, 15, 4)) == "3:04PM"
    assert kitchen_time(datetime(2024, 1, 1, 0, 5)) == "12:05AM"
    assert kitchen_time(datetime(2024, 1, 1, 10, 30)) == "10:30AM"


def test_static_files(client):
    resp = client.get("/static/style.css")
    assert resp.status_code == 200
    assert "table.players" in resp.text


def test_startup_aborts_when_storage_unreachable(tmp_path):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'missing' / 'dir' / 'x.db'}")
    app = create_app(settings)
    with pytest.raises(StorageUnavailableError):
        with TestClient(app):
            pass
