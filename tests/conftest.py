from __future__ import annotations

import random

import pytest

from config import Config
from main import create_app, socketio
from stats import StatsStore


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def store(tmp_path):
    store = StatsStore(f"sqlite:///{tmp_path / 'stats.db'}")
    store.migrate()
    yield store
    store.close()


@pytest.fixture
def app(store, tmp_path):
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html>sudoku</html>")
    config = Config(
        db_dsn="sqlite://",
        static_dir=str(static_dir),
        socketio_async_mode="threading",
    )
    app = create_app(config, store=store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
