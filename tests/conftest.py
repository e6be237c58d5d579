from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone

import pytest
from flask import Flask
from flask.testing import FlaskClient

from user_dashboard.config.settings import Settings
from user_dashboard.infrastructure.database.session import Database
from user_dashboard.main import create_app

_MEMORY_DB = "sqlite+pysqlite:///:memory:"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_uri=_MEMORY_DB,
        auto_create_tables=True,
        environment="testing",
        debug=False,
        app_prefix="",
        api_prefix="/api",
    )


@pytest.fixture
def database() -> Generator[Database, None, None]:
    db = Database(_MEMORY_DB)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def app(settings: Settings) -> Generator[Flask, None, None]:
    app = create_app(settings)
    app.config["TESTING"] = True
    yield app
    app.extensions["database"].dispose()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def ticking_clock() -> Callable[[], datetime]:
    """Clock that advances one second per call."""
    state = {"now": datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)}

    def _now() -> datetime:
        state["now"] += timedelta(seconds=1)
        return state["now"]

    return _now


@pytest.fixture
def create_user(client: FlaskClient) -> Callable[..., dict]:
    def _create(**overrides) -> dict:
        body = {"name": "Jo", "email": "jo@example.com"}
        body.update(overrides)
        response = client.post("/api/users", json=body)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _create
