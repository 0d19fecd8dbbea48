from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient

from storefront.app import create_app
from storefront.container import Container
from storefront.shared.config import AppConfig

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


class FakeClock:
    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def container(clock: FakeClock) -> Container:
    return Container(AppConfig(), clock=clock)


@pytest.fixture()
def app(container: Container) -> Flask:
    app = create_app(container)
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def login(client: FlaskClient) -> Callable[[str], dict[str, str]]:
    def _login(username: str = "demo") -> dict[str, str]:
        response = client.post("/auth/login", json={"username": username, "password": "password"})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.get_json()['token']}"}

    return _login
