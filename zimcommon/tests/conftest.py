from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient

from zimcommon.app import create_app
from zimcommon.application.services.credentials import CredentialManager
from zimcommon.application.services.session_tokens import SessionTokenService
from zimcommon.infrastructure.container import Container
from zimcommon.shared.config import AIConfig, AppConfig, AuthConfig, DatabaseConfig
from zimcommon.tests.fakes import StubAssistant

TEST_SECRET = "test-signing-key-0123456789abcdef"


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture()
def auth_config() -> AuthConfig:
    return AuthConfig(JWT_SECRET=TEST_SECRET, BCRYPT_ROUNDS=4, TOKEN_TTL_DAYS=7)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 3, 1, 12, 0, 0, tzinfo=UTC))


@pytest.fixture()
def credentials(auth_config: AuthConfig) -> CredentialManager:
    return CredentialManager(auth_config)


@pytest.fixture()
def tokens(auth_config: AuthConfig) -> SessionTokenService:
    return SessionTokenService(auth_config)


@pytest.fixture()
def app_config(auth_config: AuthConfig) -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        auth=auth_config,
        database=DatabaseConfig(DATABASE_URL="sqlite://"),
        ai=AIConfig(GOOGLE_AI_API_KEY=None),
    )


@pytest.fixture()
def assistant() -> StubAssistant:
    return StubAssistant()


@pytest.fixture()
def container(app_config: AppConfig, assistant: StubAssistant) -> Container:
    container = Container(app_config)
    container.assistant = assistant  # type: ignore[misc]
    return container


@pytest.fixture()
def app(container: Container) -> Iterator[Flask]:
    app = create_app(container=container)
    app.config.update(TESTING=True)
    yield app
    container.database.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def auth_headers(client: FlaskClient) -> dict[str, str]:
    response = client.post(
        "/api/auth/signup",
        json={"name": "Tendai", "email": "tendai@example.com", "password": "Abcdef1!"},
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.get_json()['token']}"}
