"""Pytest fixtures for API integration tests.

Every test gets its own SQLite file. The engine and settings caches are
cleared around each client so the app picks up the test database.
"""

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from shopfront.presentation.api.app import API_PREFIX, create_app
from shopfront.presentation.api.config import get_api_settings
from shopfront.presentation.api.dependencies import (
    get_database_url,
    get_engine,
    get_session_maker,
)
from shopfront_config.settings import clear_settings_cache

SUPERUSER = {
    "name": "Root",
    "email": "root@example.com",
    "password": "rootpass123",
}


def clear_api_caches() -> None:
    clear_settings_cache()
    get_api_settings.cache_clear()
    get_database_url.cache_clear()
    get_engine.cache_clear()
    get_session_maker.cache_clear()


@pytest.fixture
def api() -> str:
    """API prefix for building URLs."""
    return API_PREFIX


@pytest.fixture
def test_client(tmp_path, monkeypatch):
    """Test client on a fresh SQLite database (tables created by lifespan)."""
    monkeypatch.setenv(
        "DATABASE_URL",
        f"sqlite+aiosqlite:///{tmp_path / 'shopfront-test.db'}",
    )
    clear_api_caches()

    with TestClient(create_app()) as client:
        yield client

    clear_api_caches()


@pytest.fixture
def superuser_token(test_client: TestClient, api: str) -> str:
    """Complete the one-time setup and return the superuser's token."""
    response = test_client.post(f"{api}/superuser/create", json=SUPERUSER)
    assert response.status_code == 201, response.text
    return response.json()["token"]


@pytest.fixture
def register_user(test_client: TestClient, api: str) -> Callable[..., dict]:
    """Register a user through the API and return the response body."""

    def _register(
        email: str = "jane@example.com",
        name: str = "Jane",
        password: str = "secret123",
    ) -> dict:
        response = test_client.post(
            f"{api}/users/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_header() -> Callable[[str], dict[str, str]]:
    return bearer
