"""
Pytest configuration and fixtures for the User Records API tests.

Every test gets its own SQLite database file (through aiosqlite) and a
freshly built application, so settings, limiter storage and data never
leak between tests.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.main import create_application
from app.shared.config.settings import get_settings
from app.shared.core.security import get_security_manager

USERS_URL = "/api/v1/users"


def clear_caches() -> None:
    get_settings.cache_clear()
    get_security_manager.cache_clear()


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    """Path of the per-test SQLite database file."""
    return tmp_path / "test.db"


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch, database_path: Path) -> Generator[None, None, None]:
    """
    Point the application at a throwaway database and test-friendly settings.

    Clears the cached settings and security manager before and after each
    test so overrides take effect.
    """
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{database_path}")
    monkeypatch.setenv("DB_CREATE_TABLES", "true")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("RATE_LIMIT", "1000/minute")
    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    monkeypatch.setenv("LOG_FORMAT", "text")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    clear_caches()
    yield
    clear_caches()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """
    Create a test client for a freshly built application.

    Entering the client runs the lifespan, which creates the tables.

    Yields:
        TestClient instance.
    """
    with TestClient(create_application()) as test_client:
        yield test_client


@pytest.fixture
def storage(database_path: Path, client: TestClient) -> Generator[Engine, None, None]:
    """
    Synchronous engine on the test database for checking stored rows directly.

    Depends on ``client`` so the schema exists before it is used.
    """
    engine = create_engine(f"sqlite:///{database_path}")
    yield engine
    engine.dispose()


def user_payload(**overrides: Any) -> Dict[str, Any]:
    """Valid create payload, with any field overridden."""
    payload = {
        "name": "John Doe",
        "email": "john@example.com",
        "password": "SecurePass123!",
        "role": "user",
        "phone": "+1234567890",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_user(client: TestClient) -> Callable[..., Dict[str, Any]]:
    """
    Factory creating a user through the API and returning its ``data``.

    Usage:
        user = create_user(email="jane@example.com", role="moderator")
    """
    def _create(**overrides: Any) -> Dict[str, Any]:
        response = client.post(USERS_URL, json=user_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
