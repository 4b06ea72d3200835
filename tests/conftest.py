"""
Shared fixtures and configuration for the test suite.

The environment is configured before any application module is imported:
the application database is a throwaway SQLite file (driven through
aiosqlite), secrets are fixed test values, and bcrypt runs at its minimum
cost so the suite stays fast. Tables are dropped and recreated before every
test.
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="todo_api_tests_"))
_TEST_DB_PATH = _TEST_DIR / "test.db"

os.environ["TODO_API_DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_PATH}"
os.environ["JWT_SECRET_KEY"] = "test-signing-key"
os.environ["PASSWORD_PEPPER"] = "test-pepper"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_DIR"] = str(_TEST_DIR / "logs")

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402

from todo_api.models.base import Base  # noqa: E402

VALID_PASSWORD = "Passw0rd!"


@pytest.fixture(scope="session")
def sync_engine():
    """Synchronous engine on the same SQLite file, used only for schema resets."""
    engine = create_engine(f"sqlite:///{_TEST_DB_PATH}")
    yield engine
    engine.dispose()


@pytest.fixture(autouse=True)
def fresh_db(sync_engine) -> None:
    """
    Give every test empty tables.
    """
    Base.metadata.drop_all(sync_engine)
    Base.metadata.create_all(sync_engine)


@pytest.fixture(scope="session")
def app() -> FastAPI:
    """
    Create a new application instance for the test session.
    """
    from main import create_app

    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Test client for making API requests; runs the application lifespan.
    """
    with TestClient(app) as c:
        yield c


def register(client: TestClient, username: str, password: str = VALID_PASSWORD):
    return client.post(
        "/auth/register", json={"username": username, "password": password}
    )


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice_token(client: TestClient) -> str:
    response = register(client, "alice")
    assert response.status_code == 201
    return response.json()["token"]


@pytest.fixture
def bob_token(client: TestClient) -> str:
    response = register(client, "bob_2")
    assert response.status_code == 201
    return response.json()["token"]
