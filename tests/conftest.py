"""
Test configuration and fixtures.

Every test gets its own in-memory SQLite database. The demo state is built once
per session because hashing the demo passwords is comparatively slow; its
records are never mutated in place so sharing it is safe.
"""
import pytest
from sqlmodel import create_engine
from sqlalchemy.pool import StaticPool

from studio_dash.db.seed import demo_state
from studio_dash.db.store import StateStore

API = "/api/v1"


@pytest.fixture(scope="session")
def seed_state():
    return demo_state()


@pytest.fixture(scope="function")
def engine():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def store(engine, seed_state):
    return StateStore(engine, seed=lambda: seed_state)


@pytest.fixture(scope="function")
def client(store):
    """Create a test client with the state store override."""
    from fastapi.testclient import TestClient
    from studio_dash.api import deps
    from studio_dash.main import app

    app.dependency_overrides[deps.get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def login(client, username="admin", password="admin123"):
    return client.post(
        f"{API}/auth/login",
        data={"username": username, "password": password},
    )


@pytest.fixture
def auth_headers(client):
    """Get authentication headers for the demo admin."""
    response = login(client)
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
