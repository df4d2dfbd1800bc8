"""Pytest configuration and shared fixtures for the MyWallet API tests.

Every test gets its own SQLite file under ``tmp_path`` so tests never
touch a real database and never see each other's rows.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from mywallet_api.app.core.config import settings
from mywallet_api.app.core.db import init_db
from mywallet_api.app.main import app


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the store at a fresh database file and migrate it."""
    db_path = tmp_path / "mywallet_test.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture
def client():
    """A test client running the application's startup hooks."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def participant():
    """Registration payload for a default participant."""
    return {"name": "Maria", "email": "maria@example.com", "password": "abc123"}


@pytest.fixture
def register(client):
    def _register(payload):
        return client.post("/participants", json=payload)

    return _register


@pytest.fixture
def token(client, register, participant):
    """Register the default participant, log in and return the token."""
    assert register(participant).status_code == 201
    response = client.post(
        "/user",
        json={"email": participant["email"], "password": participant["password"]},
    )
    assert response.status_code == 200
    return response.json()["token"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
