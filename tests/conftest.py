from __future__ import annotations

import itertools

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from main import create_app
from models.user import User

TOKEN_HEADER = "x-auth-token"
_emails = itertools.count(1)


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        jwt_secret="test-secret",
        environment="test",
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def register(client):
    """Register a user and return (headers, body)."""
    def _register(email: str | None = None, password: str = "secret123", **extra):
        payload = {
            "email": email or f"user{next(_emails)}@fitmail.com",
            "password": password,
            "fullName": extra.pop("fullName", "Test User"),
            **extra,
        }
        r = client.post("/api/auth/register", json=payload)
        assert r.status_code == 201, r.text
        return {TOKEN_HEADER: r.headers[TOKEN_HEADER]}, r.json()
    return _register


@pytest.fixture
def make_admin(db):
    def _make_admin(user_id: int) -> None:
        user = db.get(User, user_id)
        user.is_admin = True
        db.commit()
    return _make_admin


@pytest.fixture
def admin_headers(register, make_admin):
    headers, body = register(fullName="Admin")
    make_admin(body["id"])
    return headers


@pytest.fixture
def exercise(client, admin_headers):
    r = client.post(
        "/api/exercises",
        headers=admin_headers,
        json={
            "name": "Bench Press",
            "category": "chest",
            "equipment": "barbell",
            "instructions": "Lower the bar to the chest, press up.",
            "video_url": "https://videos.fitmail.com/bench",
            "image_url": "https://img.fitmail.com/bench.png",
        },
    )
    assert r.status_code == 201, r.text
    return r.json()
