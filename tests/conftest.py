import os

# app.main builds an application at import time; give it a throwaway config.
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("ROUNDS_OF_HASHING", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from app.core.config import load_settings
from app.main import create_application

TEST_SECRET = "test-secret"


@pytest.fixture()
def settings():
    """Settings for an isolated in-memory database and the cheapest bcrypt cost."""
    return load_settings(
        {
            "JWT_SECRET": TEST_SECRET,
            "ROUNDS_OF_HASHING": "4",
            "DATABASE_URL": "sqlite://",
            "LOG_LEVEL": "WARNING",
        }
    )


@pytest.fixture()
def app(settings):
    return create_application(settings)


@pytest.fixture()
def client(app):
    # Entering the client runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db(app, client):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def hasher(app):
    return app.state.password_hasher


@pytest.fixture()
def tokens(app):
    return app.state.token_service


def create_user(client, email="a@b.com", password="secret123", name=None):
    payload = {"email": email, "password": password}
    if name is not None:
        payload["name"] = name
    resp = client.post("/api/v1/users/", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def login(client, email="a@b.com", password="secret123"):
    return client.post("/api/v1/auth/login", json={"email": email, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def user(client):
    return create_user(client)


@pytest.fixture()
def token(client, user):
    resp = login(client)
    assert resp.status_code == 200, resp.text
    return resp.json()["accessToken"]
