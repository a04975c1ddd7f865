"""Shared fixtures: a Flask app wired to an in-memory mongomock client."""
from datetime import datetime, timedelta

import mongomock
import pytest

from backend.app import create_app
from backend.models.user_model import Caller


@pytest.fixture()
def app():
    return create_app("backend.config.TestingConfig", mongo_client=mongomock.MongoClient())


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def tasks():
    """Bare ``tasks`` collection for service-level tests."""
    return mongomock.MongoClient().db.tasks


@pytest.fixture()
def alice():
    return Caller(user_id="user-a", username="alice")


@pytest.fixture()
def bob():
    return Caller(user_id="user-b", username="bob")


@pytest.fixture()
def clock():
    """Strictly increasing timestamps so newest-first ordering is deterministic."""
    start = datetime(2024, 1, 1, 12, 0, 0)
    ticks = iter(range(10_000))
    return lambda: start + timedelta(seconds=next(ticks))


def _register(client, username, password="secret"):
    resp = client.post("/api/auth/register", json={"username": username, "password": password})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


@pytest.fixture()
def register(client):
    """Register a user and return (auth headers, user json)."""
    def _do(username):
        body = _register(client, username)
        return {"Authorization": f"Bearer {body['access_token']}"}, body["user"]
    return _do
