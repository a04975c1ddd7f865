"""
Tests for registration, login and token handling.
"""


def test_register_and_me(client, register):
    headers, user = register("alice")
    assert user["username"] == "alice"

    resp = client.get("/api/auth/me", headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["user"] == user


def test_register_duplicate_username(client, register):
    register("alice")
    resp = client.post("/api/auth/register", json={"username": "alice", "password": "x"})
    assert resp.status_code == 409
    assert resp.get_json()["error"] == "username-taken"


def test_register_requires_fields(client):
    resp = client.post("/api/auth/register", json={"username": "  "})
    assert resp.status_code == 400


def test_login(client, register):
    register("alice")
    resp = client.post("/api/auth/login", json={"username": "alice", "password": "secret"})
    assert resp.status_code == 200
    assert resp.get_json()["access_token"]

    bad = client.post("/api/auth/login", json={"username": "alice", "password": "wrong"})
    assert bad.status_code == 401
    assert bad.get_json()["error"] == "not-authorized"


def test_me_requires_token(client):
    assert client.get("/api/auth/me").status_code == 401
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "not-authorized"


def test_non_string_credentials_are_rejected(client, register):
    register("alice")
    bodies = [
        {"username": 5, "password": "secret"},
        {"username": "carol", "password": 123},
        {"username": ["alice"], "password": "secret"},
    ]
    for path in ("/api/auth/register", "/api/auth/login"):
        for body in bodies:
            resp = client.post(path, json=body)
            assert resp.status_code == 400
            assert resp.get_json()["error"] == "invalid-input"
