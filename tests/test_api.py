"""Tests de l'API FastAPI (authentification, messages, utilisateurs)."""

from fastapi.testclient import TestClient

from app import create_app
from infrastructure.dependencies import get_user_service


def _register(client, username, password, **profile):
    response = client.post("/auth/register", json={
        "username": username,
        "password": password,
        "firstName": profile.get("first_name", username.title()),
        "lastName": profile.get("last_name", "Test"),
        "phone": profile.get("phone", "555-0000"),
    })
    assert response.status_code == 201, response.text
    return response.json()["token"]


def _login(client, username, password):
    response = client.post("/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def test_root_and_health_endpoints(client):
    assert client.get("/").json()["service"] == "messagely-api"

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_returns_username_and_token(client):
    response = client.post("/auth/register", json={
        "username": "alice", "password": "pw1",
        "first_name": "Alice", "last_name": "Liddell", "phone": "555-0100",
    })

    assert response.status_code == 201
    data = response.json()
    assert data["username"] == "alice"
    assert data["token"]


def test_register_missing_fields_and_duplicate(client):
    response = client.post("/auth/register", json={"username": "alice"})
    assert response.status_code == 400
    assert "error" in response.json()

    _register(client, "alice", "pw1")
    response = client.post("/auth/register", json={"username": "alice", "password": "x"})
    assert response.status_code == 409
    assert "error" in response.json()


def test_login_errors(client):
    _register(client, "alice", "pw1")

    response = client.post("/auth/login", json={"username": "alice"})
    assert response.status_code == 400
    assert "error" in response.json()

    response = client.post("/auth/login", json={"username": "alice", "password": "bad"})
    assert response.status_code == 401
    assert "error" in response.json()

    response = client.post("/auth/login", json={"username": "ghost", "password": "pw1"})
    assert response.status_code == 401


def test_login_returns_message_and_token(client):
    _register(client, "alice", "pw1")

    response = client.post("/auth/login", json={"username": "alice", "password": "pw1"})

    assert response.status_code == 200
    assert response.json()["message"] == "Logged in!"
    assert response.json()["token"]


def test_protected_routes_require_valid_token(client):
    _register(client, "alice", "pw1")

    assert client.get("/messages/anything").status_code == 401
    assert client.post("/messages", json={"toUsername": "alice", "body": "hi"}).status_code == 401
    assert client.post("/messages/anything/read").status_code == 401

    response = client.get("/users", headers=_auth("not-a-token"))
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"

    response = client.get("/users", headers={"Authorization": "Basic abc"})
    assert response.status_code == 401


def test_send_message_errors(client):
    token = _register(client, "alice", "pw1")

    response = client.post("/messages", json={"toUsername": "ghost", "body": "hi"}, headers=_auth(token))
    assert response.status_code == 404

    _register(client, "bob", "pw2")
    response = client.post("/messages", json={"toUsername": "bob", "body": ""}, headers=_auth(token))
    assert response.status_code == 400

    response = client.post("/messages", json={"body": "hi"}, headers=_auth(token))
    assert response.status_code == 400


def test_unknown_message_returns_404(client):
    token = _register(client, "alice", "pw1")

    assert client.get("/messages/missing", headers=_auth(token)).status_code == 404
    assert client.post("/messages/missing/read", headers=_auth(token)).status_code == 404


def test_end_to_end_message_flow(client):
    _register(client, "alice", "pw1")
    _register(client, "bob", "pw2")
    _register(client, "carol", "pw3")

    alice = _login(client, "alice", "pw1")
    response = client.post("/messages", json={"toUsername": "bob", "body": "hi"}, headers=_auth(alice))
    assert response.status_code == 201
    sent = response.json()["message"]
    assert sent["fromUsername"] == "alice"
    assert sent["toUsername"] == "bob"
    assert sent["body"] == "hi"
    assert sent["sentAt"].endswith("Z")
    message_id = sent["id"]

    bob = _login(client, "bob", "pw2")
    response = client.get(f"/messages/{message_id}", headers=_auth(bob))
    assert response.status_code == 200
    detail = response.json()["message"]
    assert detail["readAt"] is None
    assert detail["fromUser"] == {
        "username": "alice", "firstName": "Alice", "lastName": "Test", "phone": "555-0000"
    }
    assert detail["toUser"]["username"] == "bob"

    carol = _login(client, "carol", "pw3")
    assert client.get(f"/messages/{message_id}", headers=_auth(carol)).status_code == 403
    assert client.post(f"/messages/{message_id}/read", headers=_auth(carol)).status_code == 403

    response = client.post(f"/messages/{message_id}/read", headers=_auth(bob))
    assert response.status_code == 200
    read = response.json()["message"]
    assert read["id"] == message_id
    assert read["readAt"].endswith("Z")

    for token in (alice, bob):
        response = client.get(f"/messages/{message_id}", headers=_auth(token))
        assert response.json()["message"]["readAt"] == read["readAt"]

    response = client.post(f"/messages/{message_id}/read", headers=_auth(alice))
    assert response.status_code == 403


def test_user_routes(client):
    alice = _register(client, "alice", "pw1")
    bob = _register(client, "bob", "pw2")
    client.post("/messages", json={"toUsername": "bob", "body": "hello bob"}, headers=_auth(alice))

    response = client.get("/users", headers=_auth(bob))
    assert response.status_code == 200
    users = response.json()["users"]
    assert [u["username"] for u in users] == ["alice", "bob"]
    assert "password" not in users[0] and "passwordHash" not in users[0]

    response = client.get("/users/alice", headers=_auth(alice))
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["joinedAt"].endswith("Z")
    assert user["lastLoginAt"].endswith("Z")
    assert "passwordHash" not in user

    assert client.get("/users/alice", headers=_auth(bob)).status_code == 403
    assert client.get("/users/alice/from", headers=_auth(bob)).status_code == 403

    sent = client.get("/users/alice/from", headers=_auth(alice)).json()["messages"]
    assert [m["body"] for m in sent] == ["hello bob"]
    assert sent[0]["toUser"]["username"] == "bob"

    received = client.get("/users/bob/to", headers=_auth(bob)).json()["messages"]
    assert received[0]["fromUser"]["username"] == "alice"
    assert received[0]["readAt"] is None


def test_unexpected_error_returns_500_without_details(test_config):
    app = create_app(test_config)

    class BrokenUserService:
        def list_users(self):
            raise RuntimeError("database exploded")

    app.dependency_overrides[get_user_service] = lambda: BrokenUserService()

    with TestClient(app, raise_server_exceptions=False) as client:
        token = _register(client, "alice", "pw1")
        response = client.get("/users", headers=_auth(token))

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
