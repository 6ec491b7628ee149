# tests/v1/test_integration.py
"""End-to-end scenario across registration, login and messaging."""

from fastapi import status


def _login(client, username, password):
    response = client.post("/api/v1/auth/login", json={"username": username, "password": password})
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    return {"Authorization": f"Bearer {body['access_token']}"}, body


def test_alice_writes_to_bob(client) -> None:
    alice = client.post("/api/v1/auth/register", json={"username": "alice", "password": "pw1"}).json()
    bob = client.post("/api/v1/auth/register", json={"username": "bob", "password": "pw2"}).json()

    alice_headers, alice_login = _login(client, "alice", "pw1")
    assert alice_login["unread_count"] == 0

    response = client.post(
        "/api/v1/messages/",
        json={"title": "hi", "body": "hello", "recipient_id": bob["id"]},
        headers=alice_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    message = response.json()
    assert message["sender_id"] == alice["id"]

    bob_headers, bob_login = _login(client, "bob", "pw2")
    assert bob_login["unread_count"] == 1
    assert bob_login["summary"] == "You have 1 new messages"

    response = client.get("/api/v1/messages/unread", headers=bob_headers)
    assert response.status_code == status.HTTP_200_OK
    unread = response.json()
    assert len(unread) == 1
    assert unread[0]["id"] == message["id"]
    assert unread[0]["read"] is True

    # Alice's session is unaffected by Bob logging in.
    response = client.delete(f"/api/v1/messages/{message['id']}", headers=alice_headers)
    assert response.status_code == status.HTTP_200_OK


def test_last_login_is_recorded(client) -> None:
    client.post("/api/v1/auth/register", json={"username": "erin", "password": "pw"})
    _login(client, "erin", "pw")

    participants = client.get("/api/v1/participants/").json()
    assert participants[0]["last_login"] is not None
