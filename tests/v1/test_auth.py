# tests/v1/test_auth.py
"""Tests for authentication endpoints."""

from __future__ import annotations

from fastapi import status

from tests.conftest import ALICE_PASSWORD


def test_register_participant_success(client) -> None:
    response = client.post(
        "/api/v1/auth/register",
        json={"username": "dave", "password": "hunter2"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()

    assert data["username"] == "dave"
    assert data["id"]
    assert data["last_login"] is None
    assert "password_hash" not in data
    assert "password" not in data


def test_register_duplicate_username(client, alice) -> None:
    response = client.post(
        "/api/v1/auth/register",
        json={"username": "alice", "password": "another"},
    )
    assert response.status_code == status.HTTP_409_CONFLICT
    body = response.json()
    assert body["code"] == "UsernameTaken"
    assert body["detail"] == "Username alice already taken"

    listing = client.get("/api/v1/participants/").json()
    assert [p["username"] for p in listing] == ["alice"]


def test_register_rejects_empty_fields(client) -> None:
    response = client.post("/api/v1/auth/register", json={"username": "", "password": "pw"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    response = client.post("/api/v1/auth/register", json={"username": "x", "password": "x" * 73})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_login_success(client, alice) -> None:
    response = client.post(
        "/api/v1/auth/login",
        json={"username": "alice", "password": ALICE_PASSWORD},
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["unread_count"] == 0
    assert data["summary"] == "You have no new messages"


def test_login_invalid_username(client, alice) -> None:
    response = client.post(
        "/api/v1/auth/login",
        json={"username": "mallory", "password": ALICE_PASSWORD},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"detail": "Invalid username", "code": "InvalidUsername"}


def test_login_invalid_password(client, alice, db_session) -> None:
    response = client.post(
        "/api/v1/auth/login",
        json={"username": "alice", "password": "wrong"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"detail": "Invalid password", "code": "InvalidPassword"}

    db_session.refresh(alice)
    assert alice.last_login is None


def test_logout_flow(client, alice_headers) -> None:
    response = client.post("/api/v1/auth/logout", headers=alice_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "logged_out", "detail": "User successfully logged out"}

    response = client.post("/api/v1/auth/logout", headers=alice_headers)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["code"] == "NoActiveSession"


def test_logout_without_session(client) -> None:
    response = client.post("/api/v1/auth/logout")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "No logged-in user to logout"


def test_revoked_token_cannot_send(client, alice_headers, bob) -> None:
    client.post("/api/v1/auth/logout", headers=alice_headers)

    response = client.post(
        "/api/v1/messages/",
        json={"title": "hi", "body": "hello", "recipient_id": bob.id},
        headers=alice_headers,
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["code"] == "NotAuthenticated"
