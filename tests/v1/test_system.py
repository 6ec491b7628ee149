# tests/v1/test_system.py
"""Tests for system endpoints."""

from fastapi import status


def test_public_config_has_no_secrets(client) -> None:
    response = client.get("/api/v1/system/config")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["app"]["name"]
    assert "secret_key" not in str(data)
    assert "database_url" not in str(data)


def test_stats(client, alice_headers, bob_headers, bob) -> None:
    client.post(
        "/api/v1/messages/",
        json={"title": "hi", "body": "hello", "recipient_id": bob.id},
        headers=alice_headers,
    )

    response = client.get("/api/v1/system/stats")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "participants": 2,
        "messages": 1,
        "unread_messages": 1,
        "active_sessions": 2,
    }
