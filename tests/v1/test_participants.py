# tests/v1/test_participants.py
"""Tests for the participant directory."""

from fastapi import status


def test_list_participants_redacts_hashes(client, alice, bob) -> None:
    response = client.get("/api/v1/participants/")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()

    assert [p["username"] for p in data] == ["alice", "bob"]
    assert [p["id"] for p in data] == [alice.id, bob.id]
    for entry in data:
        assert "password_hash" not in entry
        assert set(entry) == {"id", "username", "last_login", "created_at", "updated_at"}


def test_list_participants_empty(client) -> None:
    response = client.get("/api/v1/participants/")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []
