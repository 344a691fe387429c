# mypy: ignore-errors
# tests/v1/test_admin_recordings.py
"""Tests for recording moderation endpoints."""

from fastapi import status

from sounds_like_home.models import Recording
from tests.conftest import add_recording


def test_list_all_recordings(client, admin_headers, db_session) -> None:
    add_recording(db_session, "Approved", approved=True)
    add_recording(db_session, "Pending", approved=False)

    response = client.get("/api/v1/admin/recordings", headers=admin_headers)

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert {item["prompt"] for item in body} == {"Approved", "Pending"}
    assert {item["approved"] for item in body} == {True, False}


def test_list_requires_admin(client) -> None:
    response = client.get("/api/v1/admin/recordings")
    assert response.status_code in {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN}


def test_update_tags_and_approval(client, admin_headers, db_session) -> None:
    recording = add_recording(db_session, "Tag me", approved=True)

    response = client.put(
        f"/api/v1/admin/recordings/{recording.id}",
        json={"tags": [" birds ", "morning", "birds", ""], "approved": False},
        headers=admin_headers,
    )

    assert response.status_code == status.HTTP_200_OK
    updated = response.json()["recording"]
    assert updated["tags"] == ["birds", "morning"]
    assert updated["approved"] is False

    assert client.get("/api/v1/recordings/count").json() == {"count": 0}


def test_update_missing_recording(client, admin_headers) -> None:
    response = client.put(
        "/api/v1/admin/recordings/missing",
        json={"approved": True},
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_recording_removes_audio(client, admin_headers, db_session, audio_store) -> None:
    audio_store.save("to-delete.webm", b"audio")
    recording = add_recording(db_session, "Bye", filename="to-delete.webm")

    response = client.delete(f"/api/v1/admin/recordings/{recording.id}", headers=admin_headers)

    assert response.status_code == status.HTTP_200_OK
    assert not audio_store.exists("to-delete.webm")
    assert db_session.get(Recording, recording.id) is None


def test_delete_recording_without_audio_file(client, admin_headers, db_session) -> None:
    recording = add_recording(db_session, "Orphan", filename="never-written.webm")

    response = client.delete(f"/api/v1/admin/recordings/{recording.id}", headers=admin_headers)

    assert response.status_code == status.HTTP_200_OK
    assert db_session.get(Recording, recording.id) is None

    response = client.delete(f"/api/v1/admin/recordings/{recording.id}", headers=admin_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
