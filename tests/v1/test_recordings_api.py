# mypy: ignore-errors
# tests/v1/test_recordings_api.py
"""Tests for recording submission and playback endpoints."""

import base64

from fastapi import status

from sounds_like_home.models import Recording
from tests.conftest import add_recording

AUDIO_BYTES = b"\x1aE\xdf\xa3fake-webm-payload"


def _data_url(data: bytes, content_type: str = "audio/webm;codecs=opus") -> str:
    return f"data:{content_type};base64,{base64.b64encode(data).decode()}"


def test_submit_recording(client, db_session, audio_store) -> None:
    response = client.post(
        "/api/v1/recordings",
        json={"audioData": _data_url(AUDIO_BYTES), "prompt": "Describe your kitchen"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["success"] is True

    recording = db_session.get(Recording, body["id"])
    assert recording is not None
    assert recording.prompt == "Describe your kitchen"
    assert recording.approved is True
    assert recording.tags == []
    assert recording.content_type == "audio/webm"
    assert recording.size_bytes == len(AUDIO_BYTES)
    assert recording.filename == f"recording-{body['id']}.webm"
    assert audio_store.path_for(recording.filename).read_bytes() == AUDIO_BYTES


def test_submit_plain_base64_with_timestamp(client, db_session) -> None:
    response = client.post(
        "/api/v1/recordings",
        json={
            "audio_data": base64.b64encode(AUDIO_BYTES).decode(),
            "prompt": "Hum a tune",
            "timestamp": "2024-05-01T10:00:00Z",
            "duration": 14.5,
        },
    )

    assert response.status_code == status.HTTP_201_CREATED
    recording = db_session.get(Recording, response.json()["id"])
    assert recording.timestamp.year == 2024
    assert recording.duration == 14.5


def test_submit_rejects_bad_audio(client) -> None:
    response = client.post(
        "/api/v1/recordings",
        json={"audioData": "data:audio/webm;base64,@@not base64@@", "prompt": "Anything"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.post("/api/v1/recordings", json={"prompt": "Anything"})
    assert response.status_code == 422


def test_random_recording_only_returns_approved(client, db_session) -> None:
    approved = add_recording(db_session, "Visible", approved=True, tags=["rain"])
    add_recording(db_session, "Hidden", approved=False)

    for _ in range(5):
        response = client.get("/api/v1/recordings/random")
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["id"] == approved.id
        assert body["tags"] == ["rain"]
        assert "approved" not in body


def test_random_recording_when_none(client) -> None:
    response = client.get("/api/v1/recordings/random")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "No recordings available"


def test_recording_count(client, db_session) -> None:
    add_recording(db_session, "One", approved=True)
    add_recording(db_session, "Two", approved=True)
    add_recording(db_session, "Three", approved=False)

    response = client.get("/api/v1/recordings/count")
    assert response.json() == {"count": 2}


def test_recording_audio_stream(client, db_session, audio_store) -> None:
    audio_store.save("clip.webm", AUDIO_BYTES)
    recording = add_recording(db_session, "Listen", filename="clip.webm")

    response = client.get(f"/api/v1/recordings/{recording.id}/audio")

    assert response.status_code == status.HTTP_200_OK
    assert response.content == AUDIO_BYTES
    assert response.headers["content-type"].startswith("audio/webm")


def test_recording_audio_missing(client, db_session) -> None:
    response = client.get("/api/v1/recordings/unknown/audio")
    assert response.status_code == status.HTTP_404_NOT_FOUND

    recording = add_recording(db_session, "No file", filename="gone.webm")
    response = client.get(f"/api/v1/recordings/{recording.id}/audio")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Audio file not found"
