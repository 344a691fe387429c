"""Service-level helpers for submitting and moderating recordings."""
from __future__ import annotations

import base64
import binascii
import logging
import random
import re
import uuid
from datetime import datetime

from sounds_like_home.db.time import utcnow
from sounds_like_home.models.recording import Recording
from sounds_like_home.repositories.recording_repo import RecordingRepository
from sounds_like_home.services.audio_store import AudioStore
from sounds_like_home.services.errors import InvalidAudioError, RecordingNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "audio/webm"

# e.g. "data:audio/webm;codecs=opus;base64,"
_DATA_URL_PREFIX = re.compile(r"^data:(?P<content_type>audio/[^;,]+)[^,]*;base64,")

_EXTENSIONS = {
    "audio/webm": "webm",
    "audio/ogg": "ogg",
    "audio/mpeg": "mp3",
    "audio/mp4": "m4a",
    "audio/wav": "wav",
    "audio/x-wav": "wav",
}


def decode_audio_payload(audio_data: str, *, max_bytes: int) -> tuple[bytes, str]:
    """Decode a base64 audio payload, optionally wrapped in a data URL.

    Returns:
        The raw audio bytes and their content type.

    Raises:
        InvalidAudioError: If the payload is empty, not base64, or too large.
    """
    content_type = DEFAULT_CONTENT_TYPE
    payload = audio_data.strip()
    match = _DATA_URL_PREFIX.match(payload)
    if match:
        content_type = match.group("content_type").lower()
        payload = payload[match.end():]

    try:
        audio = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as err:
        raise InvalidAudioError("Audio data is not valid base64") from err

    if not audio:
        raise InvalidAudioError("Audio data is empty")
    if len(audio) > max_bytes:
        raise InvalidAudioError(f"Audio exceeds the {max_bytes} byte limit")
    return audio, content_type


def normalize_tags(tags: list[str]) -> list[str]:
    """Strip tags, drop blanks and duplicates, keep first-seen order."""
    seen: dict[str, None] = {}
    for tag in tags:
        cleaned = tag.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)


def submit_recording(
    *,
    repo: RecordingRepository,
    audio_store: AudioStore,
    audio_data: str,
    prompt: str,
    max_bytes: int,
    approved: bool,
    timestamp: datetime | None = None,
    duration: float | None = None,
) -> Recording:
    """Store a visitor's clip and its metadata.

    The prompt text is copied onto the recording as submitted.
    """
    audio, content_type = decode_audio_payload(audio_data, max_bytes=max_bytes)
    recording_id = str(uuid.uuid4())
    extension = _EXTENSIONS.get(content_type, "webm")
    filename = f"recording-{recording_id}.{extension}"

    audio_store.save(filename, audio)
    recording = Recording(
        id=recording_id,
        prompt=prompt,
        filename=filename,
        content_type=content_type,
        size_bytes=len(audio),
        timestamp=timestamp or utcnow(),
        tags=[],
        approved=approved,
        duration=duration,
    )
    try:
        repo.create(recording)
    except Exception:
        # Do not leave orphaned audio behind when metadata could not be saved.
        audio_store.delete(filename)
        raise
    logger.info("Recording %s saved (%d bytes, %s)", recording_id, len(audio), content_type)
    return recording


def pick_random_approved(
    repo: RecordingRepository,
    rng: random.Random | None = None,
) -> Recording:
    """Return one approved recording chosen uniformly at random."""
    approved = repo.list_approved()
    if not approved:
        raise RecordingNotFoundError("No recordings available")
    return (rng or random).choice(approved)


def get_recording(repo: RecordingRepository, recording_id: str) -> Recording:
    recording = repo.get(recording_id)
    if recording is None:
        raise RecordingNotFoundError("Recording not found")
    return recording


def update_recording(
    *,
    repo: RecordingRepository,
    recording_id: str,
    tags: list[str] | None = None,
    approved: bool | None = None,
) -> Recording:
    """Apply admin moderation changes to a recording."""
    recording = get_recording(repo, recording_id)
    cleaned_tags = normalize_tags(tags) if tags is not None else None
    return repo.update(recording, tags=cleaned_tags, approved=approved)


def delete_recording(
    *,
    repo: RecordingRepository,
    audio_store: AudioStore,
    recording_id: str,
) -> None:
    """Delete a recording and its audio.

    A missing or undeletable audio file is logged and does not block removal
    of the metadata.
    """
    recording = get_recording(repo, recording_id)
    if recording.filename:
        try:
            if not audio_store.delete(recording.filename):
                logger.warning("Audio file for recording %s was already gone", recording_id)
        except (OSError, ValueError) as exc:
            logger.warning("Could not delete audio for recording %s: %s", recording_id, exc)
    repo.delete(recording)
    logger.info("Recording %s deleted", recording_id)
