"""Public recording endpoints: submission and playback."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from sounds_like_home.api.v1.dependencies import AudioStoreDep, RecordingRepoDep
from sounds_like_home.core.settings import settings
from sounds_like_home.schemas.recording import (
    RecordingCount,
    RecordingCreate,
    RecordingCreated,
    RecordingPublic,
)
from sounds_like_home.services import recording_service
from sounds_like_home.services.errors import InvalidAudioError, RecordingNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recordings", tags=["recordings"])


@router.post("", response_model=RecordingCreated, status_code=status.HTTP_201_CREATED)
async def submit_recording(
    payload: RecordingCreate,
    repo: RecordingRepoDep,
    audio_store: AudioStoreDep,
) -> RecordingCreated:
    """Accept a clip recorded in response to a prompt."""
    try:
        recording = recording_service.submit_recording(
            repo=repo,
            audio_store=audio_store,
            audio_data=payload.audio_data,
            prompt=payload.prompt,
            timestamp=payload.timestamp,
            duration=payload.duration,
            max_bytes=settings.max_audio_bytes,
            approved=settings.auto_approve_recordings,
        )
    except InvalidAudioError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except OSError as err:
        logger.error("Failed to store audio: %s", err)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to save recording",
        ) from err
    return RecordingCreated(id=recording.id)


@router.get("/random", response_model=RecordingPublic)
async def random_recording(repo: RecordingRepoDep) -> RecordingPublic:
    """Return a random approved recording for listening."""
    try:
        recording = recording_service.pick_random_approved(repo)
    except RecordingNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    return RecordingPublic.model_validate(recording)


@router.get("/count", response_model=RecordingCount)
async def recording_count(repo: RecordingRepoDep) -> RecordingCount:
    return RecordingCount(count=repo.count_approved())


@router.get("/{recording_id}/audio", response_class=FileResponse)
async def recording_audio(
    recording_id: str,
    repo: RecordingRepoDep,
    audio_store: AudioStoreDep,
) -> FileResponse:
    """Stream the stored audio for a recording."""
    try:
        recording = recording_service.get_recording(repo, recording_id)
    except RecordingNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err

    if not recording.filename or not audio_store.exists(recording.filename):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Audio file not found")

    return FileResponse(
        audio_store.path_for(recording.filename),
        media_type=recording.content_type,
        headers={"Accept-Ranges": "bytes"},
    )
