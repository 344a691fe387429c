"""Admin endpoints for moderating recordings."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from sounds_like_home.api.v1.dependencies import AudioStoreDep, RecordingRepoDep, require_admin
from sounds_like_home.schemas.auth import SuccessResponse
from sounds_like_home.schemas.recording import (
    RecordingMutationResponse,
    RecordingResponse,
    RecordingUpdate,
)
from sounds_like_home.services import recording_service
from sounds_like_home.services.errors import RecordingNotFoundError

router = APIRouter(
    prefix="/admin/recordings",
    tags=["admin", "recordings"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=list[RecordingResponse])
async def list_recordings(repo: RecordingRepoDep) -> list[RecordingResponse]:
    """List every recording, approved or not, newest first."""
    return [RecordingResponse.model_validate(recording) for recording in repo.list()]


@router.put("/{recording_id}", response_model=RecordingMutationResponse)
async def update_recording(
    recording_id: str,
    payload: RecordingUpdate,
    repo: RecordingRepoDep,
) -> RecordingMutationResponse:
    """Set tags and/or approval on a recording."""
    try:
        recording = recording_service.update_recording(
            repo=repo,
            recording_id=recording_id,
            tags=payload.tags,
            approved=payload.approved,
        )
    except RecordingNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    return RecordingMutationResponse(recording=RecordingResponse.model_validate(recording))


@router.delete("/{recording_id}", response_model=SuccessResponse)
async def delete_recording(
    recording_id: str,
    repo: RecordingRepoDep,
    audio_store: AudioStoreDep,
) -> SuccessResponse:
    try:
        recording_service.delete_recording(
            repo=repo,
            audio_store=audio_store,
            recording_id=recording_id,
        )
    except RecordingNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    return SuccessResponse()
