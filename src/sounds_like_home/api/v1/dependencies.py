"""Shared API dependencies for authentication and service wiring."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from sounds_like_home.core.security import ADMIN_SUBJECT, decode_access_token
from sounds_like_home.core.settings import settings
from sounds_like_home.db.session import get_db
from sounds_like_home.repositories import CursorRepository, PromptRepository, RecordingRepository
from sounds_like_home.services.audio_store import AudioStore, get_audio_store
from sounds_like_home.services.sequencer import PromptSequencer

# HTTP Bearer scheme for admin JWT authentication
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_prompt_repository(db: SessionDep) -> PromptRepository:
    return PromptRepository(db)


def get_recording_repository(db: SessionDep) -> RecordingRepository:
    return RecordingRepository(db)


def get_prompt_sequencer(db: SessionDep) -> PromptSequencer:
    """Build a sequencer over the request's database session."""
    return PromptSequencer(
        PromptRepository(db),
        CursorRepository(db),
        max_retries=settings.cursor_write_max_retries,
    )


def get_audio_store_dep() -> AudioStore:
    return get_audio_store()


def require_admin(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> str:
    """Validate the admin bearer token.

    Returns:
        The token subject.

    Raises:
        HTTPException: If the token is invalid, expired, or not an admin token.
    """
    subject = decode_access_token(credentials.credentials)
    if subject != ADMIN_SUBJECT:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return subject


PromptRepoDep = Annotated[PromptRepository, Depends(get_prompt_repository)]
RecordingRepoDep = Annotated[RecordingRepository, Depends(get_recording_repository)]
SequencerDep = Annotated[PromptSequencer, Depends(get_prompt_sequencer)]
AudioStoreDep = Annotated[AudioStore, Depends(get_audio_store_dep)]
AdminDep = Annotated[str, Depends(require_admin)]
