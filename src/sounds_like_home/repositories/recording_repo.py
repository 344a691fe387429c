"""Data access helpers for working with recordings."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from sounds_like_home.models.recording import Recording

__all__ = ["RecordingRepository"]


class RecordingRepository:
    """Thin wrapper around database access for recording entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, recording_id: str) -> Recording | None:
        """Return a recording by identifier."""
        return self.session.get(Recording, recording_id)

    def list(self) -> list[Recording]:
        """Return all recordings, newest first."""
        result = self.session.execute(
            select(Recording).order_by(Recording.timestamp.desc(), Recording.id)
        )
        return list(result.scalars())

    def list_approved(self) -> list[Recording]:
        """Return recordings cleared for public playback."""
        result = self.session.execute(
            select(Recording)
            .where(Recording.approved.is_(True))
            .order_by(Recording.timestamp, Recording.id)
        )
        return list(result.scalars())

    def count_approved(self) -> int:
        """Return the number of approved recordings."""
        count = self.session.execute(
            select(func.count()).select_from(Recording).where(Recording.approved.is_(True))
        ).scalar()
        return int(count or 0)

    def list_by_prompt_text(self, texts: list[str]) -> list[Recording]:
        """Return recordings whose denormalised prompt text is in ``texts``."""
        if not texts:
            return []
        result = self.session.execute(
            select(Recording)
            .where(Recording.prompt.in_(texts))
            .order_by(Recording.timestamp, Recording.id)
        )
        return list(result.scalars())

    def create(self, recording: Recording) -> Recording:
        """Insert ``recording`` and commit."""
        self.session.add(recording)
        self.session.commit()
        self.session.refresh(recording)
        return recording

    def update(
        self,
        recording: Recording,
        *,
        tags: list[str] | None = None,
        approved: bool | None = None,
    ) -> Recording:
        """Apply moderation changes and commit."""
        if tags is not None:
            recording.tags = tags
        if approved is not None:
            recording.approved = approved
        self.session.commit()
        self.session.refresh(recording)
        return recording

    def delete(self, recording: Recording) -> None:
        """Remove a recording row and commit."""
        self.session.delete(recording)
        self.session.commit()
