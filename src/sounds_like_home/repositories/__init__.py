"""Data access helpers backed by SQLAlchemy sessions."""

from .cursor_repo import CursorRepository
from .prompt_repo import PromptRepository
from .recording_repo import RecordingRepository

__all__ = ["CursorRepository", "PromptRepository", "RecordingRepository"]
