# src/sounds_like_home/models/__init__.py
"""SQLAlchemy models for the Sounds Like Home service."""

from .prompt import Prompt
from .prompt_cursor import CURSOR_ROW_ID, PromptCursor
from .recording import Recording

__all__ = [
    "CURSOR_ROW_ID",
    "Prompt",
    "PromptCursor",
    "Recording",
]
