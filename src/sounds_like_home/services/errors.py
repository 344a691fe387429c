"""Domain errors raised by the service layer."""

from __future__ import annotations


class SequencerError(Exception):
    """Base class for prompt rotation failures."""


class NoActivePromptsError(SequencerError):
    """Raised when no prompt is active, so there is nothing to rotate through."""

    def __init__(self) -> None:
        super().__init__("No active prompts available")


class PromptNotFoundError(SequencerError):
    """Raised when a prompt id does not exist (or is not active where required)."""

    def __init__(self, prompt_id: str, *, require_active: bool = False) -> None:
        self.prompt_id = prompt_id
        detail = "Prompt not found or not active" if require_active else "Prompt not found"
        super().__init__(f"{detail}: {prompt_id}")


class StoreUnavailableError(SequencerError):
    """Raised when the backing store cannot be read or written."""


class CursorWriteConflictError(SequencerError):
    """Raised when a compare-and-swap cursor write keeps losing the race."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Cursor write conflicted on all {attempts} attempts")


class RecordingNotFoundError(Exception):
    """Raised when a recording (or its audio) cannot be located."""


class InvalidAudioError(ValueError):
    """Raised when submitted audio data cannot be decoded or is too large."""
