"""Collaborator contracts consumed by the prompt sequencer.

The SQL repositories implement these protocols for the running service;
tests substitute in-memory versions.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


class RotatablePrompt(Protocol):
    """The prompt attributes the sequencer reads."""

    id: str
    text: str
    active: bool
    order: int


@dataclass(frozen=True)
class CursorState:
    """Snapshot of the persisted cursor.

    ``version`` is 0 when the cursor has never been written.
    """

    index: int = 0
    version: int = 0
    last_updated: datetime | None = None


class PromptStore(Protocol):
    def list(self) -> Sequence[RotatablePrompt]:
        """Return every prompt in stable insertion order."""
        ...


class CursorStore(Protocol):
    def read(self) -> CursorState:
        """Return the current cursor, or the default cursor if none is stored."""
        ...

    def write_if_unchanged(self, expected_version: int, index: int, now: datetime) -> bool:
        """Store ``index`` only if the version still equals ``expected_version``.

        Returns False when another writer got there first.
        """
        ...
