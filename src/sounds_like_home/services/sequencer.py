"""Round-robin rotation through the active prompts.

The active list is rebuilt from the prompt store on every call and the cursor
is a plain position into it. Writes to the cursor go through a
compare-and-swap on its version, retried a bounded number of times, so
concurrent callers never share a rotation step.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from operator import attrgetter
from typing import NoReturn

from sqlalchemy.exc import SQLAlchemyError

from sounds_like_home.db.time import utcnow
from sounds_like_home.services.errors import (
    CursorWriteConflictError,
    NoActivePromptsError,
    PromptNotFoundError,
    StoreUnavailableError,
)
from sounds_like_home.services.stores import CursorStore, PromptStore, RotatablePrompt

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 5

# Failures of the backing stores that surface as StoreUnavailableError.
STORE_ERRORS: tuple[type[BaseException], ...] = (SQLAlchemyError, OSError)


@dataclass(frozen=True)
class PromptPair:
    """Result of an advance: the prompt handed out and the one queued after it."""

    current: RotatablePrompt
    next: RotatablePrompt


def clamp_index(index: int, length: int) -> int:
    """Reinterpret a stored cursor position against a list of ``length`` items.

    Positions past the end (the list shrank) and negative positions restart at 0.
    """
    if index < 0 or index >= length:
        return 0
    return index


def active_prompts(prompts: Sequence[RotatablePrompt]) -> list[RotatablePrompt]:
    """Return active prompts sorted by ``order``; ties keep store order."""
    return sorted((prompt for prompt in prompts if prompt.active), key=attrgetter("order"))


class PromptSequencer:
    """Hands out prompts in rotation and lets admins peek or reorder the queue."""

    def __init__(
        self,
        prompts: PromptStore,
        cursor: CursorStore,
        *,
        max_retries: int = DEFAULT_MAX_RETRIES,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._prompts = prompts
        self._cursor = cursor
        self._max_retries = max_retries
        self._clock = clock

    @contextmanager
    def _store_errors(self) -> Iterator[None]:
        try:
            yield
        except STORE_ERRORS as exc:
            logger.error("Prompt store unavailable: %s", exc)
            raise StoreUnavailableError(str(exc)) from exc

    def active_list(self) -> list[RotatablePrompt]:
        """Return the current rotation list."""
        with self._store_errors():
            return active_prompts(self._prompts.list())

    def advance(self) -> PromptPair:
        """Consume the current prompt and move the cursor one step.

        Returns:
            The prompt to show now and the prompt that will follow it.

        Raises:
            NoActivePromptsError: If no prompt is active.
            StoreUnavailableError: If the store fails or every cursor write conflicts.
        """
        attempts = self._max_retries + 1
        for attempt in range(1, attempts + 1):
            active = self.active_list()
            if not active:
                raise NoActivePromptsError()

            with self._store_errors():
                state = self._cursor.read()
                index = clamp_index(state.index, len(active))
                next_index = (index + 1) % len(active)
                written = self._cursor.write_if_unchanged(state.version, next_index, self._clock())

            if written:
                return PromptPair(current=active[index], next=active[next_index])
            logger.debug(
                "Cursor advance conflicted at version %d (attempt %d/%d)",
                state.version,
                attempt,
                attempts,
            )

        self._give_up(attempts)

    def peek(self) -> RotatablePrompt | None:
        """Return the prompt the next advance would hand out, without moving the cursor."""
        active = self.active_list()
        if not active:
            return None
        with self._store_errors():
            state = self._cursor.read()
        return active[clamp_index(state.index, len(active))]

    def set_cursor_to_prompt(self, prompt_id: str) -> RotatablePrompt:
        """Queue an active prompt so the next advance returns it.

        Rotation then carries on from the prompt after it.

        Raises:
            PromptNotFoundError: If the prompt is missing or inactive.
            StoreUnavailableError: If the store fails or every cursor write conflicts.
        """
        attempts = self._max_retries + 1
        for attempt in range(1, attempts + 1):
            active = self.active_list()
            position = next(
                (i for i, prompt in enumerate(active) if prompt.id == prompt_id),
                None,
            )
            if position is None:
                raise PromptNotFoundError(prompt_id, require_active=True)

            with self._store_errors():
                state = self._cursor.read()
                written = self._cursor.write_if_unchanged(state.version, position, self._clock())

            if written:
                logger.info("Prompt %s queued next at position %d", prompt_id, position)
                return active[position]
            logger.debug(
                "Cursor queue-next conflicted at version %d (attempt %d/%d)",
                state.version,
                attempt,
                attempts,
            )

        self._give_up(attempts)

    def _give_up(self, attempts: int) -> NoReturn:
        conflict = CursorWriteConflictError(attempts)
        logger.error("%s", conflict)
        raise StoreUnavailableError("Prompt cursor is too contended to update") from conflict
