"""Persistence for the prompt rotation cursor."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sounds_like_home.models.prompt_cursor import CURSOR_ROW_ID, PromptCursor
from sounds_like_home.services.stores import CursorState

__all__ = ["CursorRepository"]


class CursorRepository:
    """Compare-and-swap access to the singleton cursor row.

    Every successful write commits the session. A lost race rolls the
    session back so the next read starts a fresh transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def read(self) -> CursorState:
        """Return the stored cursor, or the default cursor when none exists yet."""
        # Column select bypasses the identity map so each read sees the stored row.
        row = self.session.execute(
            select(PromptCursor.position, PromptCursor.version, PromptCursor.last_updated)
            .where(PromptCursor.id == CURSOR_ROW_ID)
        ).first()
        if row is None:
            return CursorState()
        return CursorState(index=row.position, version=row.version, last_updated=row.last_updated)

    def write_if_unchanged(self, expected_version: int, index: int, now: datetime) -> bool:
        """Store ``index`` if the cursor version still equals ``expected_version``.

        Version 0 means the row has never been written, so the write is an insert.
        """
        if expected_version == 0:
            return self._insert(index, now)

        result = self.session.execute(
            update(PromptCursor)
            .where(
                PromptCursor.id == CURSOR_ROW_ID,
                PromptCursor.version == expected_version,
            )
            .values(position=index, version=PromptCursor.version + 1, last_updated=now)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            self.session.rollback()
            return False
        self.session.commit()
        return True

    def _insert(self, index: int, now: datetime) -> bool:
        self.session.add(
            PromptCursor(id=CURSOR_ROW_ID, position=index, version=1, last_updated=now)
        )
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return False
        return True
