# src/sounds_like_home/models/prompt_cursor.py
"""Singleton row holding the prompt rotation cursor."""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from sounds_like_home.db.session import Base
from sounds_like_home.db.time import utcnow

CURSOR_ROW_ID = 1


class PromptCursor(Base):
    """Position into the active prompt list.

    ``position`` is only meaningful against the active list at read time.
    ``version`` increases on every write and guards compare-and-swap updates.
    """

    __tablename__ = "prompt_cursor"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=CURSOR_ROW_ID)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    version: Mapped[int] = mapped_column(BigInteger, nullable=False, default=1)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
