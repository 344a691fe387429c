# src/sounds_like_home/models/prompt.py
"""SQLAlchemy model for recording prompts."""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sounds_like_home.db.session import Base
from sounds_like_home.db.time import utcnow


def _new_prompt_id() -> str:
    return str(uuid.uuid4())


class Prompt(Base):
    """A cue shown to visitors before they record a clip.

    Only active prompts take part in rotation. ``order`` defines the rotation
    sequence; values need not be contiguous or unique.
    """

    __tablename__ = "prompt"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_prompt_id)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    # "order" is reserved in SQL, so the column carries a different name.
    order: Mapped[int] = mapped_column("sort_order", Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
