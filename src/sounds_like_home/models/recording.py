# src/sounds_like_home/models/recording.py
"""SQLAlchemy model for submitted voice recordings."""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sounds_like_home.db.session import Base
from sounds_like_home.db.time import utcnow


class Recording(Base):
    """Audio clip recorded in response to a prompt.

    The prompt text is copied in at submission time, so recordings survive
    edits and deletion of the prompt they answered.
    """

    __tablename__ = "recording"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    # Name of the stored audio object; None when no audio was kept.
    filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
    content_type: Mapped[str] = mapped_column(String(64), nullable=False, default="audio/webm")
    size_bytes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    duration: Mapped[float | None] = mapped_column(Float, nullable=True)
