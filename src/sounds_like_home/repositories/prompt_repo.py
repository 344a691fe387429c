"""Data access helpers for working with prompts."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from sounds_like_home.models.prompt import Prompt

__all__ = ["PromptRepository"]


class PromptRepository:
    """Thin wrapper around database access for prompt entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def list(self) -> list[Prompt]:
        """Return every prompt in insertion order."""
        result = self.session.execute(select(Prompt).order_by(Prompt.created_at, Prompt.id))
        return list(result.scalars())

    def get(self, prompt_id: str) -> Prompt | None:
        """Return a prompt by identifier."""
        return self.session.get(Prompt, prompt_id)

    def max_order(self) -> int:
        """Return the largest ``order`` in use, or 0 when there are no prompts."""
        highest = self.session.execute(select(func.max(Prompt.order))).scalar()
        return int(highest or 0)

    def create(self, *, text: str, order: int, active: bool = True) -> Prompt:
        """Insert a new prompt and commit it."""
        prompt = Prompt(text=text, order=order, active=active)
        self.session.add(prompt)
        self.session.commit()
        self.session.refresh(prompt)
        return prompt

    def update(
        self,
        prompt: Prompt,
        *,
        text: str | None = None,
        active: bool | None = None,
        order: int | None = None,
    ) -> Prompt:
        """Apply the supplied fields to ``prompt`` and commit."""
        if text is not None:
            prompt.text = text
        if active is not None:
            prompt.active = active
        if order is not None:
            prompt.order = order
        self.session.commit()
        self.session.refresh(prompt)
        return prompt

    def delete(self, prompt: Prompt) -> None:
        """Remove a prompt and commit."""
        self.session.delete(prompt)
        self.session.commit()
