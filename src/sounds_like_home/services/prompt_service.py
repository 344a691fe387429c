"""Service-level helpers for administering prompts."""
from __future__ import annotations

from dataclasses import dataclass

from sounds_like_home.models.prompt import Prompt
from sounds_like_home.repositories.prompt_repo import PromptRepository
from sounds_like_home.repositories.recording_repo import RecordingRepository
from sounds_like_home.services.errors import PromptNotFoundError


@dataclass
class PromptStats:
    """A prompt with the recordings submitted against its current text."""

    prompt: Prompt
    recording_count: int
    approved_count: int


def _clean_text(text: str) -> str:
    cleaned = text.strip()
    if not cleaned:
        raise ValueError("Prompt text is required")
    return cleaned


def create_prompt(*, repo: PromptRepository, text: str) -> Prompt:
    """Create an active prompt at the end of the rotation.

    Raises:
        ValueError: If the text is blank.
    """
    cleaned = _clean_text(text)
    return repo.create(text=cleaned, order=repo.max_order() + 1, active=True)


def update_prompt(
    *,
    repo: PromptRepository,
    prompt_id: str,
    text: str | None = None,
    active: bool | None = None,
    order: int | None = None,
) -> Prompt:
    """Apply a partial update to a prompt.

    Raises:
        PromptNotFoundError: If no prompt has this id.
        ValueError: If the new text is blank.
    """
    prompt = repo.get(prompt_id)
    if prompt is None:
        raise PromptNotFoundError(prompt_id)
    cleaned = _clean_text(text) if text is not None else None
    return repo.update(prompt, text=cleaned, active=active, order=order)


def delete_prompt(*, repo: PromptRepository, prompt_id: str) -> None:
    """Delete a prompt; recordings keep their copy of its text."""
    prompt = repo.get(prompt_id)
    if prompt is None:
        raise PromptNotFoundError(prompt_id)
    repo.delete(prompt)


def list_prompts_with_stats(
    *,
    prompts: PromptRepository,
    recordings: RecordingRepository,
) -> list[PromptStats]:
    """Return every prompt with recording counts matched by prompt text."""
    all_prompts = prompts.list()
    counts: dict[str, list[int]] = {}
    for recording in recordings.list_by_prompt_text([p.text for p in all_prompts]):
        total_and_approved = counts.setdefault(recording.prompt, [0, 0])
        total_and_approved[0] += 1
        if recording.approved:
            total_and_approved[1] += 1

    return [
        PromptStats(
            prompt=prompt,
            recording_count=counts.get(prompt.text, [0, 0])[0],
            approved_count=counts.get(prompt.text, [0, 0])[1],
        )
        for prompt in all_prompts
    ]
