"""Public prompt endpoints used by the recorder."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from sounds_like_home.api.v1.dependencies import SequencerDep
from sounds_like_home.core.settings import settings
from sounds_like_home.schemas.prompt import NextPromptResponse
from sounds_like_home.services.errors import NoActivePromptsError, StoreUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.get("/next", response_model=NextPromptResponse)
async def next_prompt(sequencer: SequencerDep) -> NextPromptResponse:
    """Hand out the next prompt in rotation and advance the queue.

    Visitors always get something to answer: when no prompt is active the
    configured default prompt is returned instead.
    """
    try:
        pair = sequencer.advance()
    except NoActivePromptsError:
        logger.info("No active prompts; serving the default prompt")
        return NextPromptResponse(id=None, text=settings.default_prompt_text, next=None)
    except StoreUnavailableError as err:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to get prompt",
        ) from err

    return NextPromptResponse(id=pair.current.id, text=pair.current.text, next=pair.next.text)
