"""Admin endpoints for managing prompts and the rotation queue."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from sounds_like_home.api.v1.dependencies import (
    PromptRepoDep,
    RecordingRepoDep,
    SequencerDep,
    require_admin,
)
from sounds_like_home.schemas.auth import SuccessResponse
from sounds_like_home.schemas.prompt import (
    PeekPromptResponse,
    PromptCreate,
    PromptMutationResponse,
    PromptResponse,
    PromptUpdate,
    PromptWithStats,
    QueuePromptResponse,
)
from sounds_like_home.services import prompt_service
from sounds_like_home.services.errors import PromptNotFoundError, StoreUnavailableError

router = APIRouter(
    prefix="/admin/prompts",
    tags=["admin", "prompts"],
    dependencies=[Depends(require_admin)],
)


def _store_unavailable(err: StoreUnavailableError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=str(err) or "Prompt store unavailable",
    )


@router.get("", response_model=list[PromptWithStats])
async def list_prompts(prompts: PromptRepoDep, recordings: RecordingRepoDep) -> list[PromptWithStats]:
    """List every prompt with the number of recordings made against it."""
    stats = prompt_service.list_prompts_with_stats(prompts=prompts, recordings=recordings)
    return [
        PromptWithStats(
            **PromptResponse.model_validate(item.prompt).model_dump(),
            recording_count=item.recording_count,
            approved_count=item.approved_count,
        )
        for item in stats
    ]


@router.post("", response_model=PromptMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_prompt(payload: PromptCreate, repo: PromptRepoDep) -> PromptMutationResponse:
    """Add an active prompt at the end of the rotation."""
    try:
        prompt = prompt_service.create_prompt(repo=repo, text=payload.text)
    except ValueError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return PromptMutationResponse(prompt=PromptResponse.model_validate(prompt))


@router.get("/next-peek", response_model=PeekPromptResponse)
async def peek_next_prompt(sequencer: SequencerDep) -> PeekPromptResponse:
    """Show which prompt the next visitor will get, without advancing the queue."""
    try:
        prompt = sequencer.peek()
    except StoreUnavailableError as err:
        raise _store_unavailable(err) from err
    if prompt is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No active prompts available",
        )
    return PeekPromptResponse(id=prompt.id, text=prompt.text)


@router.put("/{prompt_id}", response_model=PromptMutationResponse)
async def update_prompt(
    prompt_id: str,
    payload: PromptUpdate,
    repo: PromptRepoDep,
) -> PromptMutationResponse:
    """Edit a prompt's text, activation flag or rotation order."""
    try:
        prompt = prompt_service.update_prompt(
            repo=repo,
            prompt_id=prompt_id,
            text=payload.text,
            active=payload.active,
            order=payload.order,
        )
    except PromptNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found") from err
    except ValueError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return PromptMutationResponse(prompt=PromptResponse.model_validate(prompt))


@router.delete("/{prompt_id}", response_model=SuccessResponse)
async def delete_prompt(prompt_id: str, repo: PromptRepoDep) -> SuccessResponse:
    try:
        prompt_service.delete_prompt(repo=repo, prompt_id=prompt_id)
    except PromptNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found") from err
    return SuccessResponse()


@router.put("/{prompt_id}/queue-next", response_model=QueuePromptResponse)
async def queue_prompt_next(prompt_id: str, sequencer: SequencerDep) -> QueuePromptResponse:
    """Make an active prompt the next one handed out; rotation resumes after it."""
    try:
        prompt = sequencer.set_cursor_to_prompt(prompt_id)
    except PromptNotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Prompt not found or not active",
        ) from err
    except StoreUnavailableError as err:
        raise _store_unavailable(err) from err

    return QueuePromptResponse(
        message=f'Prompt "{prompt.text}" is now next in queue',
        prompt=PromptResponse.model_validate(prompt),
    )
