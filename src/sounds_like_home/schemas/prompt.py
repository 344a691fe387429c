# src/sounds_like_home/schemas/prompt.py
"""Prompt-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PromptCreate(BaseModel):
    """Schema for adding a prompt."""

    text: str = Field(..., min_length=1, max_length=1000, description="Prompt shown to recorders")


class PromptUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    text: str | None = Field(None, min_length=1, max_length=1000)
    active: bool | None = None
    order: int | None = Field(None, description="Position in the rotation sequence")


class PromptResponse(BaseModel):
    """Schema for prompt information returned by the API."""

    id: str
    text: str
    active: bool
    order: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PromptWithStats(PromptResponse):
    """Prompt plus counts of recordings made against its text."""

    recording_count: int
    approved_count: int


class PromptMutationResponse(BaseModel):
    success: bool = True
    prompt: PromptResponse


class NextPromptResponse(BaseModel):
    """Prompt handed to a recorder; ``id`` is null for the fallback prompt."""

    id: str | None
    text: str
    next: str | None = None


class PeekPromptResponse(BaseModel):
    id: str
    text: str


class QueuePromptResponse(BaseModel):
    success: bool = True
    message: str
    prompt: PromptResponse
