# src/sounds_like_home/schemas/recording.py
"""Recording-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RecordingCreate(BaseModel):
    """Schema for submitting a recording from the browser recorder."""

    audio_data: str = Field(
        ...,
        min_length=1,
        alias="audioData",
        description="Base64 audio, optionally as a data: URL",
    )
    prompt: str = Field(..., min_length=1, description="Text of the prompt that was answered")
    timestamp: datetime | None = None
    duration: float | None = Field(None, ge=0, description="Clip length in seconds")

    model_config = ConfigDict(populate_by_name=True)


class RecordingCreated(BaseModel):
    success: bool = True
    id: str


class RecordingPublic(BaseModel):
    """Fields exposed to anonymous listeners."""

    id: str
    prompt: str
    timestamp: datetime
    tags: list[str]
    duration: float | None

    model_config = ConfigDict(from_attributes=True)


class RecordingResponse(RecordingPublic):
    """Full recording metadata for the admin dashboard."""

    filename: str | None
    content_type: str
    size_bytes: int
    approved: bool


class RecordingUpdate(BaseModel):
    tags: list[str] | None = None
    approved: bool | None = None


class RecordingMutationResponse(BaseModel):
    success: bool = True
    recording: RecordingResponse


class RecordingCount(BaseModel):
    count: int
