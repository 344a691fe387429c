# src/sounds_like_home/schemas/auth.py
"""Admin authentication schemas."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    success: bool = True
    access_token: str
    token_type: str = "bearer"


class SuccessResponse(BaseModel):
    success: bool = True
