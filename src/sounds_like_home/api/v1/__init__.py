# src/sounds_like_home/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    admin_prompts_router,
    admin_recordings_router,
    auth_router,
    prompts_router,
    recordings_router,
)

__all__ = [
    "admin_prompts_router",
    "admin_recordings_router",
    "auth_router",
    "prompts_router",
    "recordings_router",
]
