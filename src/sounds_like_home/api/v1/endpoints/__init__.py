# src/sounds_like_home/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .admin_prompts import router as admin_prompts_router
from .admin_recordings import router as admin_recordings_router
from .auth import router as auth_router
from .prompts import router as prompts_router
from .recordings import router as recordings_router

__all__ = [
    "admin_prompts_router",
    "admin_recordings_router",
    "auth_router",
    "prompts_router",
    "recordings_router",
]
