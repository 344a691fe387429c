# src/sounds_like_home/main.py
"""Main entry point for the Sounds Like Home application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from sounds_like_home.api.v1 import (
    admin_prompts_router,
    admin_recordings_router,
    auth_router,
    prompts_router,
    recordings_router,
)
from sounds_like_home.core.logging_config import configure_logging
from sounds_like_home.core.settings import settings
from sounds_like_home.db.session import create_tables

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Sounds Like Home API",
    description="Record answers to rotating prompts and listen to what others shared",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(prompts_router, prefix="/api/v1")
app.include_router(recordings_router, prefix="/api/v1")
app.include_router(auth_router, prefix="/api/v1")
app.include_router(admin_prompts_router, prefix="/api/v1")
app.include_router(admin_recordings_router, prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging(settings.log_level, settings.log_format)
    create_tables()
    logger.info("%s %s started", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("sounds_like_home.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
