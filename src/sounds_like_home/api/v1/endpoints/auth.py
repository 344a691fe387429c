"""Admin authentication endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from sounds_like_home.api.v1.dependencies import AdminDep
from sounds_like_home.core.security import check_admin_password, create_access_token
from sounds_like_home.schemas.auth import LoginRequest, LoginResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["authentication"])


@router.post("/login", response_model=LoginResponse, summary="Exchange the admin password for a token")
async def login(payload: LoginRequest) -> LoginResponse:
    if not check_admin_password(payload.password):
        logger.warning("Rejected admin login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid password",
        )
    return LoginResponse(access_token=create_access_token())


@router.post("/logout", response_model=SuccessResponse)
async def logout(_admin: AdminDep) -> SuccessResponse:
    """End the admin session.

    Tokens are stateless; the client discards its copy.
    """
    return SuccessResponse()
