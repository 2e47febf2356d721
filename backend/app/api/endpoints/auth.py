from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.core.dependencies import get_bearer_token, get_current_user
from app.core.exceptions import DomainError, to_http_exception
from app.models.auth import LoginRequest, LoginResponse, User
from app.models.common import ApiResponse
from app.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=ApiResponse[LoginResponse])
async def login(request: LoginRequest):
    try:
        result = auth_service.login(request.email, request.role)
    except DomainError as e:
        raise to_http_exception(e) from e

    logger.info("User %s logged in as %s", result.user.id, result.user.role.value)
    return ApiResponse(data=result)


@router.post("/logout", response_model=ApiResponse[None])
async def logout(token: str | None = Depends(get_bearer_token)):  # noqa: B008
    auth_service.logout(token)
    return ApiResponse(message="Logged out successfully")


@router.get("/me", response_model=ApiResponse[User])
async def me(user: User = Depends(get_current_user)):  # noqa: B008
    return ApiResponse(data=user)
