from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends

from app.core.dependencies import get_current_user, require_role
from app.core.exceptions import DomainError, to_http_exception
from app.models.auth import User, UserRole
from app.models.common import ApiResponse
from app.models.employee import ProfileListItem, ProfileSummary, ProfileUpdate
from app.services.profile_service import profile_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profiles", tags=["profiles"])


# Fixed paths are declared before /{profile_id} so they are not captured by it.
@router.get("/departments/list", response_model=ApiResponse[list[str]])
async def list_departments(user: User = Depends(require_role(UserRole.MANAGER))):  # noqa: B008
    return ApiResponse(data=profile_service.list_departments())


@router.get("/list/all", response_model=ApiResponse[list[ProfileListItem]])
async def list_profiles(
    search: str | None = None,
    department: str | None = None,
    user: User = Depends(require_role(UserRole.MANAGER)),  # noqa: B008
):
    return ApiResponse(data=profile_service.list_profiles(search=search, department=department))


@router.get("/browse", response_model=ApiResponse[list[ProfileSummary]])
async def browse_profiles(
    search: str | None = None,
    department: str | None = None,
    user: User = Depends(get_current_user),  # noqa: B008
):
    return ApiResponse(data=profile_service.browse_profiles(user, search=search, department=department))


@router.get("/{profile_id}", response_model=ApiResponse[dict[str, Any]])
async def get_profile(
    profile_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
):
    try:
        view = profile_service.get_profile_view(user, profile_id)
    except DomainError as e:
        raise to_http_exception(e) from e
    return ApiResponse(data=view)


@router.put("/{profile_id}", response_model=ApiResponse[dict[str, Any]])
async def update_profile(
    profile_id: str,
    changes: ProfileUpdate,
    user: User = Depends(get_current_user),  # noqa: B008
):
    try:
        view = profile_service.update_profile(user, profile_id, changes)
    except DomainError as e:
        logger.warning("Profile update rejected for profile=%s user=%s: %s", profile_id, user.id, e)
        raise to_http_exception(e) from e
    return ApiResponse(data=view, message="Profile updated successfully")
