from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.dependencies import get_current_user
from app.core.exceptions import DomainError, to_http_exception
from app.core.policy import can_modify_feedback, can_read_feedback
from app.models.auth import User
from app.models.common import ApiResponse
from app.models.feedback import EnhanceRequest, EnhanceResponse, Feedback, FeedbackCreate, FeedbackUpdate
from app.services.enhancement_service import enhancement_service
from app.services.feedback_service import feedback_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/feedback", tags=["feedback"])


def _get_feedback_or_raise(feedback_id: str) -> Feedback:
    try:
        return feedback_service.get(feedback_id)
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("/received", response_model=ApiResponse[list[Feedback]])
async def list_received_feedback(user: User = Depends(get_current_user)):  # noqa: B008
    return ApiResponse(data=feedback_service.list_received(user))


@router.post("/enhance", response_model=ApiResponse[EnhanceResponse])
async def enhance_feedback(
    request: EnhanceRequest,
    user: User = Depends(get_current_user),  # noqa: B008
):
    logger.info("Enhancement request from user=%s (%d chars)", user.id, len(request.text))
    enhanced = await enhancement_service.enhance(request.text, request.employee_name)
    return ApiResponse(
        data=EnhanceResponse(
            original_text=request.text,
            enhanced_text=enhanced,
            is_enhanced=enhanced != request.text,
        )
    )


@router.get("/profiles/{profile_id}", response_model=ApiResponse[list[Feedback]])
async def list_profile_feedback(
    profile_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
):
    return ApiResponse(data=feedback_service.list_for_profile(user, profile_id))


@router.post(
    "/profiles/{profile_id}",
    response_model=ApiResponse[Feedback],
    status_code=status.HTTP_201_CREATED,
)
async def create_feedback(
    profile_id: str,
    request: FeedbackCreate,
    user: User = Depends(get_current_user),  # noqa: B008
):
    try:
        feedback = feedback_service.create(user, profile_id, request)
    except DomainError as e:
        logger.warning("Feedback creation rejected for profile=%s user=%s: %s", profile_id, user.id, e)
        raise to_http_exception(e) from e
    return ApiResponse(data=feedback, message="Feedback created successfully")


@router.get("/{feedback_id}", response_model=ApiResponse[Feedback])
async def get_feedback(
    feedback_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
):
    feedback = _get_feedback_or_raise(feedback_id)
    if not can_read_feedback(user, feedback):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to view this feedback")
    return ApiResponse(data=feedback)


@router.put("/{feedback_id}", response_model=ApiResponse[Feedback])
async def update_feedback(
    feedback_id: str,
    changes: FeedbackUpdate,
    user: User = Depends(get_current_user),  # noqa: B008
):
    feedback = _get_feedback_or_raise(feedback_id)
    if not can_modify_feedback(user, feedback):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to modify this feedback")

    try:
        updated = feedback_service.update(feedback_id, changes)
    except DomainError as e:
        raise to_http_exception(e) from e
    return ApiResponse(data=updated, message="Feedback updated successfully")


@router.delete("/{feedback_id}", response_model=ApiResponse[None])
async def delete_feedback(
    feedback_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
):
    feedback = _get_feedback_or_raise(feedback_id)
    if not can_modify_feedback(user, feedback):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to delete this feedback")

    try:
        feedback_service.delete(feedback_id)
    except DomainError as e:
        raise to_http_exception(e) from e
    return ApiResponse(message="Feedback deleted successfully")
