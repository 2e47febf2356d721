from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.dependencies import get_current_user, require_role
from app.core.exceptions import DomainError, to_http_exception
from app.core.policy import can_access_absences
from app.models.absence import AbsenceRequest, AbsenceRequestCreate, AbsenceStatistics, AbsenceStatusUpdate
from app.models.auth import User, UserRole
from app.models.common import ApiResponse
from app.services.absence_service import absence_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/absence", tags=["absence"])


def _require_owner_or_manager(user: User, employee_id: str, action: str) -> None:
    if not can_access_absences(user, employee_id):
        logger.warning("User %s denied %s absence requests of employee=%s", user.id, action, employee_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action} absence requests for this employee",
        )


@router.get("", response_model=ApiResponse[list[AbsenceRequest]])
async def list_all_absence_requests(user: User = Depends(require_role(UserRole.MANAGER))):  # noqa: B008
    return ApiResponse(data=absence_service.list_all())


@router.get("/employee/{employee_id}", response_model=ApiResponse[list[AbsenceRequest]])
async def list_employee_absence_requests(
    employee_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
):
    _require_owner_or_manager(user, employee_id, "view")
    return ApiResponse(data=absence_service.list_by_employee(employee_id))


@router.post(
    "/employee/{employee_id}",
    response_model=ApiResponse[AbsenceRequest],
    status_code=status.HTTP_201_CREATED,
)
async def create_absence_request(
    employee_id: str,
    request: AbsenceRequestCreate,
    user: User = Depends(get_current_user),  # noqa: B008
):
    _require_owner_or_manager(user, employee_id, "create")
    try:
        created = absence_service.create(employee_id, request)
    except DomainError as e:
        logger.warning("Absence request rejected for employee=%s: %s", employee_id, e)
        raise to_http_exception(e) from e
    return ApiResponse(data=created, message="Absence request created successfully")


@router.get("/employee/{employee_id}/statistics", response_model=ApiResponse[AbsenceStatistics])
async def get_absence_statistics(
    employee_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
):
    _require_owner_or_manager(user, employee_id, "view")
    return ApiResponse(data=absence_service.statistics(employee_id))


@router.put("/{request_id}/status", response_model=ApiResponse[AbsenceRequest])
async def update_absence_status(
    request_id: str,
    update: AbsenceStatusUpdate,
    user: User = Depends(require_role(UserRole.MANAGER)),  # noqa: B008
):
    try:
        updated = absence_service.update_status(request_id, update.status, user.id)
    except DomainError as e:
        raise to_http_exception(e) from e
    return ApiResponse(data=updated, message=f"Absence request {update.status.value} successfully")


@router.delete("/{request_id}/employee/{employee_id}", response_model=ApiResponse[None])
async def delete_absence_request(
    request_id: str,
    employee_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
):
    _require_owner_or_manager(user, employee_id, "delete")
    try:
        absence_service.delete(request_id, employee_id)
    except DomainError as e:
        logger.warning("Absence deletion rejected for request=%s: %s", request_id, e)
        raise to_http_exception(e) from e
    return ApiResponse(message="Absence request deleted successfully")
