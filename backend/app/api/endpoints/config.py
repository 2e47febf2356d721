from __future__ import annotations

from fastapi import APIRouter

from app.core.config import settings
from app.models.common import ApiResponse, AppConfig

router = APIRouter(prefix="/config", tags=["config"])


@router.get("", response_model=ApiResponse[AppConfig])
async def get_app_config():
    return ApiResponse(
        data=AppConfig(
            annual_vacation_days=settings.ANNUAL_VACATION_DAYS,
            max_absence_reason_length=settings.MAX_ABSENCE_REASON_LENGTH,
            max_advance_booking_years=settings.MAX_ADVANCE_BOOKING_YEARS,
        )
    )
