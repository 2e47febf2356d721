"""Peer feedback models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from app.models.common import CamelModel


class Feedback(CamelModel):
    id: str
    from_user_id: str
    from_user_name: str
    to_user_id: str
    content: str
    enhanced_content: str | None = None
    is_enhanced: bool = False
    created_at: datetime
    updated_at: datetime


class FeedbackCreate(CamelModel):
    """Request body for new feedback; the author comes from the session."""

    content: str = Field(..., min_length=1, max_length=5000)
    enhanced_content: str | None = Field(default=None, max_length=5000)
    is_enhanced: bool = False


class FeedbackUpdate(CamelModel):
    content: str | None = Field(default=None, min_length=1, max_length=5000)
    enhanced_content: str | None = Field(default=None, max_length=5000)
    is_enhanced: bool | None = None


class EnhanceRequest(CamelModel):
    text: str = Field(..., min_length=1, max_length=5000)
    employee_name: str | None = Field(default=None, max_length=200)


class EnhanceResponse(CamelModel):
    original_text: str
    enhanced_text: str
    is_enhanced: bool
