"""Absence request models."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import Field

from app.models.common import CamelModel


class AbsenceStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AbsenceRequest(CamelModel):
    id: str
    employee_id: str
    start_date: date
    end_date: date
    reason: str
    status: AbsenceStatus = AbsenceStatus.PENDING
    created_at: datetime
    updated_at: datetime

    @property
    def day_count(self) -> int:
        """Inclusive number of calendar days covered by the request."""
        return (self.end_date - self.start_date).days + 1


class AbsenceRequestCreate(CamelModel):
    """Raw request body; dates stay strings so the service reports format errors."""

    start_date: str = Field(..., min_length=1)
    end_date: str = Field(..., min_length=1)
    reason: str = Field(..., min_length=1)


class AbsenceStatusUpdate(CamelModel):
    status: AbsenceStatus


class AbsenceStatistics(CamelModel):
    total_requests: int
    pending_requests: int
    approved_requests: int
    rejected_requests: int
    total_days_requested: int
    remaining_vacation_days: int
