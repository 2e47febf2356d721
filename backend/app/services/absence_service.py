"""Absence request lifecycle: validation, creation, approval and statistics."""

from __future__ import annotations

import logging
import re
import secrets
import time
from collections.abc import Callable
from datetime import date, datetime, timezone

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.models.absence import AbsenceRequest, AbsenceRequestCreate, AbsenceStatistics, AbsenceStatus
from app.repositories.base import AbsenceRepository, ProfileRepository
from app.repositories.memory import store

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(value: str) -> date | None:
    """Parse ``YYYY-MM-DD`` or an ISO date-time; ``None`` when unparseable.

    Compact (``20990101``) and week (``2099-W01-3``) forms are rejected.
    """
    text = (value or "").strip()
    if not _ISO_DATE.match(text):
        return None
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        if text[10] not in "T ":
            return None
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def add_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # Feb 29 in a non-leap target year rolls over to Mar 1
        return date(day.year + years, 3, 1)


def _new_request_id() -> str:
    return f"absence_{int(time.time() * 1000)}_{secrets.token_hex(5)[:9]}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AbsenceService:
    def __init__(
        self,
        absences: AbsenceRepository,
        profiles: ProfileRepository,
        *,
        max_reason_length: int = 500,
        max_advance_years: int = 1,
        annual_vacation_days: int = 26,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.absences = absences
        self.profiles = profiles
        self.max_reason_length = max_reason_length
        self.max_advance_years = max_advance_years
        self.annual_vacation_days = annual_vacation_days
        self.today = today

    def list_by_employee(self, employee_id: str) -> list[AbsenceRequest]:
        return list(self.absences.list_by_employee(employee_id))

    def list_all(self) -> list[AbsenceRequest]:
        """Every request, most recent first. Equal timestamps keep store order."""
        return sorted(self.absences.list(), key=lambda r: r.created_at, reverse=True)

    def validate(self, data: AbsenceRequestCreate) -> tuple[date, date, str]:
        start = parse_date(data.start_date)
        end = parse_date(data.end_date)
        if start is None or end is None:
            raise ValidationError("Invalid date format")

        today = self.today()
        if start < today:
            raise ValidationError("Start date cannot be in the past")

        if end < start:
            raise ValidationError("End date cannot be before start date")

        reason = (data.reason or "").strip()
        if not reason:
            raise ValidationError("Reason is required")

        if len(reason) > self.max_reason_length:
            raise ValidationError(f"Reason cannot exceed {self.max_reason_length} characters")

        if start > add_years(today, self.max_advance_years):
            years = self.max_advance_years
            raise ValidationError(f"Cannot request absence more than {years} year{'s' if years != 1 else ''} in advance")

        return start, end, reason

    def create(self, employee_id: str, data: AbsenceRequestCreate) -> AbsenceRequest:
        if self.profiles.get(employee_id) is None:
            raise NotFoundError("Employee profile not found")

        start, end, reason = self.validate(data)

        now = _utcnow()
        request = AbsenceRequest(
            id=_new_request_id(),
            employee_id=employee_id,
            start_date=start,
            end_date=end,
            reason=reason,
            status=AbsenceStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        self.absences.save(request)
        logger.info(
            "Absence request %s created for employee=%s (%s..%s)", request.id, employee_id, start, end
        )
        return request

    def update_status(self, request_id: str, status: AbsenceStatus, manager_id: str) -> AbsenceRequest:
        request = self.absences.get(request_id)
        if request is None:
            raise NotFoundError("Absence request not found")

        updated = request.model_copy(update={"status": status, "updated_at": _utcnow()})
        self.absences.save(updated)
        logger.info(
            "Absence request %s set %s -> %s by manager=%s",
            request_id,
            request.status.value,
            status.value,
            manager_id,
        )
        return updated

    def delete(self, request_id: str, employee_id: str) -> bool:
        if self.profiles.get(employee_id) is None:
            raise NotFoundError("Employee profile not found")

        request = self.absences.get(request_id)
        if request is None or request.employee_id != employee_id:
            raise NotFoundError("Absence request not found")

        if request.status != AbsenceStatus.PENDING:
            raise ValidationError("Can only delete pending absence requests")

        deleted = self.absences.delete(request_id)
        logger.info("Absence request %s deleted for employee=%s", request_id, employee_id)
        return deleted

    def statistics(self, employee_id: str) -> AbsenceStatistics:
        requests = self.list_by_employee(employee_id)
        approved = [r for r in requests if r.status == AbsenceStatus.APPROVED]
        total_days = sum(r.day_count for r in approved)

        return AbsenceStatistics(
            total_requests=len(requests),
            pending_requests=sum(1 for r in requests if r.status == AbsenceStatus.PENDING),
            approved_requests=len(approved),
            rejected_requests=sum(1 for r in requests if r.status == AbsenceStatus.REJECTED),
            total_days_requested=total_days,
            remaining_vacation_days=max(0, self.annual_vacation_days - total_days),
        )


absence_service = AbsenceService(
    store.absences,
    store.profiles,
    max_reason_length=settings.MAX_ABSENCE_REASON_LENGTH,
    max_advance_years=settings.MAX_ADVANCE_BOOKING_YEARS,
    annual_vacation_days=settings.ANNUAL_VACATION_DAYS,
)
