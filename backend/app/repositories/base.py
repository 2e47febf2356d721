"""Repository interfaces the domain services depend on."""

from __future__ import annotations

from typing import Protocol, Sequence

from app.models.absence import AbsenceRequest
from app.models.auth import User
from app.models.employee import EmployeeProfile
from app.models.feedback import Feedback


class UserRepository(Protocol):
    def get(self, user_id: str) -> User | None:
        raise NotImplementedError

    def find_by_email(self, email: str) -> User | None:
        raise NotImplementedError

    def list(self) -> Sequence[User]:
        raise NotImplementedError


class ProfileRepository(Protocol):
    def get(self, profile_id: str) -> EmployeeProfile | None:
        raise NotImplementedError

    def list(self) -> Sequence[EmployeeProfile]:
        raise NotImplementedError

    def save(self, profile: EmployeeProfile) -> EmployeeProfile:
        raise NotImplementedError


class FeedbackRepository(Protocol):
    def get(self, feedback_id: str) -> Feedback | None:
        raise NotImplementedError

    def list(self) -> Sequence[Feedback]:
        """All feedback in insertion order."""

        raise NotImplementedError

    def save(self, feedback: Feedback) -> Feedback:
        """Insert or replace by id, keeping the original position on replace."""

        raise NotImplementedError

    def delete(self, feedback_id: str) -> bool:
        raise NotImplementedError


class AbsenceRepository(Protocol):
    def get(self, request_id: str) -> AbsenceRequest | None:
        raise NotImplementedError

    def list(self) -> Sequence[AbsenceRequest]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[AbsenceRequest]:
        raise NotImplementedError

    def save(self, request: AbsenceRequest) -> AbsenceRequest:
        raise NotImplementedError

    def delete(self, request_id: str) -> bool:
        raise NotImplementedError
