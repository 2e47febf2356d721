"""In-memory repositories backed by dicts keyed by id.

Dicts preserve insertion order, so listing returns records in the order they
were created. Replacing a record keeps its position.
"""

from __future__ import annotations

import logging

from app.models.absence import AbsenceRequest
from app.models.auth import User
from app.models.employee import EmployeeProfile
from app.models.feedback import Feedback
from app.repositories.seed import SEED_ABSENCE_REQUESTS, SEED_FEEDBACK, SEED_PROFILES, SEED_USERS

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def get(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        needle = email.strip().lower()
        for user in self._users.values():
            if user.email.lower() == needle:
                return user
        return None

    def list(self) -> list[User]:
        return list(self._users.values())

    def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    def clear(self) -> None:
        self._users.clear()


class InMemoryProfileRepository:
    def __init__(self) -> None:
        self._profiles: dict[str, EmployeeProfile] = {}

    def get(self, profile_id: str) -> EmployeeProfile | None:
        return self._profiles.get(profile_id)

    def list(self) -> list[EmployeeProfile]:
        return list(self._profiles.values())

    def save(self, profile: EmployeeProfile) -> EmployeeProfile:
        # feedback and absence lists live in their own repositories
        stored = profile.model_copy(update={"feedback": [], "absence_requests": []})
        self._profiles[profile.id] = stored
        return stored

    def clear(self) -> None:
        self._profiles.clear()


class InMemoryFeedbackRepository:
    def __init__(self) -> None:
        self._feedback: dict[str, Feedback] = {}

    def get(self, feedback_id: str) -> Feedback | None:
        return self._feedback.get(feedback_id)

    def list(self) -> list[Feedback]:
        return list(self._feedback.values())

    def save(self, feedback: Feedback) -> Feedback:
        self._feedback[feedback.id] = feedback
        return feedback

    def delete(self, feedback_id: str) -> bool:
        return self._feedback.pop(feedback_id, None) is not None

    def clear(self) -> None:
        self._feedback.clear()


class InMemoryAbsenceRepository:
    def __init__(self) -> None:
        self._requests: dict[str, AbsenceRequest] = {}

    def get(self, request_id: str) -> AbsenceRequest | None:
        return self._requests.get(request_id)

    def list(self) -> list[AbsenceRequest]:
        return list(self._requests.values())

    def list_by_employee(self, employee_id: str) -> list[AbsenceRequest]:
        return [r for r in self._requests.values() if r.employee_id == employee_id]

    def save(self, request: AbsenceRequest) -> AbsenceRequest:
        self._requests[request.id] = request
        return request

    def delete(self, request_id: str) -> bool:
        return self._requests.pop(request_id, None) is not None

    def clear(self) -> None:
        self._requests.clear()


class InMemoryStore:
    """Holds one repository per entity and (re)loads the seed data."""

    def __init__(self) -> None:
        self.users = InMemoryUserRepository()
        self.profiles = InMemoryProfileRepository()
        self.feedback = InMemoryFeedbackRepository()
        self.absences = InMemoryAbsenceRepository()

    def reset(self) -> None:
        for repo in (self.users, self.profiles, self.feedback, self.absences):
            repo.clear()

        for raw in SEED_USERS:
            self.users.save(User.model_validate(raw))
        for raw in SEED_PROFILES:
            self.profiles.save(EmployeeProfile.model_validate(raw))
        for raw in SEED_FEEDBACK:
            self.feedback.save(Feedback.model_validate(raw))
        for raw in SEED_ABSENCE_REQUESTS:
            self.absences.save(AbsenceRequest.model_validate(raw))

        logger.info(
            "In-memory store seeded (users=%d, profiles=%d, feedback=%d, absence_requests=%d)",
            len(self.users.list()),
            len(self.profiles.list()),
            len(self.feedback.list()),
            len(self.absences.list()),
        )


store = InMemoryStore()
store.reset()
