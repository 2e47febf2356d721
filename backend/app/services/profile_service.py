"""Employee profile lookup, role-filtered views and updates."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from app.core.policy import editable_profile_fields, filter_profile, filter_profile_feedback
from app.models.auth import User
from app.models.employee import EmployeeProfile, ProfileListItem, ProfileSummary, ProfileUpdate
from app.repositories.base import AbsenceRepository, FeedbackRepository, ProfileRepository
from app.repositories.memory import store

logger = logging.getLogger(__name__)


def _matches(profile: EmployeeProfile, search: str | None, department: str | None) -> bool:
    if department and profile.department != department:
        return False
    if search:
        term = search.strip().lower()
        haystack = (profile.first_name, profile.last_name, profile.position, profile.department)
        return any(term in value.lower() for value in haystack)
    return True


class ProfileService:
    def __init__(
        self,
        profiles: ProfileRepository,
        feedback: FeedbackRepository,
        absences: AbsenceRepository,
    ) -> None:
        self.profiles = profiles
        self.feedback = feedback
        self.absences = absences

    def get_profile(self, profile_id: str) -> EmployeeProfile:
        profile = self.profiles.get(profile_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    def _assemble(self, viewer: User, profile: EmployeeProfile) -> EmployeeProfile:
        return profile.model_copy(
            update={
                "feedback": filter_profile_feedback(viewer, profile.id, self.feedback.list()),
                "absence_requests": list(self.absences.list_by_employee(profile.id)),
            }
        )

    def get_profile_view(self, viewer: User, profile_id: str) -> dict[str, Any]:
        profile = self._assemble(viewer, self.get_profile(profile_id))
        return filter_profile(viewer, profile.model_dump(by_alias=True, mode="json"))

    def update_profile(self, viewer: User, profile_id: str, changes: ProfileUpdate) -> dict[str, Any]:
        profile = self.get_profile(profile_id)

        allowed = editable_profile_fields(viewer, profile_id)
        if not allowed:
            raise AuthorizationError("Access denied")

        fields = changes.model_dump(exclude_unset=True)
        if not fields:
            raise ValidationError("No profile fields to update")

        denied = sorted(set(fields) - allowed)
        if denied:
            raise AuthorizationError(f"Not allowed to update: {', '.join(denied)}")

        try:
            updated = EmployeeProfile.model_validate({**profile.model_dump(), **fields})
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid profile update: {e.errors()[0]['msg']}") from e

        self.profiles.save(updated)
        logger.info("Profile %s updated by user=%s (%s)", profile_id, viewer.id, ", ".join(sorted(fields)))
        return self.get_profile_view(viewer, profile_id)

    def list_profiles(self, search: str | None = None, department: str | None = None) -> list[ProfileListItem]:
        return [
            ProfileListItem(
                id=p.id,
                first_name=p.first_name,
                last_name=p.last_name,
                position=p.position,
                department=p.department,
                email=p.email,
                start_date=p.start_date,
                employee_id=p.employee_id,
            )
            for p in self.profiles.list()
            if _matches(p, search, department)
        ]

    def browse_profiles(
        self,
        viewer: User,
        search: str | None = None,
        department: str | None = None,
    ) -> list[ProfileSummary]:
        all_feedback = self.feedback.list()
        return [
            ProfileSummary(
                id=p.id,
                first_name=p.first_name,
                last_name=p.last_name,
                position=p.position,
                department=p.department,
                profile_image=p.profile_image,
                bio=p.bio,
                skills=p.skills,
                feedback_count=len(filter_profile_feedback(viewer, p.id, all_feedback)),
            )
            for p in self.profiles.list()
            if _matches(p, search, department)
        ]

    def list_departments(self) -> list[str]:
        return sorted({p.department for p in self.profiles.list() if p.department})


profile_service = ProfileService(store.profiles, store.feedback, store.absences)
