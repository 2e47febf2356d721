"""Role-based visibility and authorization rules.

Profile visibility and edit rights are declared per (role, relation) where the
relation says whether the viewer is looking at their own profile. Every
endpoint goes through these functions instead of building its own filters.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic.alias_generators import to_camel

from app.models.auth import User, UserRole
from app.models.employee import EmployeeProfile
from app.models.feedback import Feedback


class Relation(str, Enum):
    SELF = "self"
    OTHER = "other"


ALL_PROFILE_FIELDS: frozenset[str] = frozenset(to_camel(name) for name in EmployeeProfile.model_fields)

PUBLIC_PROFILE_FIELDS: frozenset[str] = frozenset(
    {
        "id",
        "firstName",
        "lastName",
        "position",
        "department",
        "profileImage",
        "bio",
        "skills",
        "feedback",
        "absenceRequests",
    }
)

SENSITIVE_PROFILE_FIELDS: frozenset[str] = ALL_PROFILE_FIELDS - PUBLIC_PROFILE_FIELDS

PROFILE_VISIBILITY: dict[tuple[UserRole, Relation], frozenset[str]] = {
    (UserRole.MANAGER, Relation.SELF): ALL_PROFILE_FIELDS,
    (UserRole.MANAGER, Relation.OTHER): ALL_PROFILE_FIELDS,
    (UserRole.EMPLOYEE, Relation.SELF): ALL_PROFILE_FIELDS,
    (UserRole.EMPLOYEE, Relation.OTHER): PUBLIC_PROFILE_FIELDS,
    (UserRole.COWORKER, Relation.SELF): ALL_PROFILE_FIELDS,
    (UserRole.COWORKER, Relation.OTHER): PUBLIC_PROFILE_FIELDS,
}

# Edit rights use python attribute names, matching ProfileUpdate.
MANAGER_EDITABLE_FIELDS: frozenset[str] = frozenset(EmployeeProfile.model_fields) - {
    "id",
    "feedback",
    "absence_requests",
}

SELF_EDITABLE_FIELDS: frozenset[str] = frozenset(
    {
        "first_name",
        "last_name",
        "bio",
        "skills",
        "profile_image",
        "email",
        "phone",
        "address",
        "emergency_contact",
    }
)

PROFILE_EDIT_RIGHTS: dict[tuple[UserRole, Relation], frozenset[str]] = {
    (UserRole.MANAGER, Relation.SELF): MANAGER_EDITABLE_FIELDS,
    (UserRole.MANAGER, Relation.OTHER): MANAGER_EDITABLE_FIELDS,
    (UserRole.EMPLOYEE, Relation.SELF): SELF_EDITABLE_FIELDS,
    (UserRole.EMPLOYEE, Relation.OTHER): frozenset(),
    (UserRole.COWORKER, Relation.SELF): SELF_EDITABLE_FIELDS,
    (UserRole.COWORKER, Relation.OTHER): frozenset(),
}


def is_manager(viewer: User) -> bool:
    return viewer.role == UserRole.MANAGER


def relation_to(viewer: User, profile_id: str) -> Relation:
    return Relation.SELF if viewer.id == profile_id else Relation.OTHER


def visible_profile_fields(viewer: User, profile_id: str) -> frozenset[str]:
    return PROFILE_VISIBILITY.get((viewer.role, relation_to(viewer, profile_id)), frozenset())


def filter_profile(viewer: User, profile: Mapping[str, Any]) -> dict[str, Any]:
    """Return the camelCase profile view restricted to what ``viewer`` may see.

    Accepts a full or an already-filtered view; filtering twice is a no-op.
    """
    allowed = visible_profile_fields(viewer, str(profile.get("id", "")))
    return {key: value for key, value in profile.items() if key in allowed}


def editable_profile_fields(viewer: User, profile_id: str) -> frozenset[str]:
    return PROFILE_EDIT_RIGHTS.get((viewer.role, relation_to(viewer, profile_id)), frozenset())


def filter_profile_feedback(viewer: User, profile_id: str, feedback: Iterable[Feedback]) -> list[Feedback]:
    """Feedback filed under ``profile_id`` that ``viewer`` may read.

    Managers and the profile owner see everything addressed to the profile;
    anyone else only sees the feedback they wrote for it.
    """
    addressed = [f for f in feedback if f.to_user_id == profile_id]
    if is_manager(viewer) or viewer.id == profile_id:
        return addressed
    return [f for f in addressed if f.from_user_id == viewer.id]


def filter_received_feedback(viewer: User, feedback: Iterable[Feedback]) -> list[Feedback]:
    if is_manager(viewer):
        return list(feedback)
    return [f for f in feedback if f.to_user_id == viewer.id]


def can_read_feedback(viewer: User, feedback: Feedback) -> bool:
    return is_manager(viewer) or viewer.id in (feedback.to_user_id, feedback.from_user_id)


def can_modify_feedback(viewer: User, feedback: Feedback) -> bool:
    if is_manager(viewer):
        return True
    return viewer.role == UserRole.EMPLOYEE and feedback.from_user_id == viewer.id


def can_access_absences(viewer: User, employee_id: str) -> bool:
    """Listing, statistics, creation and deletion of an employee's requests."""
    return is_manager(viewer) or viewer.id == employee_id
