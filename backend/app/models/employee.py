"""Employee profile models."""

from __future__ import annotations

from pydantic import Field

from app.models.absence import AbsenceRequest
from app.models.common import CamelModel
from app.models.feedback import Feedback


class EmergencyContact(CamelModel):
    name: str
    phone: str
    relationship: str


class WorkHistoryEntry(CamelModel):
    company: str
    position: str
    duration: str


class EmployeeProfile(CamelModel):
    """Full employee record. Visibility of each field is decided by the policy."""

    id: str

    first_name: str
    last_name: str
    position: str
    department: str
    profile_image: str | None = None
    bio: str | None = None
    skills: list[str] = []

    email: str
    phone: str
    salary: float
    start_date: str
    employee_id: str
    address: str
    emergency_contact: EmergencyContact

    performance_rating: float | None = None
    certifications: list[str] = []
    work_history: list[WorkHistoryEntry] = []

    feedback: list[Feedback] = []
    absence_requests: list[AbsenceRequest] = []

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class ProfileUpdate(CamelModel):
    """Partial profile update. Only fields present in the body are applied."""

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    position: str | None = Field(default=None, min_length=1, max_length=200)
    department: str | None = Field(default=None, min_length=1, max_length=200)
    profile_image: str | None = None
    bio: str | None = Field(default=None, max_length=2000)
    skills: list[str] | None = None

    email: str | None = Field(default=None, min_length=3, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    salary: float | None = Field(default=None, ge=0)
    start_date: str | None = None
    employee_id: str | None = None
    address: str | None = Field(default=None, max_length=500)
    emergency_contact: EmergencyContact | None = None

    performance_rating: float | None = Field(default=None, ge=0, le=5)
    certifications: list[str] | None = None
    work_history: list[WorkHistoryEntry] | None = None


class ProfileSummary(CamelModel):
    """Public card shown when browsing colleagues."""

    id: str
    first_name: str
    last_name: str
    position: str
    department: str
    profile_image: str | None = None
    bio: str | None = None
    skills: list[str] = []
    feedback_count: int = 0


class ProfileListItem(CamelModel):
    """Row in the manager's employee directory."""

    id: str
    first_name: str
    last_name: str
    position: str
    department: str
    email: str
    start_date: str
    employee_id: str
