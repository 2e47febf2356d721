"""User identity and login models."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from app.models.common import CamelModel


class UserRole(str, Enum):
    MANAGER = "manager"
    EMPLOYEE = "employee"
    COWORKER = "coworker"


class User(CamelModel):
    id: str
    email: str
    role: UserRole
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1, max_length=320)
    role: UserRole


class LoginResponse(CamelModel):
    user: User
    token: str
