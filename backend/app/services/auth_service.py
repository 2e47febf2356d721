from __future__ import annotations

import logging

from app.core.auth import SessionStore, session_store
from app.core.exceptions import AuthenticationError
from app.models.auth import LoginResponse, UserRole
from app.repositories.base import UserRepository
from app.repositories.memory import store

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, users: UserRepository, sessions: SessionStore) -> None:
        self.users = users
        self.sessions = sessions

    def login(self, email: str, role: UserRole) -> LoginResponse:
        user = self.users.find_by_email(email)
        if user is None:
            logger.warning("Login failed, unknown email=%s", email)
            raise AuthenticationError("Invalid credentials")

        if user.role != role:
            logger.warning("Login failed, role mismatch for user=%s (requested %s)", user.id, role.value)
            raise AuthenticationError("Invalid credentials")

        token = self.sessions.create_session(user)
        return LoginResponse(user=user, token=token)

    def logout(self, token: str | None) -> bool:
        if not token:
            return False
        return self.sessions.remove_session(token)


auth_service = AuthService(store.users, session_store)
