"""Session store: signed session tokens with TTL, logout revocation and sweep."""

from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass
from typing import Any

from jose import jwt
from jose.constants import Algorithms
from jose.exceptions import ExpiredSignatureError, JWTError

from app.core.config import settings
from app.models.auth import User

logger = logging.getLogger(__name__)

_ALGORITHM = Algorithms.HS256


@dataclass
class _Session:
    user: User
    expires_at: float


def _new_session_id() -> str:
    return f"session_{int(time.time() * 1000)}_{secrets.token_hex(5)[:9]}"


class SessionStore:
    def __init__(self, secret_key: str, ttl_seconds: int) -> None:
        self.secret_key = secret_key
        self.ttl_seconds = ttl_seconds
        self._sessions: dict[str, _Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create_session(self, user: User) -> str:
        self.sweep_expired()

        session_id = _new_session_id()
        now = time.time()
        expires_at = now + self.ttl_seconds
        self._sessions[session_id] = _Session(user=user, expires_at=expires_at)

        claims = {
            "sid": session_id,
            "sub": user.id,
            "role": user.role.value,
            "iat": int(now),
            "exp": int(expires_at),
        }
        logger.info("Session created for user=%s role=%s", user.id, user.role.value)
        return jwt.encode(claims, self.secret_key, algorithm=_ALGORITHM)

    def _decode(self, token: str, *, verify_exp: bool = True) -> dict[str, Any] | None:
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[_ALGORITHM],
                options={"verify_exp": verify_exp, "verify_aud": False},
            )
        except ExpiredSignatureError:
            logger.info("Rejected expired session token")
            return None
        except JWTError as e:
            logger.info("Rejected invalid session token: %s", e)
            return None

    def get_session_user(self, token: str) -> User | None:
        payload = self._decode(token)
        if not payload:
            return None

        session = self._sessions.get(payload.get("sid", ""))
        if session is None:
            return None
        if session.expires_at <= time.time():
            self._sessions.pop(payload["sid"], None)
            return None
        if session.user.id != payload.get("sub"):
            return None
        return session.user

    def remove_session(self, token: str) -> bool:
        # Logout must work for expired tokens too, so only the signature is checked.
        payload = self._decode(token, verify_exp=False)
        if not payload:
            return False
        removed = self._sessions.pop(payload.get("sid", ""), None) is not None
        if removed:
            logger.info("Session removed for user=%s", payload.get("sub"))
        return removed

    def sweep_expired(self) -> int:
        now = time.time()
        expired = [sid for sid, session in self._sessions.items() if session.expires_at <= now]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info("Swept %d expired sessions", len(expired))
        return len(expired)

    def clear(self) -> None:
        self._sessions.clear()


session_store = SessionStore(settings.SESSION_SECRET_KEY, settings.SESSION_TTL_SECONDS)
