from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, status

from app.core.auth import session_store
from app.models.auth import User, UserRole

logger = logging.getLogger(__name__)


def get_bearer_token(authorization: str | None = Header(None)) -> str | None:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization.split(" ", 1)[1].strip()
    return token or None


async def get_current_user(token: str | None = Depends(get_bearer_token)) -> User:  # noqa: B008
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No session provided",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = session_store.get_session_user(token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def require_role(*roles: UserRole):
    required = ", ".join(r.value for r in roles)

    async def _check_role(user: User = Depends(get_current_user)) -> User:  # noqa: B008
        if user.role not in roles:
            logger.warning("User %s (%s) denied, requires one of: %s", user.id, user.role.value, required)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient permissions. Required: {required}",
            )
        return user

    return _check_role
