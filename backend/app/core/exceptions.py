"""Domain exceptions raised by services and mapped to HTTP errors by endpoints."""

from __future__ import annotations

from fastapi import HTTPException, status


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced profile, feedback or request does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials or a session are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


_STATUS_CODES: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
}


def to_http_exception(error: DomainError) -> HTTPException:
    for error_type, status_code in _STATUS_CODES.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
