"""
Error taxonomy for the Skill Sphere backend.

Every error a handler can produce derives from ``AppError`` and carries the
HTTP status it maps to. ``skillsphere.main`` registers a single handler that
turns these into ``{"error": ..., "details": ...}`` JSON bodies.
"""

from typing import Any, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors translated into JSON error responses."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        data = {"error": self.message}
        if self.details is not None:
            data["details"] = self.details
        return data


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateKey(AppError):
    """A user with the same email already exists."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    """Unknown email, wrong password, or an unusable token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidToken(AuthenticationError):
    def __init__(self, message: str = "Invalid token", details: Optional[Any] = None):
        super().__init__(message, details)


class TokenExpired(AuthenticationError):
    def __init__(self, message: str = "Token expired", details: Optional[Any] = None):
        super().__init__(message, details)


class DependencyError(AppError):
    """Database or other downstream failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
