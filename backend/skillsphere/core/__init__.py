"""
Core module for the Skill Sphere backend.

This module contains core functionality including:
- Configuration management
- Database connections
- Security utilities (JWT, password hashing)
- The error taxonomy shared by all routers
"""

from .config import Settings, get_settings
from .database import Base, get_db, create_db_engine, create_session_factory
from .exceptions import (
    AppError,
    ValidationError,
    DuplicateKey,
    AuthenticationError,
    InvalidToken,
    TokenExpired,
    DependencyError
)
from .security import PasswordHasher, TokenIssuer

__all__ = [
    "Settings",
    "get_settings",
    "Base",
    "get_db",
    "create_db_engine",
    "create_session_factory",
    "AppError",
    "ValidationError",
    "DuplicateKey",
    "AuthenticationError",
    "InvalidToken",
    "TokenExpired",
    "DependencyError",
    "PasswordHasher",
    "TokenIssuer"
]
