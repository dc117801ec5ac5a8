"""
Service layer for the Skill Sphere backend.

- credential_store: persistence of User records
- auth: registration and login flows
- catalog: read-only course and assessment queries
"""

from .credential_store import CredentialStore
from .auth import AuthService
from .catalog import list_courses, list_assessments

__all__ = [
    "CredentialStore",
    "AuthService",
    "list_courses",
    "list_assessments"
]
