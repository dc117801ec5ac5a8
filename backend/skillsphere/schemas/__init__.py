"""
Request and response schemas for the Skill Sphere API.
"""

from .auth import (
    UserRegister,
    UserLogin,
    LoginResponse,
    MessageResponse,
    UserResponse
)
from .course import CourseResponse, AssessmentResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "LoginResponse",
    "MessageResponse",
    "UserResponse",
    "CourseResponse",
    "AssessmentResponse"
]
