"""
Database models for the Skill Sphere backend.

This module contains all SQLAlchemy models for the application:
- User model for authentication
- Course and Assessment models for the read-only catalogue
"""

from skillsphere.core.database import Base

# Import all models to ensure they're registered with SQLAlchemy
from .user import User
from .course import Course, Assessment

# Export all models
__all__ = [
    "Base",
    "User",
    "Course",
    "Assessment"
]
