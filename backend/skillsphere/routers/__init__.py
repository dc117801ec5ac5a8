"""
API routers for the Skill Sphere backend.

This module contains all API endpoint routers:
- auth: Authentication endpoints (register, login, current user)
- courses: Course listing
- assessments: Assessment listing
"""

from fastapi import APIRouter

# Import individual routers
from .auth import router as auth_router
from .courses import router as courses_router
from .assessments import router as assessments_router

# Create main API router
api_router = APIRouter()

# Include all routers; paths sit directly under the API prefix
api_router.include_router(auth_router, tags=["authentication"])
api_router.include_router(courses_router, tags=["courses"])
api_router.include_router(assessments_router, tags=["assessments"])

# Export all routers
__all__ = [
    "api_router",
    "auth_router",
    "courses_router",
    "assessments_router"
]
