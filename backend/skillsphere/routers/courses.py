"""
Courses router for the Skill Sphere backend.
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skillsphere.core.database import get_db
from skillsphere.models.course import Course
from skillsphere.schemas.course import CourseResponse
from skillsphere.services.catalog import list_courses


router = APIRouter()


@router.get("/courses", response_model=List[CourseResponse])
def get_courses(db: Session = Depends(get_db)) -> List[Course]:
    """
    List all courses.
    """
    return list_courses(db)
