"""
Assessments router for the Skill Sphere backend.
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skillsphere.core.database import get_db
from skillsphere.models.course import Assessment
from skillsphere.schemas.course import AssessmentResponse
from skillsphere.services.catalog import list_assessments


router = APIRouter()


@router.get("/assessments", response_model=List[AssessmentResponse])
def get_assessments(db: Session = Depends(get_db)) -> List[Assessment]:
    """
    List all assessments.
    """
    return list_assessments(db)
