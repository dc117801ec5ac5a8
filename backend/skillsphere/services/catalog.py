"""
Read-only queries for courses and assessments.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillsphere.core.exceptions import DependencyError
from skillsphere.models.course import Assessment, Course


logger = logging.getLogger(__name__)


def list_courses(db: Session) -> List[Course]:
    try:
        return db.query(Course).order_by(Course.id).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch courses: {e}")
        raise DependencyError("Failed to fetch courses", details=str(e)) from e


def list_assessments(db: Session) -> List[Assessment]:
    try:
        return db.query(Assessment).order_by(Assessment.id).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch assessments: {e}")
        raise DependencyError("Failed to fetch assessments", details=str(e)) from e
