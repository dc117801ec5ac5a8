"""
Credential store: the only component that writes User rows.

Email uniqueness is enforced by the database constraint on ``users.email``.
There is no look-before-insert, so a losing concurrent insert surfaces as
an ``IntegrityError`` which is translated to ``DuplicateKey``.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from skillsphere.core.exceptions import DependencyError, DuplicateKey, ValidationError
from skillsphere.models.user import User


logger = logging.getLogger(__name__)


class CredentialStore:
    """
    Persistent record of users keyed by email.

    Emails are compared as exact, case-sensitive strings.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, username: str, email: str, password_hash: str) -> User:
        """
        Insert a new user.

        Raises:
            ValidationError: A required field is empty
            DuplicateKey: A user with ``email`` already exists
            DependencyError: Any other database failure
        """
        missing = [
            name
            for name, value in (
                ("username", username),
                ("email", email),
                ("password_hash", password_hash),
            )
            if not value
        ]
        if missing:
            raise ValidationError(
                "All fields are required",
                details={"missing": missing}
            )

        user = User(username=username, email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Rejected duplicate email: {email}")
            raise DuplicateKey(
                "User registration failed",
                details=f"A user with email '{email}' already exists"
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to store user {email}: {e}")
            raise DependencyError("User registration failed", details=str(e)) from e

        self.db.refresh(user)
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        """Exact-match lookup by email; None when absent."""
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed: {e}")
            raise DependencyError("Database error", details=str(e)) from e

    def get(self, user_id: int) -> Optional[User]:
        try:
            return self.db.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed: {e}")
            raise DependencyError("Database error", details=str(e)) from e
