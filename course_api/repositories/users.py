"""
User repository for direct database access.

Writes go through the session's validation hook, so a failed commit raises
``RecordValidationError`` with the per-field messages. The email uniqueness
rule is left to the database constraint.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from course_api.models.course import Course  # noqa: F401  (mapper for User.courses)
from course_api.models.user import User
from course_api.models.validation import RecordValidationError

DUPLICATE_EMAIL_MESSAGE = "Email already in use"


class UserRepository:
    """Repository for User entity database operations."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email_address == email).first()

    def create(
        self,
        *,
        first_name: str | None,
        last_name: str | None,
        email_address: str | None,
        password: str | None,
    ) -> User:
        """
        Insert a user whose ``password`` is already hashed.

        Raises:
            RecordValidationError: a field rule failed or the email is taken
        """
        user = User(
            first_name=first_name,
            last_name=last_name,
            email_address=email_address,
            password=password,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except RecordValidationError:
            self.db.rollback()
            raise
        except IntegrityError as exc:
            self.db.rollback()
            raise RecordValidationError([DUPLICATE_EMAIL_MESSAGE]) from exc
        self.db.refresh(user)
        return user
