"""Course repository for direct database access."""

from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from course_api.models.course import Course
from course_api.models.user import User
from course_api.models.validation import RecordValidationError


def _as_primary_key(value: int | str) -> Optional[int]:
    # An id that is not an integer matches no row.
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class CourseRepository:
    """Repository for Course entity database operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_with_owners(self) -> List[Course]:
        return (
            self.db.query(Course)
            .options(joinedload(Course.owner))
            .order_by(Course.id.asc())
            .all()
        )

    def get_with_owner(self, course_id: int | str) -> Optional[Course]:
        course_id = _as_primary_key(course_id)
        if course_id is None:
            return None
        return (
            self.db.query(Course)
            .options(joinedload(Course.owner))
            .filter(Course.id == course_id)
            .first()
        )

    def get(self, course_id: int | str) -> Optional[Course]:
        course_id = _as_primary_key(course_id)
        if course_id is None:
            return None
        return self.db.get(Course, course_id)

    def create(
        self,
        owner: User,
        *,
        title: str | None,
        description: str | None,
        estimated_time: str | None = None,
        materials_needed: str | None = None,
    ) -> Course:
        course = Course(
            title=title,
            description=description,
            estimated_time=estimated_time,
            materials_needed=materials_needed,
            user_id=owner.id,
        )
        self.db.add(course)
        self._commit()
        self.db.refresh(course)
        return course

    def update_details(self, course: Course, *, title: str, description: str) -> Course:
        course.title = title
        course.description = description
        self._commit()
        self.db.refresh(course)
        return course

    def delete(self, course: Course) -> None:
        self.db.delete(course)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except RecordValidationError:
            self.db.rollback()
            raise
