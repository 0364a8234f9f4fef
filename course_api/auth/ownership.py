from course_api.errors import ForbiddenError, NotFoundError
from course_api.models.course import Course
from course_api.models.user import User
from course_api.repositories.courses import CourseRepository

COURSE_NOT_FOUND_MESSAGE = "Course does not exist"
UPDATE_DENIED_MESSAGE = "You can only update courses you own"
DELETE_DENIED_MESSAGE = "User is not authorized to delete this course"


def is_course_owner(course: Course, user: User) -> bool:
    return course.user_id == user.id


def get_owned_course(
    courses: CourseRepository,
    course_id: int | str,
    current_user: User,
    denial_message: str,
) -> Course:
    """Load a course the current user is allowed to modify.

    Existence is checked before ownership, so an unknown id is a 404 even for
    a user who could never own it.
    """
    course = courses.get(course_id)
    if course is None:
        raise NotFoundError(COURSE_NOT_FOUND_MESSAGE)
    if not is_course_owner(course, current_user):
        raise ForbiddenError(denial_message)
    return course
