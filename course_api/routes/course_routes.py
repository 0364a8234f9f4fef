from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from course_api.auth.dependencies import get_current_user
from course_api.auth.ownership import DELETE_DENIED_MESSAGE, UPDATE_DENIED_MESSAGE, get_owned_course
from course_api.database import get_db
from course_api.errors import NotFoundError
from course_api.models.user import User
from course_api.repositories.courses import CourseRepository
from course_api.schemas import CourseResponse, CreateCourseRequest, UpdateCourseRequest

router = APIRouter(tags=['courses'])


@router.get('/courses', response_model=list[CourseResponse])
def list_courses(db: Session = Depends(get_db)):
    return [CourseResponse.model_validate(course) for course in CourseRepository(db).list_with_owners()]


@router.get('/courses/{course_id}', response_model=CourseResponse)
def read_course(course_id: str, db: Session = Depends(get_db)):
    course = CourseRepository(db).get_with_owner(course_id)
    if course is None:
        raise NotFoundError('Id is not in our database')
    return CourseResponse.model_validate(course)


@router.post('/courses', status_code=status.HTTP_201_CREATED)
def create_course(
    data: Optional[CreateCourseRequest] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    data = data or CreateCourseRequest()
    course = CourseRepository(db).create(
        current_user,
        title=data.title,
        description=data.description,
        estimated_time=data.estimated_time,
        materials_needed=data.materials_needed,
    )
    return Response(status_code=status.HTTP_201_CREATED, headers={'Location': f'/courses/{course.id}'})


@router.put('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT)
def update_course(
    course_id: str,
    data: Optional[UpdateCourseRequest] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    courses = CourseRepository(db)
    course = get_owned_course(courses, course_id, current_user, UPDATE_DENIED_MESSAGE)

    # Omitted fields are written as "" rather than left alone; the model then
    # rejects them as empty.
    data = data or UpdateCourseRequest()
    courses.update_details(course, title=data.title or '', description=data.description or '')
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_course(
    course_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    courses = CourseRepository(db)
    course = get_owned_course(courses, course_id, current_user, DELETE_DENIED_MESSAGE)
    courses.delete(course)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
