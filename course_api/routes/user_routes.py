from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from course_api.auth.dependencies import get_current_user
from course_api.auth.security import hash_password
from course_api.database import get_db
from course_api.models.user import User
from course_api.repositories.users import UserRepository
from course_api.schemas import CreateUserRequest, UserResponse

router = APIRouter(tags=['users'])


@router.get('/users', response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    return UserResponse.model_validate(current_user)


@router.post('/users', status_code=status.HTTP_201_CREATED)
def create_user(data: Optional[CreateUserRequest] = None, db: Session = Depends(get_db)):
    data = data or CreateUserRequest()
    # Blank or missing passwords go through unhashed so the model reports them.
    password = hash_password(data.password) if data.password else data.password

    UserRepository(db).create(
        first_name=data.first_name,
        last_name=data.last_name,
        email_address=data.email_address,
        password=password,
    )
    return Response(status_code=status.HTTP_201_CREATED, headers={'Location': '/'})
