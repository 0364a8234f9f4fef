"""Request and response bodies.

Request fields are all optional: the field rules and their messages live on
the models, so a missing field must reach the persistence layer as ``None``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    first_name: Optional[str] = Field(default=None, alias='firstName')
    last_name: Optional[str] = Field(default=None, alias='lastName')
    email_address: Optional[str] = Field(default=None, alias='emailAddress')
    password: Optional[str] = None

    class Config:
        populate_by_name = True


class CreateCourseRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    estimated_time: Optional[str] = Field(default=None, alias='estimatedTime')
    materials_needed: Optional[str] = Field(default=None, alias='materialsNeeded')

    class Config:
        populate_by_name = True


class UpdateCourseRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class UserResponse(BaseModel):
    first_name: str = Field(serialization_alias='firstName')
    last_name: str = Field(serialization_alias='lastName')
    email_address: str = Field(serialization_alias='emailAddress')

    class Config:
        from_attributes = True


class CourseResponse(BaseModel):
    id: int
    title: str
    description: str
    estimated_time: Optional[str] = Field(default=None, serialization_alias='estimatedTime')
    materials_needed: Optional[str] = Field(default=None, serialization_alias='materialsNeeded')
    user_id: int = Field(serialization_alias='userId')
    owner: UserResponse = Field(serialization_alias='User')

    class Config:
        from_attributes = True
