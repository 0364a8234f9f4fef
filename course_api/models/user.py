"""User model definitions."""

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from course_api.database import Base
from course_api.models.validation import check_email, check_required_text


class User(Base):
    """Represents a registered user who may own courses."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column("firstName", String, nullable=False)
    last_name = Column("lastName", String, nullable=False)
    email_address = Column("emailAddress", String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # salted hash, never plaintext
    created_at = Column("createdAt", DateTime, server_default=func.now(), nullable=False)
    updated_at = Column("updatedAt", DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    courses = relationship("Course", back_populates="owner")

    def validation_errors(self) -> list[str]:
        return (
            check_required_text(self.first_name, "First name required", "Provide a first name")
            + check_required_text(self.last_name, "Last name required", "Provide a last name")
            + check_email(self.email_address, "Email required", "Provide a valid email")
            + check_required_text(self.password, "Password required", "Provide a password")
        )
