"""Course model definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from course_api.database import Base
from course_api.models.validation import check_required_text


class Course(Base):
    """Represents a course created by, and owned by, a single user."""
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    estimated_time = Column("estimatedTime", String)
    materials_needed = Column("materialsNeeded", String)
    user_id = Column("userId", Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column("createdAt", DateTime, server_default=func.now(), nullable=False)
    updated_at = Column("updatedAt", DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    owner = relationship("User", back_populates="courses")

    def validation_errors(self) -> list[str]:
        messages = (
            check_required_text(self.title, "Title required", "Provide a title")
            + check_required_text(self.description, "Description required", "Provide a description")
        )
        if self.user_id is None and self.owner is None:
            messages.append("Course owner required")
        return messages
