import uuid

from sqlalchemy import Column, DateTime, String, func
from sqlalchemy.orm import relationship

from records_admin.db.base_class import Base


class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # natural key for seeding
    name = Column(String(255), unique=True, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    students = relationship("Student", back_populates="teacher")
