import uuid
from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from records_admin.db.base_class import Base


class Student(Base):
    __tablename__ = "students"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    assigned_teacher_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("teachers.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Grading fields (nullable until graded)
    progress_report_grade: Mapped[int | None] = mapped_column(Integer, nullable=True)
    final_report_grade: Mapped[int | None] = mapped_column(Integer, nullable=True)
    finalized: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint(
            "progress_report_grade IS NULL OR progress_report_grade BETWEEN 0 AND 100",
            name="ck_students_progress_grade_range",
        ),
        CheckConstraint(
            "final_report_grade IS NULL OR final_report_grade BETWEEN 0 AND 100",
            name="ck_students_final_grade_range",
        ),
        CheckConstraint(
            "NOT finalized OR final_report_grade IS NOT NULL",
            name="ck_students_finalized_has_final_grade",
        ),
    )

    teacher = relationship("Teacher", back_populates="students", lazy="joined")
