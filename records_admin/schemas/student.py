from datetime import datetime

from pydantic import BaseModel, Field, StrictInt
from pydantic.alias_generators import to_camel

from records_admin.core.config import GRADE_MAX, GRADE_MIN, NAME_MAX_LENGTH
from records_admin.schemas.teacher import TeacherRead
from records_admin.services.lifecycle import ReportType, StudentState


class StudentCreate(BaseModel):
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)


class TeacherAssign(BaseModel):
    teacherId: str = Field(min_length=1)


class GradeUpdate(BaseModel):
    reportType: ReportType
    # strict: "85", 85.0 and true are rejected, not coerced
    grade: StrictInt = Field(ge=GRADE_MIN, le=GRADE_MAX)


class StudentRead(BaseModel):
    id: str
    name: str
    assigned_teacher_id: str | None = None
    progress_report_grade: int | None = None
    final_report_grade: int | None = None
    finalized: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    teacher: TeacherRead | None = None

    # derived from the fields above, read-only
    state: StudentState | None = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
