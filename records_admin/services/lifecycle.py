"""
Student record lifecycle.

States are derived from the record itself (see `student_state`):

    UNASSIGNED --assign--> ASSIGNED_UNGRADED --set_grade--> PARTIALLY_GRADED
         ^                        |                              |
         +-------unassign---------+------------------------------+
                                                                 |
                      FINALIZED <--finalize (final grade set)----+
                          |
                          +--unfinalize (admin)--> previous state

Every operation checks, in order: role, input, existence (404), ownership,
state (409). Nothing is written until all checks pass.
"""

import logging
from enum import Enum

from records_admin.core.config import GRADE_MAX, GRADE_MIN, NAME_MAX_LENGTH
from records_admin.core.current_user import Identity
from records_admin.core.errors import Conflict, NotFound, ValidationError
from records_admin.core.permissions import Operation, authorize, student_scope
from records_admin.db.store import RecordStore
from records_admin.models.student import Student
from records_admin.models.teacher import Teacher

logger = logging.getLogger(__name__)


class StudentState(str, Enum):
    UNASSIGNED = "unassigned"
    ASSIGNED_UNGRADED = "assigned_ungraded"
    PARTIALLY_GRADED = "partially_graded"
    FINALIZED = "finalized"


class ReportType(str, Enum):
    PROGRESS = "progress"
    FINAL = "final"


def student_state(student: Student) -> StudentState:
    if student.finalized:
        return StudentState.FINALIZED
    if student.assigned_teacher_id is None:
        return StudentState.UNASSIGNED
    if student.progress_report_grade is None and student.final_report_grade is None:
        return StudentState.ASSIGNED_UNGRADED
    return StudentState.PARTIALLY_GRADED


# --- helpers ---


def _load_student(store: RecordStore, student_id: str) -> Student:
    student = store.get_student(student_id, for_update=True)
    if not student:
        raise NotFound("Student not found")
    return student


def _ensure_not_finalized(student: Student, message: str = "Cannot modify a finalized record") -> None:
    if student.finalized:
        raise Conflict(message)


def _clean_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Student name is required")
    name = name.strip()
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Student name must be at most {NAME_MAX_LENGTH} characters")
    return name


def _validate_grade(grade) -> int:
    # bool is an int subclass; True is not a grade
    if isinstance(grade, bool) or not isinstance(grade, int):
        raise ValidationError(f"Grade must be an integer between {GRADE_MIN} and {GRADE_MAX}")
    if grade < GRADE_MIN or grade > GRADE_MAX:
        raise ValidationError(f"Grade must be an integer between {GRADE_MIN} and {GRADE_MAX}")
    return grade


def _validate_report_type(report_type) -> ReportType:
    try:
        return ReportType(report_type)
    except ValueError:
        raise ValidationError("Valid reportType (progress or final) is required") from None


# --- reads ---


def list_students(store: RecordStore, identity: Identity, name: str | None = None) -> list[Student]:
    teacher_id = student_scope(identity)
    return store.find_students(teacher_id=teacher_id, name=name)


def get_student(store: RecordStore, identity: Identity, student_id: str) -> Student:
    authorize(identity, Operation.READ_STUDENT)
    student = store.get_student(student_id)
    if not student:
        raise NotFound("Student not found")
    authorize(identity, Operation.READ_STUDENT, student)
    return student


def list_teachers(store: RecordStore, identity: Identity) -> list[Teacher]:
    authorize(identity, Operation.LIST_TEACHERS)
    return store.list_teachers()


# --- transitions ---


def create_student(store: RecordStore, identity: Identity, name: str) -> Student:
    authorize(identity, Operation.CREATE_STUDENT)
    student = store.add(Student(name=_clean_name(name), finalized=False))
    logger.info("Created student %s (%r)", student.id, student.name)
    return student


def assign_teacher(store: RecordStore, identity: Identity, student_id: str, teacher_id: str) -> Student:
    authorize(identity, Operation.ASSIGN_TEACHER)
    if not isinstance(teacher_id, str) or not teacher_id.strip():
        raise ValidationError("Teacher ID is required")

    student = _load_student(store, student_id)
    authorize(identity, Operation.ASSIGN_TEACHER, student)
    _ensure_not_finalized(student)

    teacher = store.get_teacher(teacher_id)
    if not teacher:
        raise NotFound("Teacher not found")

    # reassignment overwrites; existing grades are kept
    student.assigned_teacher_id = teacher.id
    student = store.save(student)
    logger.info("Student %s assigned to teacher %s", student.id, teacher.id)
    return student


def unassign_teacher(store: RecordStore, identity: Identity, student_id: str) -> Student:
    authorize(identity, Operation.UNASSIGN_TEACHER)
    student = _load_student(store, student_id)
    authorize(identity, Operation.UNASSIGN_TEACHER, student)
    _ensure_not_finalized(student)

    previous = student.assigned_teacher_id
    student.assigned_teacher_id = None
    student = store.save(student)
    logger.info("Student %s unassigned from teacher %s", student.id, previous)
    return student


def set_grade(
    store: RecordStore,
    identity: Identity,
    student_id: str,
    report_type: ReportType | str,
    grade: int,
) -> Student:
    authorize(identity, Operation.GRADE_STUDENT)
    report_type = _validate_report_type(report_type)
    grade = _validate_grade(grade)

    student = _load_student(store, student_id)
    authorize(identity, Operation.GRADE_STUDENT, student)
    _ensure_not_finalized(student)

    if report_type is ReportType.PROGRESS:
        student.progress_report_grade = grade
    else:
        student.final_report_grade = grade

    student = store.save(student)
    logger.info(
        "Student %s %s grade set to %d by teacher %s",
        student.id,
        report_type.value,
        grade,
        identity.user_id,
    )
    return student


def finalize(store: RecordStore, identity: Identity, student_id: str) -> Student:
    authorize(identity, Operation.FINALIZE_STUDENT)
    student = _load_student(store, student_id)
    authorize(identity, Operation.FINALIZE_STUDENT, student)
    _ensure_not_finalized(student, "Record is already finalized")

    # progress grade is not required
    if student.final_report_grade is None:
        raise Conflict("Final report grade must be entered before finalizing")

    student.finalized = True
    student = store.save(student)
    logger.info("Student %s finalized by teacher %s", student.id, identity.user_id)
    return student


def unfinalize(store: RecordStore, identity: Identity, student_id: str) -> Student:
    authorize(identity, Operation.UNFINALIZE_STUDENT)
    student = _load_student(store, student_id)
    authorize(identity, Operation.UNFINALIZE_STUDENT, student)
    if not student.finalized:
        raise Conflict("Record is not finalized")

    # only the flag changes; grades and assignment stay
    student.finalized = False
    student = store.save(student)
    logger.info("Student %s unfinalized by admin", student.id)
    return student


def delete_student(store: RecordStore, identity: Identity, student_id: str) -> None:
    authorize(identity, Operation.DELETE_STUDENT)
    student = _load_student(store, student_id)
    authorize(identity, Operation.DELETE_STUDENT, student)
    _ensure_not_finalized(student, "Cannot delete a finalized record")

    store.delete(student)
    logger.info("Deleted student %s", student_id)
