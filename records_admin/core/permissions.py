import logging
from dataclasses import dataclass
from enum import Enum

from records_admin.core.current_user import Identity, Role
from records_admin.core.errors import Forbidden
from records_admin.models.student import Student

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    LOGIN = "login"
    LIST_STUDENTS = "list_students"
    READ_STUDENT = "read_student"
    CREATE_STUDENT = "create_student"
    ASSIGN_TEACHER = "assign_teacher"
    UNASSIGN_TEACHER = "unassign_teacher"
    DELETE_STUDENT = "delete_student"
    UNFINALIZE_STUDENT = "unfinalize_student"
    GRADE_STUDENT = "grade_student"
    FINALIZE_STUDENT = "finalize_student"
    LIST_TEACHERS = "list_teachers"


@dataclass(frozen=True)
class Rule:
    roles: frozenset[Role]
    denied: str
    # teachers may only touch students assigned to them
    owner_only: bool = False
    public: bool = False


ADMIN_ONLY = frozenset({Role.ADMIN})
TEACHER_ONLY = frozenset({Role.TEACHER})
ANY_ROLE = frozenset(Role)

RULES: dict[Operation, Rule] = {
    Operation.LOGIN: Rule(ANY_ROLE, "", public=True),
    Operation.LIST_STUDENTS: Rule(ANY_ROLE, "Access denied", owner_only=True),
    Operation.READ_STUDENT: Rule(ANY_ROLE, "Access denied", owner_only=True),
    Operation.CREATE_STUDENT: Rule(ADMIN_ONLY, "Only admins can add students"),
    Operation.ASSIGN_TEACHER: Rule(ADMIN_ONLY, "Only admins can assign teachers"),
    Operation.UNASSIGN_TEACHER: Rule(ADMIN_ONLY, "Only admins can unassign teachers"),
    Operation.DELETE_STUDENT: Rule(ADMIN_ONLY, "Only admins can delete students"),
    Operation.UNFINALIZE_STUDENT: Rule(ADMIN_ONLY, "Only admins can unfinalize student records"),
    Operation.GRADE_STUDENT: Rule(TEACHER_ONLY, "Only teachers can grade students", owner_only=True),
    Operation.FINALIZE_STUDENT: Rule(
        TEACHER_ONLY, "Only teachers can finalize student records", owner_only=True
    ),
    Operation.LIST_TEACHERS: Rule(ADMIN_ONLY, "Only admins can access the teacher list"),
}


def authorize(identity: Identity, operation: Operation, student: Student | None = None) -> None:
    """
    Allow (return None) or deny (raise Forbidden) `operation` for `identity`.

    Without `student` only the role is checked; routes call this first, load
    the record, then call again with it so the ownership rule applies.
    """
    rule = RULES[operation]
    if rule.public:
        return

    if identity.role is None:
        _deny(identity, operation, "Not logged in")

    if identity.role not in rule.roles:
        _deny(identity, operation, rule.denied)

    if identity.role is Role.TEACHER:
        if not identity.user_id:
            _deny(identity, operation, "Missing user ID")
        if rule.owner_only and student is not None:
            if student.assigned_teacher_id != identity.user_id:
                _deny(identity, operation, "You are not assigned to this student")


def is_allowed(identity: Identity, operation: Operation, student: Student | None = None) -> bool:
    try:
        authorize(identity, operation, student)
    except Forbidden:
        return False
    return True


def student_scope(identity: Identity) -> str | None:
    """Teacher id a student listing must be filtered to, or None for all students."""
    authorize(identity, Operation.LIST_STUDENTS)
    if identity.role is Role.TEACHER:
        return identity.user_id
    return None


def _deny(identity: Identity, operation: Operation, reason: str):
    logger.info(
        "Denied %s for role=%s user=%s: %s",
        operation.value,
        identity.role.value if identity.role else None,
        identity.user_id,
        reason,
    )
    raise Forbidden(reason)
