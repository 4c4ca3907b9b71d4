import pytest

from records_admin.core.current_user import Identity, Role, resolve_identity
from records_admin.core.errors import Forbidden
from records_admin.core.permissions import RULES, Operation, authorize, is_allowed, student_scope
from records_admin.models.student import Student

ADMIN = Identity(role=Role.ADMIN, user_id="admin")
T1 = Identity(role=Role.TEACHER, user_id="t-1")
T2 = Identity(role=Role.TEACHER, user_id="t-2")
NOBODY = Identity(role=None)

ADMIN_OPS = [
    Operation.CREATE_STUDENT,
    Operation.ASSIGN_TEACHER,
    Operation.UNASSIGN_TEACHER,
    Operation.DELETE_STUDENT,
    Operation.UNFINALIZE_STUDENT,
    Operation.LIST_TEACHERS,
]
TEACHER_OPS = [Operation.GRADE_STUDENT, Operation.FINALIZE_STUDENT]


def test_every_operation_has_a_rule():
    assert set(RULES) == set(Operation)


@pytest.mark.parametrize(
    "role, user_id, expected",
    [
        ("admin", "admin", Identity(Role.ADMIN, "admin")),
        ("teacher", "abc", Identity(Role.TEACHER, "abc")),
        ("teacher", "", Identity(Role.TEACHER, None)),
        ("student", "abc", Identity(None, "abc")),
        ("Admin", None, Identity(None, None)),
        (None, None, Identity(None, None)),
    ],
)
def test_resolve_identity(role, user_id, expected):
    assert resolve_identity(role, user_id) == expected


@pytest.mark.parametrize("op", ADMIN_OPS)
def test_admin_only_operations(op):
    assert is_allowed(ADMIN, op)
    assert not is_allowed(T1, op)
    assert not is_allowed(NOBODY, op)


@pytest.mark.parametrize("op", TEACHER_OPS)
def test_teacher_only_operations_require_ownership(op):
    mine = Student(name="Alice", assigned_teacher_id="t-1")
    unassigned = Student(name="Bob", assigned_teacher_id=None)

    assert is_allowed(T1, op, mine)
    assert not is_allowed(T2, op, mine)
    assert not is_allowed(T1, op, unassigned)
    assert not is_allowed(ADMIN, op, mine)


def test_login_is_public():
    assert is_allowed(NOBODY, Operation.LOGIN)


def test_denial_reasons_are_distinct():
    with pytest.raises(Forbidden, match="Not logged in"):
        authorize(NOBODY, Operation.CREATE_STUDENT)

    with pytest.raises(Forbidden, match="Only admins can add students"):
        authorize(T1, Operation.CREATE_STUDENT)

    with pytest.raises(Forbidden, match="Missing user ID"):
        authorize(Identity(role=Role.TEACHER), Operation.GRADE_STUDENT)

    with pytest.raises(Forbidden, match="not assigned"):
        authorize(T2, Operation.GRADE_STUDENT, Student(name="Alice", assigned_teacher_id="t-1"))


def test_read_student_is_scoped_for_teachers():
    s = Student(name="Alice", assigned_teacher_id="t-1")
    assert is_allowed(ADMIN, Operation.READ_STUDENT, s)
    assert is_allowed(T1, Operation.READ_STUDENT, s)
    assert not is_allowed(T2, Operation.READ_STUDENT, s)


def test_student_scope():
    assert student_scope(ADMIN) is None
    assert student_scope(T1) == "t-1"

    with pytest.raises(Forbidden):
        student_scope(NOBODY)

    with pytest.raises(Forbidden):
        student_scope(Identity(role=Role.TEACHER))
