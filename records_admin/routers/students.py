from fastapi import APIRouter, Depends, Response, status

from records_admin.core.current_user import Identity, get_identity
from records_admin.core.deps import get_store
from records_admin.db.store import RecordStore
from records_admin.models.student import Student
from records_admin.schemas.student import GradeUpdate, StudentCreate, StudentRead, TeacherAssign
from records_admin.services import lifecycle

router = APIRouter()

ERRORS = {
    403: {"description": "Not logged in, wrong role or not the assigned teacher"},
    404: {"description": "Student or teacher not found"},
    409: {"description": "Not allowed in the record's current state"},
}


def _with_state(student: Student) -> Student:
    # attach computed field for response
    student.state = lifecycle.student_state(student)
    return student


@router.get("/students", response_model=list[StudentRead])
def list_students(
    name: str | None = None,
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    return [_with_state(s) for s in lifecycle.list_students(store, identity, name)]


# declared before /students/{student_id} so "search" isn't read as an id
@router.get("/students/search", response_model=list[StudentRead])
def search_students(
    name: str = "",
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    return [_with_state(s) for s in lifecycle.list_students(store, identity, name)]


@router.get("/students/{student_id}", response_model=StudentRead, responses=ERRORS)
def get_student(
    student_id: str,
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    return _with_state(lifecycle.get_student(store, identity, student_id))


@router.post(
    "/students",
    response_model=StudentRead,
    status_code=status.HTTP_201_CREATED,
    responses={403: ERRORS[403]},
)
def create_student(
    payload: StudentCreate,
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    return _with_state(lifecycle.create_student(store, identity, payload.name))


@router.put("/students/{student_id}/assign", response_model=StudentRead, responses=ERRORS)
def assign_teacher(
    student_id: str,
    payload: TeacherAssign,
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    student = lifecycle.assign_teacher(store, identity, student_id, payload.teacherId)
    return _with_state(student)


@router.put("/students/{student_id}/unassign", response_model=StudentRead, responses=ERRORS)
def unassign_teacher(
    student_id: str,
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    return _with_state(lifecycle.unassign_teacher(store, identity, student_id))


@router.put("/students/{student_id}/grade", response_model=StudentRead, responses=ERRORS)
def grade_student(
    student_id: str,
    payload: GradeUpdate,
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    student = lifecycle.set_grade(store, identity, student_id, payload.reportType, payload.grade)
    return _with_state(student)


@router.put("/students/{student_id}/finalize", response_model=StudentRead, responses=ERRORS)
def finalize_student(
    student_id: str,
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    return _with_state(lifecycle.finalize(store, identity, student_id))


@router.put("/students/{student_id}/unfinalize", response_model=StudentRead, responses=ERRORS)
def unfinalize_student(
    student_id: str,
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    return _with_state(lifecycle.unfinalize(store, identity, student_id))


@router.delete(
    "/students/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERRORS,
)
def delete_student(
    student_id: str,
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    lifecycle.delete_student(store, identity, student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
