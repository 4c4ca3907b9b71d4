from fastapi import APIRouter, Depends

from records_admin.core.current_user import Identity, get_identity
from records_admin.core.deps import get_store
from records_admin.db.store import RecordStore
from records_admin.schemas.teacher import TeacherRead
from records_admin.services import lifecycle

router = APIRouter()


@router.get("/teachers", response_model=list[TeacherRead])
def list_teachers(
    store: RecordStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    return lifecycle.list_teachers(store, identity)
