import logging
from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError

from records_admin.db.store import RecordStore
from records_admin.models.teacher import Teacher

logger = logging.getLogger(__name__)


def ensure_teacher(store: RecordStore, name: str) -> Teacher:
    """Return the teacher called `name`, creating it if it doesn't exist yet."""
    teacher = store.find_teacher_by_name(name)
    if teacher:
        return teacher

    try:
        teacher = store.add(Teacher(name=name))
    except IntegrityError:
        # someone else created it between our read and insert (unique name)
        teacher = store.find_teacher_by_name(name)
        if teacher is None:
            raise
        return teacher

    logger.info("Created teacher %r (%s)", teacher.name, teacher.id)
    return teacher


def seed_teachers(store: RecordStore, names: Iterable[str]) -> list[Teacher]:
    # idempotent: running this twice never duplicates a teacher
    return [ensure_teacher(store, name) for name in names]
