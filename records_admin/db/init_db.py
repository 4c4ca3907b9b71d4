import logging

from records_admin.core.config import SEED_TEACHER_NAMES, settings
from records_admin.db.base import Base
from records_admin.db.session import SessionLocal, engine
from records_admin.db.store import RecordStore
from records_admin.services.seeding import seed_teachers

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)

    if not settings.seed_on_startup:
        return

    db = SessionLocal()
    try:
        teachers = seed_teachers(RecordStore(db), SEED_TEACHER_NAMES)
        logger.info("Seeded %d teacher(s)", len(teachers))
    finally:
        db.close()
