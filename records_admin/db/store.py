import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from records_admin.core.errors import InternalError
from records_admin.models.student import Student
from records_admin.models.teacher import Teacher

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Student and Teacher persistence over one SQLAlchemy session.

    Constructed per request (see core.deps.get_store) or directly in tests.
    Every write commits on its own; there are no multi-record transactions.
    """

    def __init__(self, db: Session):
        self.db = db

    # --- students ---

    def get_student(self, student_id: str, for_update: bool = False) -> Student | None:
        q = self.db.query(Student).filter(Student.id == student_id)
        if for_update:
            # row lock where the engine supports it; sqlite serializes writers already
            q = q.with_for_update(of=Student)
        return q.first()

    def find_students(
        self,
        teacher_id: str | None = None,
        name: str | None = None,
    ) -> list[Student]:
        """
        - teacher_id: exact match on assigned_teacher_id
        - name: case-insensitive substring (LIKE wildcards in the input are literal)
        Teacher is joined eagerly for display.
        """
        q = self.db.query(Student)
        if teacher_id is not None:
            q = q.filter(Student.assigned_teacher_id == teacher_id)
        if name:
            q = q.filter(Student.name.icontains(name, autoescape=True))
        return q.order_by(Student.name.asc(), Student.id.asc()).all()

    # --- teachers ---

    def get_teacher(self, teacher_id: str) -> Teacher | None:
        return self.db.query(Teacher).filter(Teacher.id == teacher_id).first()

    def find_teacher_by_name(self, name: str) -> Teacher | None:
        return self.db.query(Teacher).filter(Teacher.name == name).first()

    def list_teachers(self) -> list[Teacher]:
        return self.db.query(Teacher).order_by(Teacher.name.asc()).all()

    # --- writes ---

    def add(self, entity):
        self.db.add(entity)
        return self.save(entity)

    def save(self, entity):
        """Commit pending changes to `entity` and reload it from the database."""
        self._commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity) -> None:
        self.db.delete(entity)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            # callers that expect constraint races (seeding) handle these themselves
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Store commit failed")
            raise InternalError("Internal server error") from exc
