# import models so Base.metadata knows every table (used by init_db, alembic and tests)
from records_admin.db.base_class import Base  # noqa: F401
from records_admin.models.student import Student  # noqa: F401
from records_admin.models.teacher import Teacher  # noqa: F401
