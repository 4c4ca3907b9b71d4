import os

# keep the app's own engine in memory; tests never touch a real database file
os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from records_admin.core.config import SEED_TEACHER_NAMES  # noqa: E402
from records_admin.core.current_user import Identity, Role  # noqa: E402
from records_admin.core.deps import get_store  # noqa: E402
from records_admin.db.base import Base  # noqa: E402
from records_admin.db.session import make_engine  # noqa: E402
from records_admin.db.store import RecordStore  # noqa: E402
from records_admin.main import app  # noqa: E402
from records_admin.services.seeding import seed_teachers  # noqa: E402

engine = make_engine("sqlite://")
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_store():
    db = TestingSessionLocal()
    try:
        yield RecordStore(db)
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_test_db():
    """Fresh schema for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def teacher_ids():
    """Seed the configured teachers; returns {name: id}."""
    db = TestingSessionLocal()
    try:
        teachers = seed_teachers(RecordStore(db), SEED_TEACHER_NAMES)
        return {t.name: t.id for t in teachers}
    finally:
        db.close()


@pytest.fixture()
def store():
    db = TestingSessionLocal()
    try:
        yield RecordStore(db)
    finally:
        db.close()


@pytest.fixture()
def admin():
    return Identity(role=Role.ADMIN, user_id="admin")


@pytest.fixture()
def teacher1(teacher_ids):
    return Identity(role=Role.TEACHER, user_id=teacher_ids["Professor Smith"])


@pytest.fixture()
def teacher2(teacher_ids):
    return Identity(role=Role.TEACHER, user_id=teacher_ids["Dr. Johnson"])


def as_headers(identity: Identity) -> dict:
    headers = {}
    if identity.role is not None:
        headers["X-User-Role"] = identity.role.value
    if identity.user_id:
        headers["X-User-Id"] = identity.user_id
    return headers


@pytest.fixture()
def admin_headers(admin):
    return as_headers(admin)


@pytest.fixture()
def t1_headers(teacher1):
    return as_headers(teacher1)


@pytest.fixture()
def t2_headers(teacher2):
    return as_headers(teacher2)


@pytest.fixture()
def client():
    """Test client that uses the test DB via dependency override."""
    app.dependency_overrides[get_store] = override_get_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
