import hmac
from dataclasses import dataclass

from records_admin.core.config import ADMIN_CREDENTIALS, TEACHER_CREDENTIALS
from records_admin.core.current_user import Role
from records_admin.db.store import RecordStore
from records_admin.services.seeding import ensure_teacher

ADMIN_USER_ID = "admin"


@dataclass(frozen=True)
class LoginResult:
    role: Role
    user_id: str
    user_name: str | None = None


def _matches(username: str, password: str, creds: dict) -> bool:
    return hmac.compare_digest(username, creds["username"]) and hmac.compare_digest(
        password, creds["password"]
    )


def authenticate(store: RecordStore, username: str, password: str) -> LoginResult | None:
    """
    Check the dev credential list. Returns None on bad credentials.

    A teacher login is tied to the Teacher record with the configured name,
    which is created on first login if seeding hasn't run yet.
    """
    if _matches(username, password, ADMIN_CREDENTIALS):
        # admin has no Teacher-style record behind it
        return LoginResult(role=Role.ADMIN, user_id=ADMIN_USER_ID)

    for creds in TEACHER_CREDENTIALS:
        if _matches(username, password, creds):
            teacher = ensure_teacher(store, creds["teacher_name"])
            return LoginResult(role=Role.TEACHER, user_id=teacher.id, user_name=teacher.name)

    return None
