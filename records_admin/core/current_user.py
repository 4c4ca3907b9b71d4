from dataclasses import dataclass
from enum import Enum

from fastapi import Header


class Role(str, Enum):
    ADMIN = "admin"
    TEACHER = "teacher"


@dataclass(frozen=True)
class Identity:
    """Who is calling. Derived per request, never stored."""

    role: Role | None
    user_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.role is not None


ANONYMOUS = Identity(role=None, user_id=None)


def resolve_identity(role: str | None, user_id: str | None) -> Identity:
    """
    Map a raw role indicator and user id to an Identity.

    - unknown or missing role -> role None
    - empty user id -> None

    This trusts the caller. Swap `get_identity` for a verified session or
    token resolver without touching the policy code.
    """
    try:
        resolved_role = Role(role) if role else None
    except ValueError:
        resolved_role = None

    return Identity(role=resolved_role, user_id=user_id or None)


# DEV ONLY: identity is echoed from request headers set by the web client after /login.
def get_identity(
    x_user_role: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
) -> Identity:
    return resolve_identity(x_user_role, x_user_id)
