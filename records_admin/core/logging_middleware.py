import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from records_admin.core.current_user import resolve_identity

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """One line per request: who called what, and how it ended."""

    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()
        identity = resolve_identity(
            request.headers.get("x-user-role"),
            request.headers.get("x-user-id"),
        )

        response = await call_next(request)

        duration = time.monotonic() - start
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s [%s:%s] -> %s (%.2fs)",
            request.method,
            request.url.path,
            identity.role.value if identity.role else "anonymous",
            identity.user_id or "-",
            response.status_code,
            duration,
        )

        return response
