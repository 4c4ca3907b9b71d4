from fastapi import status


class RecordError(Exception):
    """Base class for errors raised by the record policy and lifecycle.

    Each subclass carries the HTTP status it maps to, so routers never
    translate errors by hand.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RecordError):
    """Malformed, missing or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST


class Forbidden(RecordError):
    """Missing identity, wrong role or not the owner of the record."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFound(RecordError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(RecordError):
    """Illegal state transition for the current record state."""

    status_code = status.HTTP_409_CONFLICT


class InternalError(RecordError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
