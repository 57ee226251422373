"""API errors - map election errors to status codes and response bodies."""

from pydantic import BaseModel

from app.errors import (
    AlreadyVotedError,
    AuthorizationError,
    DuplicateError,
    ElectionError,
    StateError,
    ValidationError,
)

# Most specific first: AlreadyVotedError is both an authorization and a duplicate error
ERROR_STATUS: list[tuple[type[ElectionError], int]] = [
    (AlreadyVotedError, 409),
    (AuthorizationError, 403),
    (DuplicateError, 409),
    (StateError, 409),
    (ValidationError, 422),
]


class ErrorResponse(BaseModel):
    """Error body."""

    status: int
    error: str
    message: str


def status_for(exc: ElectionError) -> int:
    """HTTP status for an election error."""
    for cls, status in ERROR_STATUS:
        if isinstance(exc, cls):
            return status
    return 400


def error_response(exc: ElectionError) -> ErrorResponse:
    """Build the error body for an election error."""
    return ErrorResponse(status=status_for(exc), error=exc.__class__.__name__, message=exc.message)
