"""Application error taxonomy.

Every failure a use case reports is one of these. The HTTP layer maps them to
status codes and renders ``{"errors": message}``.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that are reported to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class Unauthorized(AppError):
    """Missing, unknown or revoked credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class NotFound(AppError):
    """The resource does not exist or is not owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(AppError):
    """A uniqueness constraint would be violated."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InternalError(AppError):
    """Unexpected persistence failure."""
