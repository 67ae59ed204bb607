"""Domain error codes for the venues module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE = "INVALID_DATE"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    TRANSIENT_FAILURE = "TRANSIENT_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class VenueNotFoundError(DomainError):
    """Raised when a venue id does not resolve in the catalog."""

    def __init__(self, venue_id: str) -> None:
        super().__init__(
            code=ErrorCode.VENUE_NOT_FOUND,
            message="Venue not found",
        )
        object.__setattr__(self, "venue_id", venue_id)


class BookingValidationError(DomainError):
    """Raised when a booking or a date/slot selection is incomplete or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
        )


class InvalidDateError(DomainError):
    """Raised when a date is not a valid ISO calendar date."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date format, expected YYYY-MM-DD",
        )
        object.__setattr__(self, "value", value)


class InvalidCredentialsError(DomainError):
    """Raised when a demo sign-in is missing an email, password or role."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=message,
        )


class TransientFailureError(DomainError):
    """Raised when a simulated round trip fails. Callers may retry."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.TRANSIENT_FAILURE,
            message="Service temporarily unavailable",
        )
        object.__setattr__(self, "operation", operation)
