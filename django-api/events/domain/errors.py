"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    ALREADY_BOOKED = "ALREADY_BOOKED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_EVENT_UPDATE = "INVALID_EVENT_UPDATE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found.",
        )
        self.event_id = event_id


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found.",
        )
        self.booking_id = booking_id


class AlreadyBookedError(DomainError):
    """Raised when a user books an event they already hold a booking for."""

    def __init__(self, event_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_BOOKED,
            message="You have already booked this event.",
        )
        self.event_id = event_id
        self.user_id = user_id


class InvalidCredentialsError(DomainError):
    """Raised when login credentials do not match the directory."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid email or password",
        )


class InvalidEventUpdateError(DomainError):
    """Raised when an update names fields that cannot be changed."""

    def __init__(self, field_names: list[str]) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_UPDATE,
            message=f"Cannot update fields: {', '.join(sorted(field_names))}",
        )
