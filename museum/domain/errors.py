"""Domain error codes for the museum module.

Errors fall into four families. Handlers map each family to one HTTP
status; services only ever raise these.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_TICKET_TYPE_ID = "INVALID_TICKET_TYPE_ID"
    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"
    DUPLICATE_TICKET_TYPE = "DUPLICATE_TICKET_TYPE"
    INVALID_BOOKING = "INVALID_BOOKING"
    DUPLICATE_BOOKING = "DUPLICATE_BOOKING"
    INVALID_IDENTITY = "INVALID_IDENTITY"
    DUPLICATE_VISITOR = "DUPLICATE_VISITOR"
    INVALID_PAYMENT_ORDER = "INVALID_PAYMENT_ORDER"
    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class DomainValidationError(DomainError):
    """Malformed or missing input on a write."""


class NotFoundError(DomainError):
    """A referenced ticket type or booking does not exist."""


class UnauthorizedError(DomainError):
    """Missing, invalid or insufficient admin credential."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message=message)


class UpstreamFailureError(DomainError):
    """The payment gateway or another collaborator failed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.UPSTREAM_FAILURE, message=message)


class InvalidTicketTypeIdError(DomainValidationError):
    """Raised when a ticket type ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TYPE_ID,
            message="Invalid ticket type ID format",
        )


class TicketTypeValidationError(DomainValidationError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TICKET_TYPE, message=message)


class DuplicateTicketTypeError(DomainValidationError):
    """Raised when an active ticket type already uses a name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_TICKET_TYPE,
            message=f"An active experience named '{name}' already exists",
        )


class BookingValidationError(DomainValidationError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_BOOKING, message=message)


class DuplicateBookingError(DomainValidationError):
    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_BOOKING,
            message=f"Booking {booking_id} already exists",
        )


class IdentityValidationError(DomainValidationError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_IDENTITY, message=message)


class DuplicateVisitorError(DomainValidationError):
    """Raised when another request created the same identity first."""

    def __init__(self, uid: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_VISITOR,
            message=f"Visitor {uid} already exists",
        )


class PaymentOrderValidationError(DomainValidationError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_PAYMENT_ORDER, message=message)


class TicketTypeNotFoundError(NotFoundError):
    """Raised when a ticket type is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_TYPE_NOT_FOUND,
            message="Experience not found",
        )


class BookingNotFoundError(NotFoundError):
    """Raised when a booking id does not match any ledger entry."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Invalid or Expired Ticket",
        )


class InvalidCredentialsError(UnauthorizedError):
    def __init__(self) -> None:
        DomainError.__init__(
            self,
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid credentials",
        )
