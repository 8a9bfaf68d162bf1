"""Booking ledger writer.

Appending a booking is the only way capacity gets consumed. Capacity is
advisory here: payment has already been taken by the time a booking is
written, so an append that oversells a slot is still accepted and only
logged.
"""

import secrets

import structlog
from django.utils import timezone

from museum.domain import (
    Booking,
    BookingDraft,
    BookingStatus,
    Money,
    TicketVerification,
)
from museum.domain.errors import (
    BookingNotFoundError,
    BookingValidationError,
    DuplicateBookingError,
)
from museum.stores.interfaces import BookingStore, TicketTypeStore

logger = structlog.get_logger(__name__)


def generate_booking_id() -> str:
    return f"MUS-{secrets.token_hex(4).upper()}"


class LedgerService:
    """Service for writing and reading the booking ledger."""

    def __init__(self, bookings: BookingStore, ticket_types: TicketTypeStore) -> None:
        self._bookings = bookings
        self._ticket_types = ticket_types

    def create_booking(self, draft: BookingDraft) -> Booking:
        """Validate a paid booking and append it to the ledger.

        Raises:
            BookingValidationError: If a required field is missing or out of range.
            DuplicateBookingError: If the booking id is already in the ledger.
        """
        self._validate(draft)
        booking_id = draft.booking_id.strip() or generate_booking_id()
        if self._bookings.exists(booking_id):
            raise DuplicateBookingError(booking_id)

        booking = self._bookings.append(
            Booking(
                booking_id=booking_id,
                visitor_uid=draft.visitor_uid,
                visitor_name=draft.visitor_name,
                ticket_type=draft.ticket_type,
                date=draft.date,
                quantity=draft.quantity,
                total_amount=Money(draft.total_amount),
                status=BookingStatus.PAID,
                language=draft.language,
                guests=draft.guests,
                razorpay_order_id=draft.razorpay_order_id,
                payment_id=draft.payment_id,
                created_at=timezone.now(),
            )
        )
        log = logger.bind(
            booking_id=booking.booking_id,
            ticket_type=booking.ticket_type,
            date=booking.date,
            quantity=booking.quantity,
        )
        log.info("booking.created")
        if booking.guests and len(booking.guests) != booking.quantity:
            log.warning("booking.guest_count_mismatch", guests=len(booking.guests))
        self._warn_if_oversold(booking, log)
        return booking

    def list_for_visitor(self, visitor_uid: str) -> list[Booking]:
        """Return a visitor's booking history, newest first."""
        return self._bookings.list_for_visitor(visitor_uid)

    def verify_ticket(self, booking_id: str) -> TicketVerification:
        """Look up a presented ticket and the experience it grants.

        Raises:
            BookingNotFoundError: If no booking carries this id.
        """
        booking = self._bookings.get(booking_id)
        if booking is None:
            logger.info("ticket.verification_failed", booking_id=booking_id)
            raise BookingNotFoundError()
        experience = self._ticket_types.get_by_name(booking.ticket_type)
        return TicketVerification(booking=booking, experience=experience)

    def _validate(self, draft: BookingDraft) -> None:
        if not draft.ticket_type.strip():
            raise BookingValidationError("ticketType is required")
        if not draft.date.strip():
            raise BookingValidationError("date is required")
        if draft.quantity < 1:
            raise BookingValidationError("quantity must be at least 1")
        if draft.total_amount < 0:
            raise BookingValidationError("totalAmount cannot be negative")

    def _warn_if_oversold(self, booking: Booking, log) -> None:
        ticket_type = self._ticket_types.get_by_name(booking.ticket_type)
        if ticket_type is None:
            return
        consumed = self._bookings.booked_quantity(
            booking.ticket_type, booking.date, BookingStatus.PAID
        )
        if consumed > ticket_type.daily_limit.value:
            log.warning(
                "booking.capacity_exceeded",
                daily_limit=ticket_type.daily_limit.value,
                consumed=consumed,
            )
