"""Availability engine.

Remaining capacity is derived from the ledger on every call. Nothing is
cached, so a booking is visible to the very next query.
"""

from datetime import date, timedelta

import structlog
from django.utils import timezone

from museum.domain import (
    BookingStatus,
    Slot,
    SlotProjection,
    TicketType,
    TicketTypeAvailability,
    TicketTypeId,
)
from museum.domain.errors import InvalidTicketTypeIdError, TicketTypeNotFoundError
from museum.stores.interfaces import BookingStore, TicketTypeStore

logger = structlog.get_logger(__name__)

DEFAULT_HORIZON_DAYS = 30


class AvailabilityService:
    """Answers how many places remain per experience and date."""

    def __init__(self, ticket_types: TicketTypeStore, bookings: BookingStore) -> None:
        self._ticket_types = ticket_types
        self._bookings = bookings

    def available_capacity(self, ticket_type_name: str, date: str) -> int:
        """Return places left for ``ticket_type_name`` on ``date``.

        ``date`` is an opaque key; strings that are not calendar dates simply
        match no bookings.

        Raises:
            TicketTypeNotFoundError: If no ticket type has this name.
        """
        ticket_type = self._ticket_types.get_by_name(ticket_type_name)
        if ticket_type is None:
            raise TicketTypeNotFoundError()
        return self._remaining(ticket_type, date)

    def project_slots(
        self,
        ticket_type_id: str,
        horizon_days: int = DEFAULT_HORIZON_DAYS,
        today: date | None = None,
    ) -> SlotProjection:
        """Return one slot per day for ``horizon_days`` days starting today.

        Raises:
            InvalidTicketTypeIdError: If the ticket_type_id is not a valid UUID.
            TicketTypeNotFoundError: If the ticket type does not exist.
        """
        try:
            type_id = TicketTypeId.from_string(ticket_type_id)
        except ValueError:
            raise InvalidTicketTypeIdError() from None
        ticket_type = self._ticket_types.get(type_id)
        if ticket_type is None:
            raise TicketTypeNotFoundError()

        start = today or timezone.localdate()
        days = [start + timedelta(days=offset) for offset in range(horizon_days)]
        booked = self._bookings.booked_quantities(
            ticket_type.name, [day.isoformat() for day in days], BookingStatus.PAID
        )
        total = ticket_type.daily_limit.value
        slots = []
        for day in days:
            consumed = booked.get(day.isoformat(), 0)
            slots.append(
                Slot(
                    date=day,
                    total=total,
                    booked=consumed,
                    available=ticket_type.daily_limit.remaining(consumed),
                )
            )
        logger.debug(
            "availability.slots_projected",
            ticket_type=ticket_type.name,
            start=start.isoformat(),
            horizon_days=horizon_days,
        )
        return SlotProjection(experience_name=ticket_type.name, slots=tuple(slots))

    def annotate_availability(self, date: str | None = None) -> list[TicketTypeAvailability]:
        """List active ticket types, with remaining capacity when a date is given."""
        ticket_types = self._ticket_types.list_active()
        if not date:
            return [TicketTypeAvailability(ticket_type=t) for t in ticket_types]
        return [
            TicketTypeAvailability(ticket_type=t, available=self._remaining(t, date))
            for t in ticket_types
        ]

    def _remaining(self, ticket_type: TicketType, date: str) -> int:
        consumed = self._bookings.booked_quantity(ticket_type.name, date, BookingStatus.PAID)
        return ticket_type.daily_limit.remaining(consumed)
