"""In-memory stores.

Used by unit tests and for running the services without a database.
Iteration order is insertion order, which stands in for creation time.
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import datetime
from typing import Any
from uuid import uuid4

from django.utils import timezone

from museum.domain import (
    Booking,
    BookingStatus,
    TicketType,
    TicketTypeDraft,
    TicketTypeId,
    VisitorIdentity,
    VisitorRole,
)
from museum.domain.errors import DuplicateBookingError, DuplicateVisitorError
from museum.stores.interfaces import BookingStore, TicketTypeStore, VisitorStore


class InMemoryTicketTypeStore(TicketTypeStore):
    def __init__(self) -> None:
        self._rows: dict[TicketTypeId, TicketType] = {}

    def list_active(self) -> list[TicketType]:
        return [row for row in self._rows.values() if row.is_active]

    def get(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        return self._rows.get(ticket_type_id)

    def get_by_name(self, name: str) -> TicketType | None:
        matches = [row for row in self._rows.values() if row.name == name]
        if not matches:
            return None
        return max(matches, key=lambda row: (row.is_active, row.created_at))

    def active_name_exists(self, name: str, exclude: TicketTypeId | None = None) -> bool:
        return any(
            row.name == name and row.is_active and row.id != exclude
            for row in self._rows.values()
        )

    def create(self, draft: TicketTypeDraft) -> TicketType:
        row = TicketType(
            id=TicketTypeId(uuid4()),
            name=draft.name,
            price=draft.price,
            description=draft.description,
            category=draft.category,
            is_active=draft.is_active,
            daily_limit=draft.daily_limit,
            created_at=timezone.now(),
        )
        self._rows[row.id] = row
        return row

    def update(
        self, ticket_type_id: TicketTypeId, changes: Mapping[str, Any]
    ) -> TicketType | None:
        row = self._rows.get(ticket_type_id)
        if row is None:
            return None
        row = replace(row, **changes)
        self._rows[ticket_type_id] = row
        return row

    def delete(self, ticket_type_id: TicketTypeId) -> bool:
        return self._rows.pop(ticket_type_id, None) is not None

    def count(self) -> int:
        return len(self._rows)


class InMemoryBookingStore(BookingStore):
    def __init__(self) -> None:
        self._rows: list[Booking] = []

    def _matching(self, ticket_type: str, status: BookingStatus) -> Iterable[Booking]:
        return (
            row
            for row in self._rows
            if row.ticket_type == ticket_type and row.status == status
        )

    def append(self, booking: Booking) -> Booking:
        if any(row.booking_id == booking.booking_id for row in self._rows):
            raise DuplicateBookingError(booking.booking_id)
        self._rows.append(booking)
        return booking

    def exists(self, booking_id: str) -> bool:
        return self.get(booking_id) is not None

    def get(self, booking_id: str) -> Booking | None:
        return next((row for row in self._rows if row.booking_id == booking_id), None)

    def list_for_visitor(self, visitor_uid: str) -> list[Booking]:
        return [row for row in reversed(self._rows) if row.visitor_uid == visitor_uid]

    def recent(self, limit: int) -> list[Booking]:
        return list(reversed(self._rows))[:limit]

    def booked_quantity(self, ticket_type: str, date: str, status: BookingStatus) -> int:
        return sum(row.quantity for row in self._matching(ticket_type, status) if row.date == date)

    def booked_quantities(
        self, ticket_type: str, dates: Iterable[str], status: BookingStatus
    ) -> dict[str, int]:
        wanted = set(dates)
        totals: Counter[str] = Counter()
        for row in self._matching(ticket_type, status):
            if row.date in wanted:
                totals[row.date] += row.quantity
        return dict(totals)

    def count(self) -> int:
        return len(self._rows)

    def total_amount(self) -> int:
        return sum(row.total_amount.amount for row in self._rows)

    def total_quantity(self) -> int:
        return sum(row.quantity for row in self._rows)

    def distinct_visitor_uids(self) -> set[str]:
        return {row.visitor_uid for row in self._rows if row.visitor_uid}

    def guest_gender_counts(self) -> dict[str, int]:
        return dict(Counter(guest.gender for row in self._rows for guest in row.guests))


class InMemoryVisitorStore(VisitorStore):
    def __init__(self) -> None:
        self._rows: dict[str, VisitorIdentity] = {}

    def get(self, uid: str) -> VisitorIdentity | None:
        return self._rows.get(uid)

    def create(self, identity: VisitorIdentity) -> VisitorIdentity:
        if identity.uid in self._rows:
            raise DuplicateVisitorError(identity.uid)
        self._rows[identity.uid] = identity
        return identity

    def touch(
        self, uid: str, name: str, picture: str, last_active: datetime
    ) -> VisitorIdentity:
        row = replace(self._rows[uid], name=name, picture=picture, last_active=last_active)
        self._rows[uid] = row
        return row

    def count(self, role: VisitorRole) -> int:
        return sum(1 for row in self._rows.values() if row.role == role)

    def count_active_since(self, role: VisitorRole, since: datetime) -> int:
        return sum(
            1
            for row in self._rows.values()
            if row.role == role and row.last_active >= since
        )
