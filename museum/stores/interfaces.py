"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. They only store and
query; every derived figure is computed by the services.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from museum.domain import (
    Booking,
    BookingStatus,
    TicketType,
    TicketTypeDraft,
    TicketTypeId,
    VisitorIdentity,
    VisitorRole,
)


class TicketTypeStore(ABC):
    """Interface for the inventory catalog."""

    @abstractmethod
    def list_active(self) -> list[TicketType]:
        """Return active ticket types ordered by created_at ascending."""
        ...

    @abstractmethod
    def get(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        """Return a ticket type by ID, or None if not found."""
        ...

    @abstractmethod
    def get_by_name(self, name: str) -> TicketType | None:
        """Return the ticket type with this name, preferring the active one."""
        ...

    @abstractmethod
    def active_name_exists(self, name: str, exclude: TicketTypeId | None = None) -> bool:
        ...

    @abstractmethod
    def create(self, draft: TicketTypeDraft) -> TicketType:
        ...

    @abstractmethod
    def update(
        self, ticket_type_id: TicketTypeId, changes: Mapping[str, Any]
    ) -> TicketType | None:
        """Apply field changes and return the updated type, or None if not found."""
        ...

    @abstractmethod
    def delete(self, ticket_type_id: TicketTypeId) -> bool:
        """Delete a ticket type. Returns False if it did not exist."""
        ...

    @abstractmethod
    def count(self) -> int:
        ...


class BookingStore(ABC):
    """Interface for the booking ledger."""

    @abstractmethod
    def append(self, booking: Booking) -> Booking:
        """Write a booking and its guests atomically.

        Raises:
            DuplicateBookingError: If the booking id is already taken.
        """
        ...

    @abstractmethod
    def exists(self, booking_id: str) -> bool:
        ...

    @abstractmethod
    def get(self, booking_id: str) -> Booking | None:
        ...

    @abstractmethod
    def list_for_visitor(self, visitor_uid: str) -> list[Booking]:
        """Return a visitor's bookings ordered by created_at descending."""
        ...

    @abstractmethod
    def recent(self, limit: int) -> list[Booking]:
        """Return the ``limit`` most recently created bookings, newest first."""
        ...

    @abstractmethod
    def booked_quantity(self, ticket_type: str, date: str, status: BookingStatus) -> int:
        """Sum of quantity for one (ticket type, date) slot."""
        ...

    @abstractmethod
    def booked_quantities(
        self, ticket_type: str, dates: Iterable[str], status: BookingStatus
    ) -> dict[str, int]:
        """Sum of quantity per date. Dates without bookings are omitted."""
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def total_amount(self) -> int:
        ...

    @abstractmethod
    def total_quantity(self) -> int:
        ...

    @abstractmethod
    def distinct_visitor_uids(self) -> set[str]:
        """Non-blank owner uids that appear on at least one booking."""
        ...

    @abstractmethod
    def guest_gender_counts(self) -> dict[str, int]:
        """Number of guest records per raw gender string, across all bookings."""
        ...


class VisitorStore(ABC):
    """Interface for synced visitor identities."""

    @abstractmethod
    def get(self, uid: str) -> VisitorIdentity | None:
        ...

    @abstractmethod
    def create(self, identity: VisitorIdentity) -> VisitorIdentity:
        """Raises DuplicateVisitorError if the uid is already stored."""
        ...

    @abstractmethod
    def touch(
        self, uid: str, name: str, picture: str, last_active: datetime
    ) -> VisitorIdentity:
        """Refresh profile fields and liveness of an existing identity."""
        ...

    @abstractmethod
    def count(self, role: VisitorRole) -> int:
        ...

    @abstractmethod
    def count_active_since(self, role: VisitorRole, since: datetime) -> int:
        ...
