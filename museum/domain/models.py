"""Domain models representing persisted state and derived views.

These are pure domain objects with no API input rules.
Django ORM models are in museum/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from museum.domain.value_objects import (
    BookingStatus,
    Capacity,
    Category,
    Money,
    TicketTypeId,
    VisitorRole,
)


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a bookable experience."""

    id: TicketTypeId
    name: str
    price: Money
    description: str
    category: Category
    is_active: bool
    daily_limit: Capacity
    created_at: datetime


@dataclass(frozen=True)
class TicketTypeDraft:
    """Fields supplied by an admin when creating a ticket type."""

    name: str
    price: Money
    description: str = ""
    category: Category = Category.SHOW
    is_active: bool = True
    daily_limit: Capacity = Capacity(100)


@dataclass(frozen=True)
class Guest:
    name: str
    gender: str
    age: str


@dataclass(frozen=True)
class Booking:
    """A paid consumption of capacity for one (ticket type, date) slot."""

    booking_id: str
    visitor_uid: str
    visitor_name: str
    ticket_type: str
    date: str
    quantity: int
    total_amount: Money
    status: BookingStatus
    language: str
    guests: tuple[Guest, ...]
    razorpay_order_id: str
    payment_id: str
    created_at: datetime


@dataclass(frozen=True)
class BookingDraft:
    """Booking fields as received from the checkout flow.

    ``booking_id`` may be blank, in which case the ledger assigns one.
    """

    ticket_type: str
    date: str
    quantity: int
    total_amount: int
    visitor_uid: str = ""
    visitor_name: str = ""
    booking_id: str = ""
    language: str = ""
    guests: tuple[Guest, ...] = ()
    razorpay_order_id: str = ""
    payment_id: str = ""


@dataclass(frozen=True)
class VisitorIdentity:
    uid: str
    email: str
    name: str
    picture: str
    role: VisitorRole
    last_active: datetime


@dataclass(frozen=True)
class Slot:
    """Capacity of one ticket type on one calendar date."""

    date: date
    total: int
    booked: int
    available: int


@dataclass(frozen=True)
class SlotProjection:
    experience_name: str
    slots: tuple[Slot, ...]


@dataclass(frozen=True)
class TicketTypeAvailability:
    """A catalog row, optionally annotated with remaining capacity.

    ``available`` is None when no date was requested.
    """

    ticket_type: TicketType
    available: int | None = None


@dataclass(frozen=True)
class GenderStats:
    male: int
    female: int
    total_guests: int


@dataclass(frozen=True)
class DashboardStats:
    """Admin dashboard figures derived from the ledger and visitor population."""

    total_sales: int
    total_bookings: int
    active_visitors: int
    total_visitors: int
    conversion_rate: Decimal
    gender_stats: GenderStats
    recent_bookings: tuple[Booking, ...] = field(default_factory=tuple)

    @property
    def conversion_rate_label(self) -> str:
        if self.total_visitors == 0:
            return "0%"
        return f"{self.conversion_rate:.1f}%"


@dataclass(frozen=True)
class TicketVerification:
    """A booking looked up at the gate, with the experience it grants.

    ``experience`` is None when the ticket type has since been removed.
    """

    booking: Booking
    experience: TicketType | None
