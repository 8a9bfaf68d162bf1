from museum.domain.models import (
    Booking,
    BookingDraft,
    DashboardStats,
    GenderStats,
    Guest,
    Slot,
    SlotProjection,
    TicketType,
    TicketTypeAvailability,
    TicketTypeDraft,
    TicketVerification,
    VisitorIdentity,
)
from museum.domain.value_objects import (
    BookingStatus,
    Capacity,
    Category,
    Money,
    TicketTypeId,
    VisitorRole,
)
from museum.domain.vocabulary import GENDER_VOCABULARY, GenderBucket, classify_gender

__all__ = [
    "Booking",
    "BookingDraft",
    "DashboardStats",
    "GenderStats",
    "Guest",
    "Slot",
    "SlotProjection",
    "TicketType",
    "TicketTypeAvailability",
    "TicketTypeDraft",
    "TicketVerification",
    "VisitorIdentity",
    "BookingStatus",
    "Capacity",
    "Category",
    "Money",
    "TicketTypeId",
    "VisitorRole",
    "GENDER_VOCABULARY",
    "GenderBucket",
    "classify_gender",
]
