from museum.handlers.views import (
    AdminLoginView,
    AnalyticsView,
    BookingCreateView,
    IdentitySyncView,
    PaymentOrderView,
    SlotProjectionView,
    TicketTypeDetailView,
    TicketTypeListView,
    TicketVerificationView,
    VisitorBookingListView,
    health,
)

__all__ = [
    "AdminLoginView",
    "AnalyticsView",
    "BookingCreateView",
    "IdentitySyncView",
    "PaymentOrderView",
    "SlotProjectionView",
    "TicketTypeDetailView",
    "TicketTypeListView",
    "TicketVerificationView",
    "VisitorBookingListView",
    "health",
]
