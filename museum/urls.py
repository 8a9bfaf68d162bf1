from django.urls import path

from museum.handlers import (
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
)

urlpatterns = [
    path("razorpay/order", PaymentOrderView.as_view(), name="payment-order"),
    path("auth/sync", IdentitySyncView.as_view(), name="identity-sync"),
    path("auth/admin-login", AdminLoginView.as_view(), name="admin-login"),
    path("bookings", BookingCreateView.as_view(), name="booking-create"),
    path("bookings/<str:uid>", VisitorBookingListView.as_view(), name="visitor-bookings"),
    path("analytics", AnalyticsView.as_view(), name="analytics"),
    path("ticket-types", TicketTypeListView.as_view(), name="ticket-type-list"),
    path(
        "ticket-types/<str:ticket_type_id>",
        TicketTypeDetailView.as_view(),
        name="ticket-type-detail",
    ),
    path(
        "ticket-types/<str:ticket_type_id>/slots",
        SlotProjectionView.as_view(),
        name="ticket-type-slots",
    ),
    path(
        "verify-ticket/<str:booking_id>",
        TicketVerificationView.as_view(),
        name="verify-ticket",
    ),
]
