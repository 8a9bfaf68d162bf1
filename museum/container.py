"""Service wiring.

The process entry point builds one container when the app is ready and
closes it on shutdown. Handlers fetch services from it instead of
constructing stores themselves.
"""

from dataclasses import dataclass

from django.conf import settings

from museum.gateways.interfaces import PaymentGateway
from museum.gateways.razorpay import RazorpayGateway
from museum.services.analytics import AnalyticsService
from museum.services.auth import AdminGate
from museum.services.availability import AvailabilityService
from museum.services.catalog import CatalogService
from museum.services.identity import IdentityService
from museum.services.ledger import LedgerService
from museum.services.payments import PaymentService
from museum.stores.interfaces import BookingStore, TicketTypeStore, VisitorStore


@dataclass
class Container:
    catalog: CatalogService
    availability: AvailabilityService
    ledger: LedgerService
    analytics: AnalyticsService
    identity: IdentityService
    payments: PaymentService
    admin_gate: AdminGate
    gateway: PaymentGateway

    def close(self) -> None:
        self.gateway.close()


def build_container(
    ticket_types: TicketTypeStore,
    bookings: BookingStore,
    visitors: VisitorStore,
    gateway: PaymentGateway,
    admin_gate: AdminGate,
) -> Container:
    return Container(
        catalog=CatalogService(ticket_types),
        availability=AvailabilityService(ticket_types, bookings),
        ledger=LedgerService(bookings, ticket_types),
        analytics=AnalyticsService(bookings, visitors),
        identity=IdentityService(visitors),
        payments=PaymentService(gateway),
        admin_gate=admin_gate,
        gateway=gateway,
    )


def build_default_container() -> Container:
    """Wire the services to the Django stores and the configured gateway."""
    from museum.stores.django_store import (
        DjangoBookingStore,
        DjangoTicketTypeStore,
        DjangoVisitorStore,
    )

    return build_container(
        ticket_types=DjangoTicketTypeStore(),
        bookings=DjangoBookingStore(),
        visitors=DjangoVisitorStore(),
        gateway=RazorpayGateway(
            key_id=settings.RAZORPAY_KEY_ID,
            key_secret=settings.RAZORPAY_KEY_SECRET,
            base_url=settings.RAZORPAY_API_BASE_URL,
        ),
        admin_gate=AdminGate(
            admin_email=settings.ADMIN_EMAIL,
            admin_password=settings.ADMIN_PASSWORD,
            token_lifetime=settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"],
        ),
    )


_container: Container | None = None


def init_container(container: Container | None = None) -> Container:
    global _container
    if _container is not None:
        _container.close()
    _container = container or build_default_container()
    return _container


def get_container() -> Container:
    if _container is None:
        return init_container()
    return _container


def close_container() -> None:
    global _container
    if _container is not None:
        _container.close()
        _container = None
