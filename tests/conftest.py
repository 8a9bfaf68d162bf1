"""Pytest configuration and shared fixtures."""

from typing import Any

import pytest
import structlog
from rest_framework.test import APIClient

from museum import models as orm
from museum.container import build_container, get_container
from museum.domain import BookingDraft, Guest
from museum.gateways.interfaces import PaymentGateway, PaymentGatewayError
from museum.services.auth import AdminGate
from museum.stores.memory_store import (
    InMemoryBookingStore,
    InMemoryTicketTypeStore,
    InMemoryVisitorStore,
)

ADMIN_EMAIL = "curator@example.com"
ADMIN_PASSWORD = "s3cret"

# Loggers must resolve their configuration on every call for capture_logs to see them.
structlog.configure(cache_logger_on_first_use=False)


class FakeGateway(PaymentGateway):
    """Records order requests and answers like the gateway would."""

    def __init__(self, fail_with: str | None = None) -> None:
        self.calls: list[tuple[int, str, str]] = []
        self.fail_with = fail_with
        self.closed = False

    def create_order(self, amount_minor: int, currency: str, receipt: str) -> dict[str, Any]:
        self.calls.append((amount_minor, currency, receipt))
        if self.fail_with:
            raise PaymentGatewayError(self.fail_with)
        return {
            "id": f"order_{len(self.calls)}",
            "amount": amount_minor,
            "currency": currency,
            "receipt": receipt,
            "status": "created",
        }

    def close(self) -> None:
        self.closed = True


def make_draft(**overrides) -> BookingDraft:
    fields = {
        "ticket_type": "General Entry",
        "date": "2024-06-01",
        "quantity": 1,
        "total_amount": 200,
        "visitor_uid": "visitor-1",
        "visitor_name": "Asha",
    }
    fields.update(overrides)
    if "guests" in fields:
        fields["guests"] = tuple(
            g if isinstance(g, Guest) else Guest(name="Guest", gender=g, age="30")
            for g in fields["guests"]
        )
    return BookingDraft(**fields)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def ticket_type_store() -> InMemoryTicketTypeStore:
    return InMemoryTicketTypeStore()


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def visitor_store() -> InMemoryVisitorStore:
    return InMemoryVisitorStore()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def admin_gate() -> AdminGate:
    return AdminGate(admin_email=ADMIN_EMAIL, admin_password=ADMIN_PASSWORD)


@pytest.fixture
def services(ticket_type_store, booking_store, visitor_store, gateway, admin_gate):
    """Services wired to in-memory stores."""
    return build_container(
        ticket_types=ticket_type_store,
        bookings=booking_store,
        visitors=visitor_store,
        gateway=gateway,
        admin_gate=admin_gate,
    )


@pytest.fixture
def app_services(monkeypatch, gateway, admin_gate):
    """The running app's container, with a fake gateway and known admin credentials."""
    container = get_container()
    monkeypatch.setattr(container, "admin_gate", admin_gate)
    monkeypatch.setattr(container.payments, "_gateway", gateway)
    return container


@pytest.fixture
def admin_client(api_client, app_services) -> APIClient:
    token = app_services.admin_gate.login(ADMIN_EMAIL, ADMIN_PASSWORD)
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return api_client


@pytest.fixture
def empty_catalog(db):
    """Remove the default experiences seeded when the test database was migrated."""
    orm.TicketType.objects.all().delete()
