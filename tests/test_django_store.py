"""Tests for the Django ORM stores.

These check the aggregate queries the services depend on.
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from museum import models as orm
from museum.domain import (
    Booking,
    BookingStatus,
    Capacity,
    Category,
    Guest,
    Money,
    TicketTypeDraft,
    VisitorIdentity,
    VisitorRole,
)
from museum.domain.errors import DuplicateBookingError, DuplicateVisitorError
from museum.stores.django_store import (
    DjangoBookingStore,
    DjangoTicketTypeStore,
    DjangoVisitorStore,
)


def booking(booking_id: str, **overrides) -> Booking:
    fields = {
        "booking_id": booking_id,
        "visitor_uid": "u1",
        "visitor_name": "Asha",
        "ticket_type": "General Entry",
        "date": "2024-06-01",
        "quantity": 2,
        "total_amount": Money(400),
        "status": BookingStatus.PAID,
        "language": "en",
        "guests": (),
        "razorpay_order_id": "order_1",
        "payment_id": "pay_1",
        "created_at": timezone.now(),
    }
    fields.update(overrides)
    return Booking(**fields)


@pytest.mark.usefixtures("empty_catalog")
class TestDjangoTicketTypeStore:
    def test_create_round_trips_domain_types(self):
        store = DjangoTicketTypeStore()
        created = store.create(
            TicketTypeDraft(
                name="Egyptian Mystique",
                price=Money(500),
                category=Category.EXHIBIT,
                daily_limit=Capacity(25),
            )
        )

        fetched = store.get(created.id)

        assert fetched == created
        assert fetched.category is Category.EXHIBIT
        assert fetched.daily_limit == Capacity(25)

    def test_get_by_name_prefers_active_row(self):
        store = DjangoTicketTypeStore()
        store.create(TicketTypeDraft(name="Show", price=Money(1), is_active=False))
        active = store.create(TicketTypeDraft(name="Show", price=Money(2)))

        assert store.get_by_name("Show") == active
        assert store.get_by_name("Missing") is None

    def test_update_writes_only_changed_fields(self):
        store = DjangoTicketTypeStore()
        created = store.create(TicketTypeDraft(name="Show", price=Money(1)))

        updated = store.update(created.id, {"price": Money(9), "is_active": False})

        assert updated.price == Money(9)
        assert not updated.is_active
        assert orm.TicketType.objects.get(pk=created.id.value).name == "Show"
        assert store.list_active() == []

    def test_delete_reports_missing(self):
        store = DjangoTicketTypeStore()
        created = store.create(TicketTypeDraft(name="Show", price=Money(1)))

        assert store.delete(created.id) is True
        assert store.delete(created.id) is False


@pytest.mark.django_db
class TestDjangoBookingStore:
    def test_append_persists_guests_in_order(self):
        store = DjangoBookingStore()
        guests = (Guest("A", "female", "30"), Guest("B", "Männlich", "41"))

        saved = store.append(booking("B-1", guests=guests))

        assert saved.guests == guests
        assert store.get("B-1").guests == guests

    def test_booked_quantity_filters_slot(self):
        store = DjangoBookingStore()
        store.append(booking("B-1", quantity=3))
        store.append(booking("B-2", quantity=4))
        store.append(booking("B-3", quantity=5, date="2024-06-02"))
        store.append(booking("B-4", quantity=6, ticket_type="Digital Art Show"))

        assert store.booked_quantity("General Entry", "2024-06-01", BookingStatus.PAID) == 7
        assert store.booked_quantity("General Entry", "2030-01-01", BookingStatus.PAID) == 0

    def test_booked_quantities_groups_by_date(self):
        store = DjangoBookingStore()
        store.append(booking("B-1", quantity=3))
        store.append(booking("B-2", quantity=4, date="2024-06-03"))
        store.append(booking("B-3", quantity=4, date="2024-06-09"))

        totals = store.booked_quantities(
            "General Entry", ["2024-06-01", "2024-06-02", "2024-06-03"], BookingStatus.PAID
        )

        assert totals == {"2024-06-01": 3, "2024-06-03": 4}

    def test_ledger_totals(self):
        store = DjangoBookingStore()
        store.append(booking("B-1", quantity=3, total_amount=Money(600), visitor_uid="u1"))
        store.append(booking("B-2", quantity=1, total_amount=Money(200), visitor_uid="u1"))
        store.append(booking("B-3", quantity=2, total_amount=Money(0), visitor_uid=""))

        assert store.count() == 3
        assert store.total_amount() == 800
        assert store.total_quantity() == 6
        assert store.distinct_visitor_uids() == {"u1"}

    def test_empty_ledger_totals_are_zero(self):
        store = DjangoBookingStore()
        assert store.total_amount() == 0
        assert store.total_quantity() == 0
        assert store.guest_gender_counts() == {}

    def test_guest_gender_counts_keep_raw_strings(self):
        store = DjangoBookingStore()
        store.append(booking("B-1", guests=(Guest("A", "Male", "1"), Guest("B", "male", "2"))))
        store.append(booking("B-2", guests=(Guest("C", "Male", "3"),)))

        assert store.guest_gender_counts() == {"Male": 2, "male": 1}

    def test_recent_and_visitor_history_newest_first(self):
        store = DjangoBookingStore()
        base = timezone.now()
        for offset, booking_id in enumerate(["old", "mid", "new"]):
            store.append(booking(booking_id, created_at=base + timedelta(seconds=offset)))
        store.append(booking("other", visitor_uid="u2", created_at=base - timedelta(days=1)))

        assert [b.booking_id for b in store.recent(2)] == ["new", "mid"]
        assert [b.booking_id for b in store.list_for_visitor("u1")] == ["new", "mid", "old"]


@pytest.mark.django_db
class TestDjangoVisitorStore:
    def test_counts_by_role_and_liveness(self):
        store = DjangoVisitorStore()
        now = timezone.now()
        for uid, role, minutes in [
            ("a", VisitorRole.VISITOR, 1),
            ("b", VisitorRole.VISITOR, 90),
            ("c", VisitorRole.ADMIN, 1),
        ]:
            store.create(
                VisitorIdentity(
                    uid=uid,
                    email="",
                    name=uid,
                    picture="",
                    role=role,
                    last_active=now - timedelta(minutes=minutes),
                )
            )

        assert store.count(VisitorRole.VISITOR) == 2
        assert store.count_active_since(VisitorRole.VISITOR, now - timedelta(minutes=30)) == 1

    def test_touch_updates_profile(self):
        store = DjangoVisitorStore()
        created = store.create(
            VisitorIdentity(
                uid="a",
                email="a@example.com",
                name="A",
                picture="",
                role=VisitorRole.VISITOR,
                last_active=timezone.now() - timedelta(hours=1),
            )
        )

        touched = store.touch("a", name="Alpha", picture="p.png", last_active=timezone.now())

        assert touched.name == "Alpha"
        assert touched.email == "a@example.com"
        assert touched.last_active > created.last_active


@pytest.mark.django_db
class TestUniqueConstraints:
    def test_second_append_with_same_id_is_a_duplicate(self):
        store = DjangoBookingStore()
        store.append(booking("B-1", guests=(Guest("A", "female", "30"),)))

        with pytest.raises(DuplicateBookingError):
            store.append(booking("B-1"))

        assert store.count() == 1
        assert orm.Guest.objects.count() == 1

    def test_second_create_with_same_uid_is_a_duplicate(self):
        store = DjangoVisitorStore()
        identity = VisitorIdentity(
            uid="a",
            email="",
            name="A",
            picture="",
            role=VisitorRole.VISITOR,
            last_active=timezone.now(),
        )
        store.create(identity)

        with pytest.raises(DuplicateVisitorError):
            store.create(identity)

        assert store.count(VisitorRole.VISITOR) == 1
