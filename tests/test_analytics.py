"""Unit tests for AnalyticsService against in-memory stores."""

from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from museum.domain import GenderStats, Guest, VisitorIdentity, VisitorRole
from tests.conftest import make_draft


def add_visitor(store, uid: str, minutes_ago: int = 0, role: VisitorRole = VisitorRole.VISITOR):
    return store.create(
        VisitorIdentity(
            uid=uid,
            email=f"{uid}@example.com",
            name=uid,
            picture="",
            role=role,
            last_active=timezone.now() - timedelta(minutes=minutes_ago),
        )
    )


class TestComputeStats:
    def test_empty_dashboard(self, services):
        stats = services.analytics.compute_stats()

        assert stats.total_sales == 0
        assert stats.total_bookings == 0
        assert stats.active_visitors == 0
        assert stats.conversion_rate == 0
        assert stats.conversion_rate_label == "0%"
        assert stats.gender_stats.total_guests == 0
        assert stats.recent_bookings == ()

    def test_conversion_is_zero_without_visitors_even_with_bookings(self, services):
        services.ledger.create_booking(make_draft(visitor_uid="ghost"))
        stats = services.analytics.compute_stats()

        assert stats.total_bookings == 1
        assert stats.conversion_rate_label == "0%"

    def test_sales_and_booking_totals(self, services):
        services.ledger.create_booking(make_draft(total_amount=200))
        services.ledger.create_booking(make_draft(total_amount=700, quantity=2))

        stats = services.analytics.compute_stats()

        assert stats.total_sales == 900
        assert stats.total_bookings == 2

    def test_conversion_counts_distinct_booking_owners(self, services, visitor_store):
        for uid in ("a", "b", "c"):
            add_visitor(visitor_store, uid)
        add_visitor(visitor_store, "boss", role=VisitorRole.ADMIN)
        services.ledger.create_booking(make_draft(visitor_uid="a"))
        services.ledger.create_booking(make_draft(visitor_uid="a"))

        stats = services.analytics.compute_stats()

        assert stats.total_visitors == 3
        assert stats.conversion_rate == Decimal("33.3")
        assert stats.conversion_rate_label == "33.3%"

    def test_active_visitors_use_thirty_minute_window(self, services, visitor_store):
        now = timezone.now()
        add_visitor(visitor_store, "fresh", minutes_ago=5)
        add_visitor(visitor_store, "stale", minutes_ago=45)
        add_visitor(visitor_store, "staff", minutes_ago=1, role=VisitorRole.ADMIN)

        stats = services.analytics.compute_stats(now=now)

        assert stats.active_visitors == 1

    def test_recent_bookings_newest_first_and_capped(self, services):
        for index in range(12):
            services.ledger.create_booking(make_draft(booking_id=f"B-{index:02d}"))

        recent = services.analytics.compute_stats().recent_bookings

        assert len(recent) == 10
        assert [b.booking_id for b in recent[:2]] == ["B-11", "B-10"]
        assert recent[-1].booking_id == "B-02"


class TestGenderStats:
    def test_multilocale_genders_are_bucketed(self, services):
        services.ledger.create_booking(
            make_draft(quantity=4, guests=["Männlich", "male", "Femmina", "女性"])
        )

        stats = services.analytics.gender_stats()

        assert (stats.male, stats.female, stats.total_guests) == (2, 2, 4)

    def test_unrecognized_gender_still_counts_toward_total(self, services):
        services.ledger.create_booking(make_draft(quantity=2, guests=["Männlich", "other"]))

        stats = services.analytics.gender_stats()

        assert stats.male == 1
        assert stats.female == 0
        assert stats.total_guests == 2

    def test_total_guests_is_quantity_sum_not_guest_count(self, services):
        services.ledger.create_booking(make_draft(quantity=5, guests=["female"]))
        services.ledger.create_booking(make_draft(quantity=3))

        stats = services.analytics.gender_stats()

        assert stats.female == 1
        assert stats.total_guests == 8

    def test_blank_gender_is_excluded(self, services):
        guest = Guest(name="Anon", gender="", age="")
        services.ledger.create_booking(make_draft(quantity=1, guests=[guest]))

        stats = services.analytics.gender_stats()

        assert stats.male + stats.female == 0
        assert stats.total_guests == 1

    def test_each_booking_counts_once(self, services, booking_store):
        services.ledger.create_booking(make_draft(quantity=2, guests=["male", "male"]))

        assert booking_store.count() == 1
        assert services.analytics.gender_stats() == GenderStats(male=2, female=0, total_guests=2)
