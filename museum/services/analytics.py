"""Analytics aggregator for the admin dashboard.

Every figure is an independent query against live state. Under concurrent
writes the figures may come from slightly different ledger snapshots.
"""

from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

import structlog
from django.utils import timezone

from museum.domain import (
    DashboardStats,
    GenderBucket,
    GenderStats,
    VisitorRole,
    classify_gender,
)
from museum.stores.interfaces import BookingStore, VisitorStore

logger = structlog.get_logger(__name__)

ACTIVE_WINDOW = timedelta(minutes=30)
RECENT_BOOKINGS_LIMIT = 10


class AnalyticsService:
    def __init__(self, bookings: BookingStore, visitors: VisitorStore) -> None:
        self._bookings = bookings
        self._visitors = visitors

    def compute_stats(self, now: datetime | None = None) -> DashboardStats:
        now = now or timezone.now()
        total_visitors = self._visitors.count(VisitorRole.VISITOR)
        stats = DashboardStats(
            total_sales=self._bookings.total_amount(),
            total_bookings=self._bookings.count(),
            active_visitors=self._visitors.count_active_since(
                VisitorRole.VISITOR, now - ACTIVE_WINDOW
            ),
            total_visitors=total_visitors,
            conversion_rate=self._conversion_rate(total_visitors),
            gender_stats=self.gender_stats(),
            recent_bookings=tuple(self._bookings.recent(RECENT_BOOKINGS_LIMIT)),
        )
        logger.debug(
            "analytics.computed",
            total_bookings=stats.total_bookings,
            total_visitors=total_visitors,
        )
        return stats

    def gender_stats(self) -> GenderStats:
        """Bucket guest genders; ``total_guests`` is the booked quantity, not a guest count."""
        buckets = {GenderBucket.MALE: 0, GenderBucket.FEMALE: 0}
        for gender, count in self._bookings.guest_gender_counts().items():
            bucket = classify_gender(gender)
            if bucket is not None:
                buckets[bucket] += count
        return GenderStats(
            male=buckets[GenderBucket.MALE],
            female=buckets[GenderBucket.FEMALE],
            total_guests=self._bookings.total_quantity(),
        )

    def _conversion_rate(self, total_visitors: int) -> Decimal:
        if total_visitors == 0:
            return Decimal(0)
        booked = len(self._bookings.distinct_visitor_uids())
        rate = Decimal(booked) * 100 / Decimal(total_visitors)
        return rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
