"""Serializers for request validation and domain-model responses.

Input serializers check shape and types only; domain rules are enforced
by the services. Field names follow the camelCase wire format.
"""

from rest_framework import serializers

from museum.domain import BookingDraft, Capacity, Category, Guest, Money, TicketTypeDraft

_CATEGORY_CHOICES = [category.value for category in Category]

# Upper bound of the PositiveIntegerField columns.
MAX_POSITIVE_INT = 2147483647


class GuestSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, allow_blank=True, required=False, default="")
    gender = serializers.CharField(max_length=64, allow_blank=True, required=False, default="")
    age = serializers.CharField(max_length=16, allow_blank=True, required=False, default="")


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    bookingId = serializers.CharField(source="booking_id")
    visitorUid = serializers.CharField(source="visitor_uid")
    visitorName = serializers.CharField(source="visitor_name")
    ticketType = serializers.CharField(source="ticket_type")
    date = serializers.CharField()
    quantity = serializers.IntegerField()
    totalAmount = serializers.IntegerField(source="total_amount.amount")
    status = serializers.CharField(source="status.value")
    language = serializers.CharField()
    guestDetails = GuestSerializer(source="guests", many=True)
    razorpayOrderId = serializers.CharField(source="razorpay_order_id")
    paymentId = serializers.CharField(source="payment_id")
    createdAt = serializers.DateTimeField(source="created_at")


class BookingInputSerializer(serializers.Serializer):
    bookingId = serializers.CharField(
        source="booking_id", max_length=64, required=False, allow_blank=True, default=""
    )
    visitorUid = serializers.CharField(
        source="visitor_uid", max_length=128, required=False, allow_blank=True, default=""
    )
    visitorName = serializers.CharField(
        source="visitor_name", max_length=255, required=False, allow_blank=True, default=""
    )
    ticketType = serializers.CharField(source="ticket_type", max_length=255)
    date = serializers.CharField(max_length=32)
    quantity = serializers.IntegerField(max_value=MAX_POSITIVE_INT)
    totalAmount = serializers.IntegerField(source="total_amount", max_value=MAX_POSITIVE_INT)
    language = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")
    guestDetails = GuestSerializer(source="guests", many=True, required=False, default=list)
    razorpayOrderId = serializers.CharField(
        source="razorpay_order_id", max_length=128, required=False, allow_blank=True, default=""
    )
    paymentId = serializers.CharField(
        source="payment_id", max_length=128, required=False, allow_blank=True, default=""
    )

    def to_draft(self) -> BookingDraft:
        data = dict(self.validated_data)
        data["guests"] = tuple(Guest(**guest) for guest in data.get("guests", []))
        return BookingDraft(**data)


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for TicketType domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    price = serializers.IntegerField(source="price.amount")
    description = serializers.CharField()
    category = serializers.CharField(source="category.value")
    isActive = serializers.BooleanField(source="is_active")
    dailyLimit = serializers.IntegerField(source="daily_limit.value")
    createdAt = serializers.DateTimeField(source="created_at")


class TicketTypeAvailabilitySerializer(serializers.Serializer):
    """Catalog row; ``available`` is only present when a date was requested."""

    def to_representation(self, instance):
        data = TicketTypeSerializer(instance.ticket_type).data
        if instance.available is not None:
            data["available"] = instance.available
        return data


class TicketTypeInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    price = serializers.IntegerField(min_value=0, max_value=MAX_POSITIVE_INT)
    description = serializers.CharField(required=False, allow_blank=True)
    category = serializers.ChoiceField(choices=_CATEGORY_CHOICES, required=False)
    isActive = serializers.BooleanField(source="is_active", required=False)
    dailyLimit = serializers.IntegerField(
        source="daily_limit", min_value=0, max_value=MAX_POSITIVE_INT, required=False
    )

    def to_draft(self) -> TicketTypeDraft:
        data = self.validated_data
        return TicketTypeDraft(
            name=data["name"],
            price=Money(data["price"]),
            description=data.get("description", ""),
            category=Category(data.get("category", Category.SHOW.value)),
            is_active=data.get("is_active", True),
            daily_limit=Capacity(data.get("daily_limit", 100)),
        )


class SlotSerializer(serializers.Serializer):
    date = serializers.DateField()
    total = serializers.IntegerField()
    booked = serializers.IntegerField()
    available = serializers.IntegerField()


class SlotQuerySerializer(serializers.Serializer):
    days = serializers.IntegerField(min_value=1, max_value=366, required=False, default=30)


class GenderStatsSerializer(serializers.Serializer):
    male = serializers.IntegerField()
    female = serializers.IntegerField()
    totalGuests = serializers.IntegerField(source="total_guests")


class DashboardStatsSerializer(serializers.Serializer):
    totalSales = serializers.IntegerField(source="total_sales")
    totalBookings = serializers.IntegerField(source="total_bookings")
    activeVisitors = serializers.IntegerField(source="active_visitors")
    conversionRate = serializers.CharField(source="conversion_rate_label")
    genderStats = GenderStatsSerializer(source="gender_stats")


class VisitorSerializer(serializers.Serializer):
    uid = serializers.CharField()
    email = serializers.CharField()
    name = serializers.CharField()
    picture = serializers.CharField()
    role = serializers.CharField(source="role.value")
    lastActive = serializers.DateTimeField(source="last_active")


class IdentitySyncSerializer(serializers.Serializer):
    uid = serializers.CharField(max_length=128)
    email = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    picture = serializers.CharField(max_length=500, required=False, allow_blank=True, default="")


class AdminLoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField()


class PaymentOrderSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    currency = serializers.CharField(max_length=3, required=False, default="INR")
