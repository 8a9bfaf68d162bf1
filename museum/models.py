"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models
from django.utils import timezone


class TicketType(models.Model):
    """Persistence model for bookable experiences."""

    class Category(models.TextChoices):
        ENTRY = "Entry"
        EXHIBIT = "Exhibit"
        SHOW = "Show"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    price = models.PositiveIntegerField()
    description = models.TextField(blank=True, default="")
    category = models.CharField(
        max_length=16, choices=Category.choices, default=Category.SHOW
    )
    is_active = models.BooleanField(default=True)
    daily_limit = models.PositiveIntegerField(default=100)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["name", "is_active"], name="ticket_type_name_active_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


class Booking(models.Model):
    """Persistence model for ledger entries.

    ``ticket_type`` holds the experience name, not a foreign key, so removing
    an experience leaves its bookings intact.
    """

    class Status(models.TextChoices):
        PAID = "Paid"

    booking_id = models.CharField(max_length=64, unique=True)
    visitor_uid = models.CharField(max_length=128, blank=True, default="", db_index=True)
    visitor_name = models.CharField(max_length=255, blank=True, default="")
    ticket_type = models.CharField(max_length=255)
    date = models.CharField(max_length=32)
    quantity = models.PositiveIntegerField()
    total_amount = models.PositiveIntegerField()
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PAID)
    language = models.CharField(max_length=32, blank=True, default="")
    razorpay_order_id = models.CharField(max_length=128, blank=True, default="")
    payment_id = models.CharField(max_length=128, blank=True, default="")
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["ticket_type", "date", "status"], name="booking_slot_idx"),
            models.Index(fields=["-created_at"], name="booking_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.booking_id} - {self.ticket_type} on {self.date}"


class Guest(models.Model):
    """One attendee listed on a booking."""

    booking = models.ForeignKey(Booking, on_delete=models.CASCADE, related_name="guests")
    position = models.PositiveSmallIntegerField()
    name = models.CharField(max_length=255, blank=True, default="")
    gender = models.CharField(max_length=64, blank=True, default="")
    age = models.CharField(max_length=16, blank=True, default="")

    class Meta:
        ordering = ["position"]

    def __str__(self) -> str:
        return self.name


class Visitor(models.Model):
    """Persistence model for synced visitor identities."""

    class Role(models.TextChoices):
        VISITOR = "visitor"
        ADMIN = "admin"

    uid = models.CharField(max_length=128, unique=True)
    email = models.CharField(max_length=255, blank=True, default="")
    name = models.CharField(max_length=255, blank=True, default="")
    picture = models.CharField(max_length=500, blank=True, default="")
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.VISITOR)
    last_active = models.DateTimeField(default=timezone.now)

    class Meta:
        indexes = [
            models.Index(fields=["role", "last_active"], name="visitor_role_active_idx"),
        ]

    def __str__(self) -> str:
        return self.uid
