import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="TicketType",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("price", models.PositiveIntegerField()),
                ("description", models.TextField(blank=True, default="")),
                (
                    "category",
                    models.CharField(
                        choices=[("Entry", "Entry"), ("Exhibit", "Exhibit"), ("Show", "Show")],
                        default="Show",
                        max_length=16,
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("daily_limit", models.PositiveIntegerField(default=100)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(
                        fields=["name", "is_active"], name="ticket_type_name_active_idx"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("booking_id", models.CharField(max_length=64, unique=True)),
                (
                    "visitor_uid",
                    models.CharField(blank=True, db_index=True, default="", max_length=128),
                ),
                ("visitor_name", models.CharField(blank=True, default="", max_length=255)),
                ("ticket_type", models.CharField(max_length=255)),
                ("date", models.CharField(max_length=32)),
                ("quantity", models.PositiveIntegerField()),
                ("total_amount", models.PositiveIntegerField()),
                (
                    "status",
                    models.CharField(choices=[("Paid", "Paid")], default="Paid", max_length=16),
                ),
                ("language", models.CharField(blank=True, default="", max_length=32)),
                ("razorpay_order_id", models.CharField(blank=True, default="", max_length=128)),
                ("payment_id", models.CharField(blank=True, default="", max_length=128)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(
                        fields=["ticket_type", "date", "status"], name="booking_slot_idx"
                    ),
                    models.Index(fields=["-created_at"], name="booking_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Guest",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("position", models.PositiveSmallIntegerField()),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("gender", models.CharField(blank=True, default="", max_length=64)),
                ("age", models.CharField(blank=True, default="", max_length=16)),
                (
                    "booking",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="guests",
                        to="museum.booking",
                    ),
                ),
            ],
            options={
                "ordering": ["position"],
            },
        ),
        migrations.CreateModel(
            name="Visitor",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("uid", models.CharField(max_length=128, unique=True)),
                ("email", models.CharField(blank=True, default="", max_length=255)),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("picture", models.CharField(blank=True, default="", max_length=500)),
                (
                    "role",
                    models.CharField(
                        choices=[("visitor", "Visitor"), ("admin", "Admin")],
                        default="visitor",
                        max_length=16,
                    ),
                ),
                ("last_active", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "indexes": [
                    models.Index(
                        fields=["role", "last_active"], name="visitor_role_active_idx"
                    )
                ],
            },
        ),
    ]
