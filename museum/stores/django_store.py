"""Django ORM implementation of the museum stores."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from django.db import IntegrityError, transaction
from django.db.models import Count, Sum

from museum import models as orm
from museum.domain import (
    Booking,
    BookingStatus,
    Capacity,
    Category,
    Guest,
    Money,
    TicketType,
    TicketTypeDraft,
    TicketTypeId,
    VisitorIdentity,
    VisitorRole,
)
from museum.domain.errors import DuplicateBookingError, DuplicateVisitorError
from museum.stores.interfaces import BookingStore, TicketTypeStore, VisitorStore

_TICKET_TYPE_FIELDS = {"name", "price", "description", "category", "is_active", "daily_limit"}


def _ticket_type_to_domain(row: orm.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        name=row.name,
        price=Money(row.price),
        description=row.description,
        category=Category(row.category),
        is_active=row.is_active,
        daily_limit=Capacity(row.daily_limit),
        created_at=row.created_at,
    )


def _booking_to_domain(row: orm.Booking) -> Booking:
    return Booking(
        booking_id=row.booking_id,
        visitor_uid=row.visitor_uid,
        visitor_name=row.visitor_name,
        ticket_type=row.ticket_type,
        date=row.date,
        quantity=row.quantity,
        total_amount=Money(row.total_amount),
        status=BookingStatus(row.status),
        language=row.language,
        guests=tuple(
            Guest(name=g.name, gender=g.gender, age=g.age) for g in row.guests.all()
        ),
        razorpay_order_id=row.razorpay_order_id,
        payment_id=row.payment_id,
        created_at=row.created_at,
    )


def _visitor_to_domain(row: orm.Visitor) -> VisitorIdentity:
    return VisitorIdentity(
        uid=row.uid,
        email=row.email,
        name=row.name,
        picture=row.picture,
        role=VisitorRole(row.role),
        last_active=row.last_active,
    )


def _to_column(value: Any) -> Any:
    if isinstance(value, Money):
        return value.amount
    if isinstance(value, Capacity):
        return value.value
    if isinstance(value, Category):
        return value.value
    return value


class DjangoTicketTypeStore(TicketTypeStore):
    """Relational inventory catalog."""

    def list_active(self) -> list[TicketType]:
        rows = orm.TicketType.objects.filter(is_active=True).order_by("created_at")
        return [_ticket_type_to_domain(row) for row in rows]

    def get(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        row = orm.TicketType.objects.filter(pk=ticket_type_id.value).first()
        return _ticket_type_to_domain(row) if row else None

    def get_by_name(self, name: str) -> TicketType | None:
        row = (
            orm.TicketType.objects.filter(name=name)
            .order_by("-is_active", "-created_at")
            .first()
        )
        return _ticket_type_to_domain(row) if row else None

    def active_name_exists(self, name: str, exclude: TicketTypeId | None = None) -> bool:
        qs = orm.TicketType.objects.filter(name=name, is_active=True)
        if exclude is not None:
            qs = qs.exclude(pk=exclude.value)
        return qs.exists()

    def create(self, draft: TicketTypeDraft) -> TicketType:
        row = orm.TicketType.objects.create(
            name=draft.name,
            price=draft.price.amount,
            description=draft.description,
            category=draft.category.value,
            is_active=draft.is_active,
            daily_limit=draft.daily_limit.value,
        )
        return _ticket_type_to_domain(row)

    def update(
        self, ticket_type_id: TicketTypeId, changes: Mapping[str, Any]
    ) -> TicketType | None:
        row = orm.TicketType.objects.filter(pk=ticket_type_id.value).first()
        if row is None:
            return None
        fields = [key for key in changes if key in _TICKET_TYPE_FIELDS]
        for key in fields:
            setattr(row, key, _to_column(changes[key]))
        if fields:
            row.save(update_fields=fields)
        return _ticket_type_to_domain(row)

    def delete(self, ticket_type_id: TicketTypeId) -> bool:
        deleted, _ = orm.TicketType.objects.filter(pk=ticket_type_id.value).delete()
        return deleted > 0

    def count(self) -> int:
        return orm.TicketType.objects.count()


class DjangoBookingStore(BookingStore):
    """Relational booking ledger. Guests live in a child table."""

    def _slot_rows(self, ticket_type: str, status: BookingStatus):
        return orm.Booking.objects.filter(ticket_type=ticket_type, status=status.value)

    def append(self, booking: Booking) -> Booking:
        try:
            with transaction.atomic():
                row = orm.Booking.objects.create(
                    booking_id=booking.booking_id,
                    visitor_uid=booking.visitor_uid,
                    visitor_name=booking.visitor_name,
                    ticket_type=booking.ticket_type,
                    date=booking.date,
                    quantity=booking.quantity,
                    total_amount=booking.total_amount.amount,
                    status=booking.status.value,
                    language=booking.language,
                    razorpay_order_id=booking.razorpay_order_id,
                    payment_id=booking.payment_id,
                    created_at=booking.created_at,
                )
                orm.Guest.objects.bulk_create(
                    [
                        orm.Guest(
                            booking=row,
                            position=position,
                            name=guest.name,
                            gender=guest.gender,
                            age=guest.age,
                        )
                        for position, guest in enumerate(booking.guests)
                    ]
                )
        except IntegrityError as exc:
            # booking_id is unique; a concurrent writer claimed it first

            raise DuplicateBookingError(booking.booking_id) from exc
        return _booking_to_domain(row)

    def exists(self, booking_id: str) -> bool:
        return orm.Booking.objects.filter(booking_id=booking_id).exists()

    def get(self, booking_id: str) -> Booking | None:
        row = (
            orm.Booking.objects.prefetch_related("guests")
            .filter(booking_id=booking_id)
            .first()
        )
        return _booking_to_domain(row) if row else None

    def list_for_visitor(self, visitor_uid: str) -> list[Booking]:
        rows = (
            orm.Booking.objects.prefetch_related("guests")
            .filter(visitor_uid=visitor_uid)
            .order_by("-created_at", "-id")
        )
        return [_booking_to_domain(row) for row in rows]

    def recent(self, limit: int) -> list[Booking]:
        rows = orm.Booking.objects.prefetch_related("guests").order_by(
            "-created_at", "-id"
        )[:limit]
        return [_booking_to_domain(row) for row in rows]

    def booked_quantity(self, ticket_type: str, date: str, status: BookingStatus) -> int:
        result = self._slot_rows(ticket_type, status).filter(date=date).aggregate(
            total=Sum("quantity")
        )
        return result["total"] or 0

    def booked_quantities(
        self, ticket_type: str, dates: Iterable[str], status: BookingStatus
    ) -> dict[str, int]:
        rows = (
            self._slot_rows(ticket_type, status)
            .filter(date__in=list(dates))
            .values("date")
            .annotate(total=Sum("quantity"))
            .order_by()
        )
        return {row["date"]: row["total"] for row in rows}

    def count(self) -> int:
        return orm.Booking.objects.count()

    def total_amount(self) -> int:
        return orm.Booking.objects.aggregate(total=Sum("total_amount"))["total"] or 0

    def total_quantity(self) -> int:
        return orm.Booking.objects.aggregate(total=Sum("quantity"))["total"] or 0

    def distinct_visitor_uids(self) -> set[str]:
        uids = (
            orm.Booking.objects.exclude(visitor_uid="")
            .order_by()
            .values_list("visitor_uid", flat=True)
            .distinct()
        )
        return set(uids)

    def guest_gender_counts(self) -> dict[str, int]:
        rows = orm.Guest.objects.values("gender").annotate(count=Count("id")).order_by()
        return {row["gender"]: row["count"] for row in rows}


class DjangoVisitorStore(VisitorStore):
    def get(self, uid: str) -> VisitorIdentity | None:
        row = orm.Visitor.objects.filter(uid=uid).first()
        return _visitor_to_domain(row) if row else None

    def create(self, identity: VisitorIdentity) -> VisitorIdentity:
        try:
            with transaction.atomic():
                row = orm.Visitor.objects.create(
                    uid=identity.uid,
                    email=identity.email,
                    name=identity.name,
                    picture=identity.picture,
                    role=identity.role.value,
                    last_active=identity.last_active,
                )
        except IntegrityError as exc:
            raise DuplicateVisitorError(identity.uid) from exc
        return _visitor_to_domain(row)

    def touch(
        self, uid: str, name: str, picture: str, last_active: datetime
    ) -> VisitorIdentity:
        row = orm.Visitor.objects.get(uid=uid)
        row.name = name
        row.picture = picture
        row.last_active = last_active
        row.save(update_fields=["name", "picture", "last_active"])
        return _visitor_to_domain(row)

    def count(self, role: VisitorRole) -> int:
        return orm.Visitor.objects.filter(role=role.value).count()

    def count_active_since(self, role: VisitorRole, since: datetime) -> int:
        return orm.Visitor.objects.filter(role=role.value, last_active__gte=since).count()
