"""Catalog service - inventory catalog business logic.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Mapping
from typing import Any

import structlog

from museum.domain import Capacity, Category, Money, TicketType, TicketTypeDraft, TicketTypeId
from museum.domain.errors import (
    DuplicateTicketTypeError,
    InvalidTicketTypeIdError,
    TicketTypeNotFoundError,
    TicketTypeValidationError,
)
from museum.stores.interfaces import TicketTypeStore

logger = structlog.get_logger(__name__)

DEFAULT_CATALOG = (
    TicketTypeDraft(
        name="General Entry",
        price=Money(200),
        description="Access to main museum halls",
        category=Category.ENTRY,
    ),
    TicketTypeDraft(
        name="Egyptian Mystique",
        price=Money(500),
        description="Premium exhibit of the Pharaohs",
        category=Category.EXHIBIT,
    ),
    TicketTypeDraft(
        name="Digital Art Show",
        price=Money(350),
        description="Immersive light and sound show",
        category=Category.SHOW,
    ),
)


def _parse_id(ticket_type_id: str) -> TicketTypeId:
    try:
        return TicketTypeId.from_string(ticket_type_id)
    except ValueError:
        raise InvalidTicketTypeIdError() from None


class CatalogService:
    """Service for inventory catalog operations."""

    def __init__(self, store: TicketTypeStore) -> None:
        self._store = store

    def list_active(self) -> list[TicketType]:
        """Return all active ticket types."""
        return self._store.list_active()

    def get(self, ticket_type_id: str) -> TicketType:
        """Return a ticket type by ID.

        Raises:
            InvalidTicketTypeIdError: If the ticket_type_id is not a valid UUID.
            TicketTypeNotFoundError: If the ticket type does not exist.
        """
        ticket_type = self._store.get(_parse_id(ticket_type_id))
        if ticket_type is None:
            raise TicketTypeNotFoundError()
        return ticket_type

    def create(self, draft: TicketTypeDraft) -> TicketType:
        """Add a ticket type to the catalog.

        Raises:
            TicketTypeValidationError: If the name is blank.
            DuplicateTicketTypeError: If an active type already has the name.
        """
        if not draft.name.strip():
            raise TicketTypeValidationError("name is required")
        if draft.is_active and self._store.active_name_exists(draft.name):
            raise DuplicateTicketTypeError(draft.name)
        ticket_type = self._store.create(draft)
        logger.info("ticket_type.created", ticket_type_id=str(ticket_type.id), name=ticket_type.name)
        return ticket_type

    def update(self, ticket_type_id: str, changes: Mapping[str, Any]) -> TicketType:
        """Apply a partial update.

        ``changes`` holds raw field values keyed by domain field name.

        Raises:
            InvalidTicketTypeIdError: If the ticket_type_id is not a valid UUID.
            TicketTypeNotFoundError: If the ticket type does not exist.
            TicketTypeValidationError: If a changed value is invalid.
            DuplicateTicketTypeError: If the result would clash with another active type.
        """
        type_id = _parse_id(ticket_type_id)
        current = self._store.get(type_id)
        if current is None:
            raise TicketTypeNotFoundError()

        normalized = self._normalize(changes)
        name = normalized.get("name", current.name)
        is_active = normalized.get("is_active", current.is_active)
        if is_active and self._store.active_name_exists(name, exclude=type_id):
            raise DuplicateTicketTypeError(name)

        updated = self._store.update(type_id, normalized)
        if updated is None:
            raise TicketTypeNotFoundError()
        logger.info(
            "ticket_type.updated", ticket_type_id=ticket_type_id, fields=sorted(normalized)
        )
        return updated

    def delete(self, ticket_type_id: str) -> None:
        """Remove a ticket type. Bookings that name it are left untouched.

        Raises:
            InvalidTicketTypeIdError: If the ticket_type_id is not a valid UUID.
            TicketTypeNotFoundError: If the ticket type does not exist.
        """
        if not self._store.delete(_parse_id(ticket_type_id)):
            raise TicketTypeNotFoundError()
        logger.info("ticket_type.deleted", ticket_type_id=ticket_type_id)

    def seed_defaults(self) -> list[TicketType]:
        """Create the default experiences when the catalog is empty."""
        if self._store.count() > 0:
            return []
        created = [self._store.create(draft) for draft in DEFAULT_CATALOG]
        logger.info("ticket_type.seeded", count=len(created))
        return created

    def _normalize(self, changes: Mapping[str, Any]) -> dict[str, Any]:
        normalized: dict[str, Any] = {}
        try:
            for key, value in changes.items():
                if key == "name":
                    if not str(value).strip():
                        raise TicketTypeValidationError("name is required")
                    normalized[key] = str(value)
                elif key == "price":
                    normalized[key] = Money(int(value))
                elif key == "daily_limit":
                    normalized[key] = Capacity(int(value))
                elif key == "category":
                    normalized[key] = Category(value)
                elif key == "is_active":
                    normalized[key] = bool(value)
                elif key == "description":
                    normalized[key] = str(value)
        except ValueError as exc:
            raise TicketTypeValidationError(str(exc)) from exc
        return normalized
