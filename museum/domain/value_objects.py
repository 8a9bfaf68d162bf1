"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class TicketTypeId:
    """Unique identifier for a TicketType."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Whole-unit price or amount paid. Never negative."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing daily capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")

    def remaining(self, consumed: int) -> int:
        """Capacity left after ``consumed`` units, floored at zero."""
        return max(0, self.value - consumed)


class Category(str, Enum):
    """Kind of experience a ticket type grants."""

    ENTRY = "Entry"
    EXHIBIT = "Exhibit"
    SHOW = "Show"


class BookingStatus(str, Enum):
    PAID = "Paid"


class VisitorRole(str, Enum):
    VISITOR = "visitor"
    ADMIN = "admin"
