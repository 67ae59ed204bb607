"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Self
from uuid import uuid4

from venues.domain.errors import InvalidDateError


@dataclass(frozen=True)
class VenueId:
    """Unique identifier for a Venue."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("VenueId cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking, generated when the booking is created."""

    value: str

    @classmethod
    def generate(cls) -> Self:
        return cls(value=f"booking-{uuid4().hex[:12]}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Price representation with validation.

    Amounts keep full Decimal precision; rounding happens only in __str__.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def of(cls, value: Decimal | int | float | str) -> Self:
        if isinstance(value, Decimal):
            return cls(amount=value)
        return cls(amount=Decimal(str(value)))

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


class BookingStatus(Enum):
    """Lifecycle states of a booking."""

    CONFIRMED = "Confirmed"
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class Role(Enum):
    """Dashboard role of a signed-in principal."""

    USER = "user"
    OWNER = "owner"
    ADMIN = "admin"


def parse_day(value: date | str) -> date:
    """Return a calendar date from a date or an ISO ``YYYY-MM-DD`` string.

    A ``datetime`` is reduced to its calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidDateError(value) from None
