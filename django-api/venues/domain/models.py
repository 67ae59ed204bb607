"""Domain models representing the simulated state.

These are pure domain objects with no API input rules and no Django imports.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from venues.domain.value_objects import BookingId, BookingStatus, Money, Role, VenueId


def _check_rating(value: float) -> None:
    if not 0.0 <= value <= 5.0:
        raise ValueError("Rating must be between 0 and 5")


@dataclass(frozen=True)
class OpeningHours:
    """Hours a venue is open for a range of days, e.g. ``Monday - Friday``."""

    days: str
    hours: str


@dataclass(frozen=True)
class Review:
    """Domain representation of a Review. Attached only to a Venue."""

    id: str
    user_name: str
    rating: float
    date: date
    text: str
    user_avatar: str = ""

    def __post_init__(self) -> None:
        _check_rating(self.rating)


@dataclass(frozen=True)
class Venue:
    """Domain representation of a bookable sports venue."""

    id: VenueId
    name: str
    location: str
    type: str
    price: Money
    rating: float
    amenities: tuple[str, ...] = ()
    opening_hours: tuple[OpeningHours, ...] = ()
    available_dates: frozenset[date] = frozenset()
    time_slots: tuple[str, ...] = ()
    reviews: tuple[Review, ...] = ()
    description: str = ""
    image_url: str = ""
    images: tuple[str, ...] = ()
    review_count: int = 0
    owner_id: str | None = None

    def __post_init__(self) -> None:
        if self.price.amount <= 0:
            raise ValueError("Venue price must be positive")
        _check_rating(self.rating)


@dataclass(frozen=True)
class VenueRef:
    """Snapshot of the venue fields a booking keeps.

    Bookings never hold a live Venue, so later catalog changes do not
    rewrite booking history.
    """

    id: VenueId
    name: str
    location: str
    image_url: str

    @classmethod
    def snapshot(cls, venue: Venue) -> "VenueRef":
        return cls(
            id=venue.id,
            name=venue.name,
            location=venue.location,
            image_url=venue.image_url,
        )


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    venue: VenueRef
    date: date
    time: str
    status: BookingStatus
    total_price: Money
    payment_method: str = ""
    customer: str | None = None


@dataclass(frozen=True)
class PriceBreakdown:
    """Subtotal, service fee and total for a booking quote."""

    subtotal: Money
    service_fee: Money
    total: Money


@dataclass(frozen=True)
class Principal:
    """A signed-in demo account."""

    id: str
    name: str
    email: str
    role: Role
    avatar_url: str = ""


@dataclass(frozen=True)
class OwnerStats:
    """Owner dashboard snapshot, recomputed per query."""

    revenue: Money
    bookings: int
    rating: float
    customers: int


@dataclass(frozen=True)
class AdminStats:
    """Admin dashboard snapshot, recomputed per query."""

    revenue: Money
    growth_rate: Decimal
    pending_approvals: int
    users: int
    venues: int
    bookings: int
    active_users: int
    active_owners: int
    completed_bookings: int
    average_rating: float
