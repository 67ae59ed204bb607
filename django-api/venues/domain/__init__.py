from venues.domain.models import (
    AdminStats,
    Booking,
    OpeningHours,
    OwnerStats,
    PriceBreakdown,
    Principal,
    Review,
    Venue,
    VenueRef,
)
from venues.domain.value_objects import (
    BookingId,
    BookingStatus,
    Money,
    Role,
    VenueId,
    parse_day,
)

__all__ = [
    "Venue",
    "Review",
    "OpeningHours",
    "Booking",
    "VenueRef",
    "PriceBreakdown",
    "Principal",
    "OwnerStats",
    "AdminStats",
    "VenueId",
    "BookingId",
    "BookingStatus",
    "Money",
    "Role",
    "parse_day",
]
