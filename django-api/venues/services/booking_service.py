"""Booking service - quotes, confirmation and the booking ledger.

Double booking of a venue, date and slot is not prevented.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from django.utils import timezone

from venues.domain import Booking, BookingId, BookingStatus, PriceBreakdown, VenueRef, parse_day
from venues.domain.errors import BookingValidationError
from venues.services.catalog_service import CatalogService
from venues.services.network import SimulatedNetwork
from venues.services.pricing import compute_total
from venues.signals import booking_created
from venues.stores.interfaces import Ledger

logger = logging.getLogger(__name__)

# The ledger records two hours at the hourly rate with no service fee; the
# confirmation quote prices one hour including the fee.
LEDGER_BOOKING_HOURS = 2
QUOTE_BOOKING_HOURS = 1

FILTER_UPCOMING = "upcoming"
FILTER_PAST = "past"
FILTER_CANCELLED = "cancelled"


@dataclass(frozen=True)
class BookingRequest:
    """Input of the confirmation action."""

    venue_id: str
    booking_date: date | str | None = None
    time_slot: str | None = None
    payment_method: str = "card"
    accept_terms: bool = False
    customer: str | None = None


def filter_bookings(bookings: list[Booking], booking_filter: str, today: date) -> list[Booking]:
    """Select bookings for a listing tab. Unknown filters return everything."""
    if booking_filter == FILTER_UPCOMING:
        return [b for b in bookings if b.date > today and b.status != BookingStatus.CANCELLED]
    if booking_filter == FILTER_PAST:
        return [b for b in bookings if b.date < today and b.status != BookingStatus.CANCELLED]
    if booking_filter == FILTER_CANCELLED:
        return [b for b in bookings if b.status == BookingStatus.CANCELLED]
    return list(bookings)


class BookingService:
    """Service for creating and listing bookings."""

    def __init__(
        self,
        catalog: CatalogService,
        ledger: Ledger,
        network: SimulatedNetwork | None = None,
        clock: Callable[[], date] = timezone.localdate,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._network = network or SimulatedNetwork()
        self._clock = clock

    async def create_booking(
        self,
        venue_id: str,
        booking_date: date | str,
        time_slot: str,
        payment_method: str,
        customer: str | None = None,
    ) -> Booking:
        """Record a confirmed booking for a venue.

        Raises:
            VenueNotFoundError: If the venue does not exist. Nothing is recorded.
            InvalidDateError: If the date is not an ISO date.
        """
        await self._network.round_trip("create_booking")
        venue = self._catalog.resolve(venue_id)
        price = compute_total(venue.price, LEDGER_BOOKING_HOURS)
        booking = Booking(
            id=BookingId.generate(),
            venue=VenueRef.snapshot(venue),
            date=parse_day(booking_date),
            time=time_slot,
            status=BookingStatus.CONFIRMED,
            total_price=price.subtotal,
            payment_method=payment_method,
            customer=customer,
        )
        self._ledger.append(booking)
        logger.info("Booking %s created for venue %s on %s", booking.id, venue.id, booking.date)
        booking_created.send(sender=self.__class__, booking=booking, owner_id=venue.owner_id)
        return booking

    async def confirm_booking(self, request: BookingRequest) -> Booking:
        """Validate a confirmation and create the booking.

        Raises:
            BookingValidationError: If terms are not accepted or the date or
                time slot is missing.
            VenueNotFoundError: If the venue does not exist.
        """
        if not request.accept_terms:
            raise BookingValidationError("Please accept the terms and conditions to proceed")
        if not request.venue_id or not request.booking_date or not request.time_slot:
            raise BookingValidationError("Missing booking information")
        return await self.create_booking(
            request.venue_id,
            request.booking_date,
            request.time_slot,
            request.payment_method,
            customer=request.customer,
        )

    async def list_bookings(self, booking_filter: str = FILTER_UPCOMING) -> list[Booking]:
        await self._network.round_trip("list_bookings")
        return filter_bookings(self._ledger.list_bookings(), booking_filter, self._clock())

    async def quote(self, venue_id: str, hours: int = QUOTE_BOOKING_HOURS) -> PriceBreakdown:
        """Price shown on the confirmation screen.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """
        await self._network.round_trip("quote")
        venue = self._catalog.resolve(venue_id)
        return compute_total(venue.price, hours)
