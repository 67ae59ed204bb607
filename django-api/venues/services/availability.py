"""Availability of a venue's dates and time slots, and slot selection."""

from collections.abc import Callable
from datetime import date

from django.utils import timezone

from venues.domain import Venue, parse_day
from venues.domain.errors import BookingValidationError


def is_date_available(venue: Venue, day: date | str, today: date | None = None) -> bool:
    """A date is bookable if it is not in the past and the venue allows it.

    An empty ``available_dates`` set means every date is allowed.
    """
    day = parse_day(day)
    today = today or timezone.localdate()
    if day < today:
        return False
    return not venue.available_dates or day in venue.available_dates


def time_slots_for(venue: Venue, day: date | str, today: date | None = None) -> list[str]:
    """Return the venue's slots for an available date, else an empty list.

    Slots are the same on every available date.
    """
    if not is_date_available(venue, day, today):
        return []
    return list(venue.time_slots)


class SlotSelection:
    """Date and slot picked for one venue before confirming a booking.

    A slot only belongs to the date it was picked on: choosing any date
    clears it, and choosing the selected date again clears both.
    """

    def __init__(self, venue: Venue, clock: Callable[[], date] = timezone.localdate) -> None:
        self.venue = venue
        self._clock = clock
        self.date: date | None = None
        self.time_slot: str | None = None

    def select_date(self, day: date | str) -> date | None:
        day = parse_day(day)
        if self.date == day:
            self.date = self.time_slot = None
            return None
        if not is_date_available(self.venue, day, self._clock()):
            raise BookingValidationError("Selected date is not available")
        self.date, self.time_slot = day, None
        return day

    def select_slot(self, slot: str) -> str:
        if self.date is None:
            raise BookingValidationError("Select a date before choosing a time slot")
        if slot not in time_slots_for(self.venue, self.date, self._clock()):
            raise BookingValidationError("Selected time slot is not offered")
        self.time_slot = slot
        return slot

    @property
    def is_complete(self) -> bool:
        return self.date is not None and self.time_slot is not None
