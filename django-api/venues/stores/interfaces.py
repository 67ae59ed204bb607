"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from venues.domain import Booking, Principal, Role, Venue, VenueId


class Catalog(ABC):
    """Interface for read-only venue lookups."""

    @abstractmethod
    def list_venues(self) -> list[Venue]:
        """Return all venues in catalog order."""
        ...

    @abstractmethod
    def get_venue(self, venue_id: VenueId) -> Venue | None:
        """Return a venue by ID, or None if not found."""
        ...

    @abstractmethod
    def venues_owned_by(self, owner_id: str) -> list[Venue]:
        """Return the venues of one owner, in catalog order."""
        ...


class Ledger(ABC):
    """Interface for booking records."""

    @abstractmethod
    def append(self, booking: Booking) -> None:
        """Record a new booking."""
        ...

    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        """Return all bookings in insertion order."""
        ...


class AccountDirectory(ABC):
    """Interface for demo accounts known to the process."""

    @abstractmethod
    def find_by_email(self, email: str) -> Principal | None:
        ...

    @abstractmethod
    def save(self, principal: Principal) -> None:
        ...

    @abstractmethod
    def list_accounts(self, role: Role | None = None) -> list[Principal]:
        """Return accounts, optionally only those with the given role."""
        ...
