"""In-memory implementations of the store interfaces.

All state lives in process memory. An ``InMemoryStore`` owns one catalog,
one ledger and one account directory, and must be opened before use.
"""

import logging

from venues.domain import Booking, Principal, Role, Venue, VenueId
from venues.stores.interfaces import AccountDirectory, Catalog, Ledger
from venues.stores.seed import seed_accounts, seed_bookings, seed_venues

logger = logging.getLogger(__name__)


class InMemoryCatalog(Catalog):
    """Venue catalog backed by a list."""

    def __init__(self, venues: list[Venue] | None = None) -> None:
        self._venues = list(venues or [])

    def list_venues(self) -> list[Venue]:
        return list(self._venues)

    def get_venue(self, venue_id: VenueId) -> Venue | None:
        return next((venue for venue in self._venues if venue.id == venue_id), None)

    def venues_owned_by(self, owner_id: str) -> list[Venue]:
        return [venue for venue in self._venues if venue.owner_id == owner_id]


class InMemoryLedger(Ledger):
    """Booking ledger backed by a list. Appends are the only mutation."""

    def __init__(self, bookings: list[Booking] | None = None) -> None:
        self._bookings = list(bookings or [])

    def append(self, booking: Booking) -> None:
        self._bookings.append(booking)

    def list_bookings(self) -> list[Booking]:
        return list(self._bookings)


class InMemoryAccountDirectory(AccountDirectory):
    def __init__(self, accounts: list[Principal] | None = None) -> None:
        self._accounts = {account.id: account for account in accounts or []}

    def find_by_email(self, email: str) -> Principal | None:
        wanted = email.lower()
        return next(
            (account for account in self._accounts.values() if account.email.lower() == wanted),
            None,
        )

    def save(self, principal: Principal) -> None:
        self._accounts[principal.id] = principal

    def list_accounts(self, role: Role | None = None) -> list[Principal]:
        return [
            account
            for account in self._accounts.values()
            if role is None or account.role == role
        ]


class StoreClosedError(RuntimeError):
    """Raised when a closed store is used."""


class InMemoryStore:
    """Process-lifetime store holding the catalog, ledger and accounts.

    ``open()`` loads the demo data (or the data passed in), ``close()``
    drops it. Components are only reachable while the store is open.
    """

    def __init__(
        self,
        venues: list[Venue] | None = None,
        bookings: list[Booking] | None = None,
        accounts: list[Principal] | None = None,
    ) -> None:
        self._venues = venues
        self._bookings = bookings
        self._accounts = accounts
        self._catalog: InMemoryCatalog | None = None
        self._ledger: InMemoryLedger | None = None
        self._directory: InMemoryAccountDirectory | None = None

    @property
    def is_open(self) -> bool:
        return self._catalog is not None

    def open(self) -> "InMemoryStore":
        if self.is_open:
            return self
        venues = self._venues if self._venues is not None else seed_venues()
        bookings = self._bookings if self._bookings is not None else seed_bookings(venues)
        accounts = self._accounts if self._accounts is not None else seed_accounts()
        self._catalog = InMemoryCatalog(venues)
        self._ledger = InMemoryLedger(bookings)
        self._directory = InMemoryAccountDirectory(accounts)
        logger.info(
            "Opened in-memory store with %d venues, %d bookings, %d accounts",
            len(venues),
            len(bookings),
            len(accounts),
        )
        return self

    def close(self) -> None:
        self._catalog = None
        self._ledger = None
        self._directory = None
        logger.info("Closed in-memory store")

    def __enter__(self) -> "InMemoryStore":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def catalog(self) -> Catalog:
        if self._catalog is None:
            raise StoreClosedError("Store is not open")
        return self._catalog

    @property
    def ledger(self) -> Ledger:
        if self._ledger is None:
            raise StoreClosedError("Store is not open")
        return self._ledger

    @property
    def accounts(self) -> AccountDirectory:
        if self._directory is None:
            raise StoreClosedError("Store is not open")
        return self._directory
