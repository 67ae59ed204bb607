"""Owner and admin dashboard statistics.

Stats are snapshots derived from the catalog, ledger and accounts on every
call; nothing here is stored.
"""

from collections.abc import Callable
from datetime import date, timedelta
from decimal import Decimal

from django.utils import timezone

from venues.domain import AdminStats, Booking, BookingStatus, Money, OwnerStats, Role, Venue
from venues.services.network import SimulatedNetwork
from venues.stores.interfaces import AccountDirectory, Catalog, Ledger

GROWTH_WINDOW = timedelta(days=30)


def _revenue(bookings: list[Booking]) -> Money:
    return Money(
        sum(
            (b.total_price.amount for b in bookings if b.status != BookingStatus.CANCELLED),
            Decimal(0),
        )
    )


def _mean_rating(venues: list[Venue]) -> float:
    if not venues:
        return 0.0
    return round(sum(venue.rating for venue in venues) / len(venues), 2)


def _customers(bookings: list[Booking]) -> set[str]:
    return {b.customer for b in bookings if b.customer}


def growth_rate(bookings: list[Booking], today: date) -> Decimal:
    """Percent change of bookings in the last 30 days against the 30 before."""
    recent_start = today - GROWTH_WINDOW
    previous_start = recent_start - GROWTH_WINDOW
    recent = sum(1 for b in bookings if recent_start < b.date <= today)
    previous = sum(1 for b in bookings if previous_start < b.date <= recent_start)
    if previous == 0:
        return Decimal(0)
    return (Decimal(recent - previous) * 100 / previous).quantize(Decimal("0.1"))


class DashboardService:
    """Read models behind the owner and admin dashboards."""

    def __init__(
        self,
        catalog: Catalog,
        ledger: Ledger,
        accounts: AccountDirectory,
        network: SimulatedNetwork | None = None,
        clock: Callable[[], date] = timezone.localdate,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._accounts = accounts
        self._network = network or SimulatedNetwork()
        self._clock = clock

    async def owner_venues(self, owner_id: str) -> list[Venue]:
        await self._network.round_trip("owner_venues")
        return self._catalog.venues_owned_by(owner_id)

    async def owner_stats(self, owner_id: str) -> OwnerStats:
        await self._network.round_trip("owner_stats")
        venues = self._catalog.venues_owned_by(owner_id)
        venue_ids = {venue.id for venue in venues}
        bookings = [
            b
            for b in self._ledger.list_bookings()
            if b.venue.id in venue_ids and b.status != BookingStatus.CANCELLED
        ]
        return OwnerStats(
            revenue=_revenue(bookings),
            bookings=len(bookings),
            rating=_mean_rating(venues),
            customers=len(_customers(bookings)),
        )

    async def admin_stats(self) -> AdminStats:
        await self._network.round_trip("admin_stats")
        venues = self._catalog.list_venues()
        bookings = self._ledger.list_bookings()
        return AdminStats(
            revenue=_revenue(bookings),
            growth_rate=growth_rate(bookings, self._clock()),
            pending_approvals=sum(1 for b in bookings if b.status == BookingStatus.PENDING),
            users=len(self._accounts.list_accounts(Role.USER)),
            venues=len(venues),
            bookings=len(bookings),
            active_users=len(_customers(bookings)),
            active_owners=len({venue.owner_id for venue in venues if venue.owner_id}),
            completed_bookings=sum(1 for b in bookings if b.status == BookingStatus.COMPLETED),
            average_rating=_mean_rating(venues),
        )
