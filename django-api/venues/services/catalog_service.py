"""Catalog service - venue search and lookup.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from venues.domain import Venue, VenueId
from venues.domain.errors import VenueNotFoundError
from venues.services.network import SimulatedNetwork
from venues.stores.interfaces import Catalog

logger = logging.getLogger(__name__)

CATEGORY_ALL = "all"
CATEGORY_POPULAR = "popular"
CATEGORY_NEARBY = "nearby"

POPULAR_LIMIT = 3
# Positional stand-in for proximity; there is no geolocation.
NEARBY_SLICE = slice(2, 5)


def matches_query(venue: Venue, query: str) -> bool:
    needle = query.lower()
    return any(
        needle in field.lower() for field in (venue.name, venue.location, venue.type)
    )


def most_popular(venues: list[Venue]) -> list[Venue]:
    return sorted(venues, key=lambda venue: venue.rating, reverse=True)[:POPULAR_LIMIT]


def filter_venues(venues: list[Venue], query: str = "", category: str = CATEGORY_ALL) -> list[Venue]:
    """Apply the text search, then the category filter.

    ``popular`` keeps the three best rated, ``nearby`` a fixed slice, and any
    other category except ``all`` matches ``type`` case-insensitively.
    """
    filtered = list(venues)
    if query:
        filtered = [venue for venue in filtered if matches_query(venue, query)]

    if category == CATEGORY_ALL:
        return filtered
    if category == CATEGORY_POPULAR:
        return most_popular(filtered)
    if category == CATEGORY_NEARBY:
        return filtered[NEARBY_SLICE]
    return [venue for venue in filtered if venue.type.lower() == category.lower()]


class CatalogService:
    """Service for venue catalog operations."""

    def __init__(self, catalog: Catalog, network: SimulatedNetwork | None = None) -> None:
        self._catalog = catalog
        self._network = network or SimulatedNetwork()

    async def list_venues(self, query: str = "", category: str = CATEGORY_ALL) -> list[Venue]:
        """Return venues matching the search text and category."""
        await self._network.round_trip("list_venues")
        venues = filter_venues(self._catalog.list_venues(), query or "", category or CATEGORY_ALL)
        logger.debug("list_venues(%r, %r) -> %d venues", query, category, len(venues))
        return venues

    async def get_venue(self, venue_id: str) -> Venue:
        """Return a venue by ID.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """
        await self._network.round_trip("get_venue")
        return self.resolve(venue_id)

    async def popular_venues(self) -> list[Venue]:
        """Return the three best rated venues of the whole catalog."""
        await self._network.round_trip("popular_venues")
        return most_popular(self._catalog.list_venues())

    async def nearby_venues(self) -> list[Venue]:
        await self._network.round_trip("nearby_venues")
        return self._catalog.list_venues()[NEARBY_SLICE]

    def resolve(self, venue_id: str) -> Venue:
        """Look a venue up without a round trip, for other services."""
        venue = self._catalog.get_venue(VenueId(venue_id)) if venue_id else None
        if venue is None:
            logger.info("Venue %r not found", venue_id)
            raise VenueNotFoundError(venue_id)
        return venue
