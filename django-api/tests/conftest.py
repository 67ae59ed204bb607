"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest
from rest_framework.test import APIClient

from venues.domain import Money, Venue, VenueId
from venues.services import BookingService, CatalogService, DashboardService
from venues.stores import InMemoryStore, reset_store

# A day inside the demo data's booking range.
DEMO_TODAY = date(2025, 1, 16)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def fresh_store():
    reset_store()
    yield
    reset_store()


@pytest.fixture
def store():
    with InMemoryStore() as opened:
        yield opened


@pytest.fixture
def today() -> date:
    return DEMO_TODAY


@pytest.fixture
def catalog(store) -> CatalogService:
    return CatalogService(store.catalog)


@pytest.fixture
def bookings(store, catalog, today) -> BookingService:
    return BookingService(catalog, store.ledger, clock=lambda: today)


@pytest.fixture
def dashboards(store, today) -> DashboardService:
    return DashboardService(store.catalog, store.ledger, store.accounts, clock=lambda: today)


@pytest.fixture
def make_venue():
    def factory(**overrides) -> Venue:
        fields = {
            "id": VenueId("v-1"),
            "name": "Harbour Courts",
            "location": "Harbourside, Boston",
            "type": "Tennis",
            "price": Money.of(100),
            "rating": 4.0,
            "time_slots": ("09:00 AM - 10:00 AM", "10:00 AM - 11:00 AM"),
        }
        fields.update(overrides)
        return Venue(**fields)

    return factory
