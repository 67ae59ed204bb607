"""Service construction from Django settings."""

from django.conf import settings

from venues.services.auth_service import DemoAuthenticator
from venues.services.booking_service import BookingRequest, BookingService
from venues.services.catalog_service import CatalogService
from venues.services.dashboard_service import DashboardService
from venues.services.network import SimulatedNetwork
from venues.stores import InMemoryStore, get_store


def build_network() -> SimulatedNetwork:
    return SimulatedNetwork(
        latency=settings.VENUES_SIMULATED_LATENCY,
        failure_rate=settings.VENUES_TRANSIENT_FAILURE_RATE,
    )


def build_catalog_service(store: InMemoryStore | None = None) -> CatalogService:
    store = store or get_store()
    return CatalogService(store.catalog, build_network())


def build_booking_service(store: InMemoryStore | None = None) -> BookingService:
    store = store or get_store()
    network = build_network()
    return BookingService(CatalogService(store.catalog, network), store.ledger, network)


def build_dashboard_service(store: InMemoryStore | None = None) -> DashboardService:
    store = store or get_store()
    return DashboardService(store.catalog, store.ledger, store.accounts, build_network())


def build_authenticator(store: InMemoryStore | None = None) -> DemoAuthenticator:
    store = store or get_store()
    return DemoAuthenticator(store.accounts, build_network())


__all__ = [
    "BookingRequest",
    "BookingService",
    "CatalogService",
    "DashboardService",
    "DemoAuthenticator",
    "SimulatedNetwork",
    "build_authenticator",
    "build_booking_service",
    "build_catalog_service",
    "build_dashboard_service",
]
