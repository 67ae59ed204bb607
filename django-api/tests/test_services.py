"""Unit tests for the services.

These test filtering, error handling and domain error mapping against the
demo data in an in-memory store.
Run with: pytest tests/test_services.py -v
"""

import threading
import time
from datetime import date, datetime
from decimal import Decimal

import pytest
from asgiref.sync import async_to_sync

from venues import stores
from venues.domain import BookingStatus, Money, Role
from venues.domain.errors import (
    BookingValidationError,
    InvalidCredentialsError,
    TransientFailureError,
    VenueNotFoundError,
)
from venues.services import (
    BookingRequest,
    CatalogService,
    DashboardService,
    DemoAuthenticator,
    SimulatedNetwork,
)
from venues.services.booking_service import LEDGER_BOOKING_HOURS
from venues.stores import InMemoryStore, get_store
from venues.stores.memory_store import StoreClosedError


def run(coroutine_function, *args, **kwargs):
    return async_to_sync(coroutine_function)(*args, **kwargs)


def ids(items) -> list[str]:
    return [item.id.value for item in items]


class TestCatalogService:
    """Tests for CatalogService."""

    def test_list_all_returns_every_venue(self, catalog, store):
        """The "all" category lists the whole catalog in order."""
        venues = run(catalog.list_venues, "", "all")
        assert venues == store.catalog.list_venues()
        assert len(venues) == 5

    def test_search_is_case_insensitive_over_name_location_and_type(self, catalog):
        """Search matches name, location or type regardless of case."""
        assert ids(run(catalog.list_venues, "tennis", "all")) == ["3"]
        assert ids(run(catalog.list_venues, "LOS ANGELES")) == ["2"]
        assert ids(run(catalog.list_venues, "baseball")) == ["5"]

    def test_search_without_matches_is_empty(self, catalog):
        """A query that matches nothing returns an empty list."""
        assert run(catalog.list_venues, "curling") == []

    def test_popular_returns_top_three_by_rating(self, catalog):
        """The popular category keeps the three best-rated venues."""
        venues = run(catalog.list_venues, "", "popular")
        assert [venue.rating for venue in venues] == [4.9, 4.8, 4.7]

    def test_nearby_is_a_fixed_slice(self, catalog):
        """The nearby category is the third to fifth venue."""
        assert ids(run(catalog.list_venues, "", "nearby")) == ["3", "4", "5"]

    def test_other_categories_match_type(self, catalog):
        """Any other category filters on the venue type."""
        assert ids(run(catalog.list_venues, "", "cricket")) == ["4"]
        assert ids(run(catalog.list_venues, "", "Football")) == ["1"]
        assert run(catalog.list_venues, "", "hockey") == []

    def test_search_applies_before_category(self, catalog):
        """Popular ranks the search results, not the whole catalog."""
        assert ids(run(catalog.list_venues, "stadium", "popular")) == ["1", "4"]

    def test_repeated_queries_return_identical_results(self, catalog):
        assert run(catalog.list_venues, "e", "popular") == run(catalog.list_venues, "e", "popular")

    def test_get_venue(self, catalog):
        """get_venue returns the venue with the given id."""
        assert run(catalog.get_venue, "2").name == "Central Arena"

    def test_get_venue_not_found_raises_error(self, catalog):
        """get_venue raises VenueNotFoundError for an unknown id."""
        with pytest.raises(VenueNotFoundError):
            run(catalog.get_venue, "999")

    def test_home_feeds(self, catalog):
        """Home feeds rank the whole catalog."""
        assert ids(run(catalog.popular_venues)) == ["3", "1", "5"]
        assert ids(run(catalog.nearby_venues)) == ["3", "4", "5"]


class TestBookingService:
    """Tests for BookingService."""

    def test_upcoming_excludes_past_and_cancelled(self, bookings):
        """Upcoming keeps later, non-cancelled bookings."""
        assert ids(run(bookings.list_bookings, "upcoming")) == ["1002", "1005"]

    def test_past_excludes_cancelled(self, bookings):
        """Past keeps earlier, non-cancelled bookings."""
        assert ids(run(bookings.list_bookings, "past")) == ["1001", "1003"]

    def test_cancelled_only(self, bookings):
        """Cancelled keeps cancelled bookings whatever their date."""
        result = run(bookings.list_bookings, "cancelled")
        assert ids(result) == ["1004"]
        assert all(b.status == BookingStatus.CANCELLED for b in result)

    def test_unknown_filter_returns_everything(self, bookings, store):
        """An unrecognised filter lists the whole ledger."""
        assert run(bookings.list_bookings, "bogus") == store.ledger.list_bookings()

    def test_default_filter_is_upcoming(self, bookings):
        assert run(bookings.list_bookings) == run(bookings.list_bookings, "upcoming")

    def test_create_booking_records_confirmed_booking(self, bookings, store):
        """create_booking appends a confirmed booking to the ledger."""
        booking = run(bookings.create_booking, "1", "2025-01-22", "09:00 AM - 10:00 AM", "card")
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.date == date(2025, 1, 22)
        assert booking.venue.name == "Olympic Stadium"
        assert booking.payment_method == "card"
        assert store.ledger.list_bookings()[-1] == booking
        assert booking in run(bookings.list_bookings, "upcoming")

    def test_create_booking_prices_the_ledger_duration(self, bookings):
        """The ledger total is two hours at the hourly rate, without the fee."""
        booking = run(bookings.create_booking, "1", "2025-01-22", "09:00 AM - 10:00 AM", "card")
        assert LEDGER_BOOKING_HOURS == 2
        assert booking.total_price == Money.of(Decimal("2400"))

    def test_new_booking_is_priced_like_the_demo_ledger(self, bookings, store):
        """A new booking totals the same as the demo booking on the same venue."""
        seeded = next(b for b in store.ledger.list_bookings() if b.id.value == "1001")
        booking = run(bookings.create_booking, "1", "2025-01-22", "09:00 AM - 10:00 AM", "card")
        assert booking.total_price == seeded.total_price

    def test_create_booking_with_datetime_keeps_calendar_date(self, bookings):
        """A datetime is stored as its date and listing keeps working."""
        booking = run(
            bookings.create_booking, "1", datetime(2025, 1, 22, 18, 30), "09:00 AM - 10:00 AM", "card"
        )
        assert booking.date == date(2025, 1, 22)
        assert type(booking.date) is date
        assert booking in run(bookings.list_bookings, "upcoming")
        assert ids(run(bookings.list_bookings, "past")) == ["1001", "1003"]

    def test_create_booking_generates_fresh_ids(self, bookings):
        """Every booking gets a new id."""
        first = run(bookings.create_booking, "2", "2025-01-20", "08:00 AM - 09:00 AM", "card")
        second = run(bookings.create_booking, "2", "2025-01-20", "08:00 AM - 09:00 AM", "card")
        assert first.id != second.id

    def test_double_booking_is_not_prevented(self, bookings, store):
        """The same venue, date and slot can be booked twice."""
        for _ in range(2):
            run(bookings.create_booking, "2", "2025-01-20", "08:00 AM - 09:00 AM", "paypal")
        same_slot = [
            b
            for b in store.ledger.list_bookings()
            if b.venue.id.value == "2" and b.date == date(2025, 1, 20)
        ]
        assert len(same_slot) == 2

    def test_create_booking_unknown_venue_appends_nothing(self, bookings, store):
        """create_booking raises VenueNotFoundError and leaves the ledger alone."""
        before = store.ledger.list_bookings()
        with pytest.raises(VenueNotFoundError):
            run(bookings.create_booking, "999", "2025-01-22", "09:00 AM - 10:00 AM", "card")
        assert store.ledger.list_bookings() == before

    def test_quote_uses_one_hour(self, bookings):
        """quote prices one hour plus the service fee by default."""
        price = run(bookings.quote, "3")
        assert price.subtotal == Money.of(600)
        assert price.total == Money.of(660)

    def test_quote_unknown_venue(self, bookings):
        with pytest.raises(VenueNotFoundError):
            run(bookings.quote, "nope")

    def test_confirm_requires_terms(self, bookings, store):
        """confirm_booking rejects a request without accepted terms."""
        request = BookingRequest(venue_id="1", booking_date="2025-01-22", time_slot="09:00 AM - 10:00 AM")
        with pytest.raises(BookingValidationError):
            run(bookings.confirm_booking, request)
        assert len(store.ledger.list_bookings()) == 5

    @pytest.mark.parametrize(
        "booking_date, time_slot",
        [(None, "09:00 AM - 10:00 AM"), ("2025-01-22", None), ("2025-01-22", "")],
    )
    def test_confirm_requires_date_and_slot(self, bookings, booking_date, time_slot):
        """confirm_booking rejects a request missing its date or slot."""
        request = BookingRequest(
            venue_id="1", booking_date=booking_date, time_slot=time_slot, accept_terms=True
        )
        with pytest.raises(BookingValidationError):
            run(bookings.confirm_booking, request)

    def test_confirm_creates_booking_for_customer(self, bookings):
        """confirm_booking passes the customer and payment method through."""
        request = BookingRequest(
            venue_id="4",
            booking_date=date(2025, 1, 23),
            time_slot="09:00 AM - 11:00 AM",
            payment_method="paypal",
            accept_terms=True,
            customer="user-9",
        )
        booking = run(bookings.confirm_booking, request)
        assert booking.customer == "user-9"
        assert booking.payment_method == "paypal"


class TestDashboardService:
    def test_owner_venues(self, dashboards):
        """owner_venues lists only the owner's venues."""
        assert ids(run(dashboards.owner_venues, "owner-1")) == ["1", "2", "3"]
        assert run(dashboards.owner_venues, "nobody") == []

    def test_owner_stats(self, dashboards):
        """Owner stats sum bookings and average ratings of the owner's venues."""
        stats = run(dashboards.owner_stats, "owner-1")
        assert stats.revenue == Money.of(5200)
        assert stats.bookings == 3
        assert stats.rating == pytest.approx(4.77)
        assert stats.customers == 1

    def test_owner_stats_exclude_cancelled(self, dashboards):
        """Cancelled bookings count for neither revenue nor bookings."""
        stats = run(dashboards.owner_stats, "owner-2")
        assert stats.revenue == Money.of(4500)
        assert stats.bookings == 1

    def test_owner_without_venues(self, dashboards):
        stats = run(dashboards.owner_stats, "nobody")
        assert stats.revenue == Money.of(0)
        assert stats.rating == 0.0

    def test_admin_stats(self, dashboards):
        """Admin stats cover the whole catalog, ledger and account list."""
        stats = run(dashboards.admin_stats)
        assert stats.revenue == Money.of(9700)
        assert stats.pending_approvals == 1
        assert stats.users == 1
        assert stats.venues == 5
        assert stats.bookings == 5
        assert stats.active_users == 1
        assert stats.active_owners == 2
        assert stats.completed_bookings == 1
        assert stats.average_rating == pytest.approx(4.7)

    def test_admin_growth_rate(self, store):
        """Growth compares revenue of the last 30 days with the 30 before."""
        service = DashboardService(
            store.catalog, store.ledger, store.accounts, clock=lambda: date(2025, 1, 25)
        )
        assert run(service.admin_stats).growth_rate == Decimal("50.0")

    def test_stats_are_recomputed_after_a_booking(self, dashboards, bookings):
        """A new booking shows up in the next stats call."""
        before = run(dashboards.owner_stats, "owner-1")
        run(bookings.create_booking, "1", "2025-01-22", "09:00 AM - 10:00 AM", "card", customer="user-2")
        after = run(dashboards.owner_stats, "owner-1")
        assert after.bookings == before.bookings + 1
        assert after.customers == 2
        assert after.revenue == before.revenue + Money.of(2400)


class TestDemoAuthenticator:
    @pytest.fixture
    def auth(self, store) -> DemoAuthenticator:
        return DemoAuthenticator(store.accounts)

    def test_known_account_keeps_its_identity(self, auth):
        """Signing in as a demo account returns that account."""
        principal = run(auth.sign_in, "owner@example.com", "secret", Role.OWNER)
        assert principal.id == "owner-1"
        assert principal.role == Role.OWNER

    def test_role_is_taken_from_the_argument_not_the_email(self, auth):
        """An email mentioning a role does not change the requested role."""
        principal = run(auth.sign_in, "admin.fan@example.com", "pw", "user")
        assert principal.role == Role.USER
        assert principal.name == "John Doe"

    def test_first_sign_in_registers_account(self, auth):
        """A new email is registered once and matched case-insensitively."""
        principal = run(auth.sign_in, "new@example.com", "pw", Role.OWNER)
        again = run(auth.sign_in, "NEW@example.com", "pw", Role.OWNER)
        assert again.id == principal.id
        assert principal in run(auth.accounts, Role.OWNER)

    @pytest.mark.parametrize(
        "email, password, role",
        [("", "pw", "user"), ("a@example.com", "", "user"), ("a@example.com", "pw", "superuser")],
    )
    def test_invalid_sign_in(self, auth, email, password, role):
        """sign_in raises InvalidCredentialsError for missing fields or an unknown role."""
        with pytest.raises(InvalidCredentialsError):
            run(auth.sign_in, email, password, role)


class TestSimulatedNetwork:
    def test_failure_rate_raises_transient_failure(self, store):
        """A failure rate of 1 fails every round trip."""
        catalog = CatalogService(store.catalog, SimulatedNetwork(failure_rate=1.0))
        with pytest.raises(TransientFailureError):
            run(catalog.list_venues)

    def test_failure_decided_by_rng(self):
        """A draw above the failure rate succeeds."""
        network = SimulatedNetwork(failure_rate=0.5, rng=lambda: 0.9)
        run(network.round_trip, "noop")

    @pytest.mark.parametrize("kwargs", [{"latency": -1}, {"failure_rate": 1.5}])
    def test_rejects_invalid_configuration(self, kwargs):
        with pytest.raises(ValueError):
            SimulatedNetwork(**kwargs)


class TestInMemoryStore:
    def test_closed_store_is_unusable(self):
        """Accessing a closed store raises StoreClosedError."""
        opened = InMemoryStore().open()
        opened.close()
        with pytest.raises(StoreClosedError):
            opened.catalog

    def test_store_accepts_custom_data(self, make_venue):
        """Explicit data replaces the demo data."""
        with InMemoryStore(venues=[make_venue()], bookings=[], accounts=[]) as custom:
            assert len(custom.catalog.list_venues()) == 1
            assert custom.ledger.list_bookings() == []

    def test_reopening_reloads_demo_data(self, bookings, store):
        """Closing and opening again discards new bookings."""
        run(bookings.create_booking, "1", "2025-01-22", "09:00 AM - 10:00 AM", "card")
        store.close()
        store.open()
        assert len(store.ledger.list_bookings()) == 5


class TestProcessStore:
    def test_get_store_returns_the_same_store(self):
        """get_store opens the store once and reuses it."""
        assert get_store() is get_store()

    def test_concurrent_first_use_builds_one_store(self, monkeypatch):
        """Threads racing on first use all get the same store."""

        class SlowStore(InMemoryStore):
            def open(self):
                time.sleep(0.05)
                return super().open()

        monkeypatch.setattr(stores, "InMemoryStore", SlowStore)
        start = threading.Barrier(4)
        results = []

        def first_use():
            start.wait()
            results.append(get_store())

        threads = [threading.Thread(target=first_use) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 4
        assert all(result is results[0] for result in results)
