from venues.handlers.views import (
    AdminDashboardView,
    BookingListView,
    OwnerDashboardView,
    SignInView,
    VenueAvailabilityView,
    VenueDetailView,
    VenueListView,
    VenueQuoteView,
)

__all__ = [
    "AdminDashboardView",
    "BookingListView",
    "OwnerDashboardView",
    "SignInView",
    "VenueAvailabilityView",
    "VenueDetailView",
    "VenueListView",
    "VenueQuoteView",
]
