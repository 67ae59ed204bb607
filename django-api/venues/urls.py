from django.urls import path

from venues.handlers import (
    AdminDashboardView,
    BookingListView,
    OwnerDashboardView,
    SignInView,
    VenueAvailabilityView,
    VenueDetailView,
    VenueListView,
    VenueQuoteView,
)

urlpatterns = [
    path("venues", VenueListView.as_view(), name="venue-list"),
    path("venues/<str:venue_id>", VenueDetailView.as_view(), name="venue-detail"),
    path(
        "venues/<str:venue_id>/availability",
        VenueAvailabilityView.as_view(),
        name="venue-availability",
    ),
    path("venues/<str:venue_id>/quote", VenueQuoteView.as_view(), name="venue-quote"),
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("auth/sign-in", SignInView.as_view(), name="sign-in"),
    path(
        "owners/<str:owner_id>/dashboard",
        OwnerDashboardView.as_view(),
        name="owner-dashboard",
    ),
    path("admin/dashboard", AdminDashboardView.as_view(), name="admin-dashboard"),
]
