"""URL configuration for the venue booking API."""

from django.urls import include, path

urlpatterns = [
    path("api/", include("venues.urls")),
]
