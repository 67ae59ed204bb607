from django.apps import AppConfig


class VenuesConfig(AppConfig):
    name = "venues"
    verbose_name = "Venue bookings"

    def ready(self) -> None:
        from venues import signals  # noqa: F401
