"""Serializers for transforming domain models to API responses.

Money is rendered as a string rounded to two decimal places; domain
objects keep full precision.
"""

from rest_framework import serializers

from venues.domain import Role

PAYMENT_METHODS = ["card", "paypal"]


class MoneyField(serializers.DecimalField):
    """Renders a Money value object."""

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("max_digits", 14)
        kwargs.setdefault("decimal_places", 2)
        kwargs.setdefault("read_only", True)
        super().__init__(**kwargs)

    def to_representation(self, value):
        return super().to_representation(value.amount)


class ReviewSerializer(serializers.Serializer):
    """Serializer for Review domain model."""

    id = serializers.CharField()
    user_name = serializers.CharField()
    user_avatar = serializers.CharField()
    rating = serializers.FloatField()
    date = serializers.DateField()
    text = serializers.CharField()


class OpeningHoursSerializer(serializers.Serializer):
    days = serializers.CharField()
    hours = serializers.CharField()


class VenueSummarySerializer(serializers.Serializer):
    """Serializer for venue cards in listings."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    location = serializers.CharField()
    type = serializers.CharField()
    price = MoneyField()
    rating = serializers.FloatField()
    review_count = serializers.IntegerField()
    image_url = serializers.CharField()


class VenueSerializer(VenueSummarySerializer):
    """Serializer for Venue domain model."""

    description = serializers.CharField()
    images = serializers.ListField(child=serializers.CharField())
    amenities = serializers.ListField(child=serializers.CharField())
    opening_hours = OpeningHoursSerializer(many=True)
    available_dates = serializers.SerializerMethodField()
    time_slots = serializers.ListField(child=serializers.CharField())
    reviews = ReviewSerializer(many=True)

    def get_available_dates(self, venue) -> list[str]:
        return [day.isoformat() for day in sorted(venue.available_dates)]


class VenueRefSerializer(serializers.Serializer):
    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    location = serializers.CharField()
    image_url = serializers.CharField()


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField(source="id.value")
    venue = VenueRefSerializer()
    date = serializers.DateField()
    time = serializers.CharField()
    status = serializers.CharField(source="status.value")
    total_price = MoneyField()
    payment_method = serializers.CharField()


class PriceBreakdownSerializer(serializers.Serializer):
    subtotal = MoneyField()
    service_fee = MoneyField()
    total = MoneyField()


class AvailabilitySerializer(serializers.Serializer):
    date = serializers.DateField()
    available = serializers.BooleanField()
    time_slots = serializers.ListField(child=serializers.CharField())


class PrincipalSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField(source="role.value")
    avatar_url = serializers.CharField()


class OwnerStatsSerializer(serializers.Serializer):
    revenue = MoneyField()
    bookings = serializers.IntegerField()
    rating = serializers.FloatField()
    customers = serializers.IntegerField()


class AdminStatsSerializer(serializers.Serializer):
    revenue = MoneyField()
    growth_rate = serializers.DecimalField(max_digits=8, decimal_places=1)
    pending_approvals = serializers.IntegerField()
    users = serializers.IntegerField()
    venues = serializers.IntegerField()
    bookings = serializers.IntegerField()
    active_users = serializers.IntegerField()
    active_owners = serializers.IntegerField()
    completed_bookings = serializers.IntegerField()
    average_rating = serializers.FloatField()


class BookingCreateSerializer(serializers.Serializer):
    """Input format of a booking confirmation.

    Date and slot are optional here; their absence is a domain validation
    error reported by the booking service.
    """

    venue_id = serializers.CharField()
    date = serializers.DateField(source="booking_date", required=False, allow_null=True)
    time_slot = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    payment_method = serializers.ChoiceField(choices=PAYMENT_METHODS, default="card")
    accept_terms = serializers.BooleanField(default=False)
    customer = serializers.CharField(required=False, allow_null=True)


class SignInSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField()
    role = serializers.ChoiceField(choices=[role.value for role in Role])
