"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from asgiref.sync import async_to_sync
from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from venues import cache_keys
from venues.domain import parse_day
from venues.domain.errors import DomainError, ErrorCode
from venues.handlers.serializers import (
    AdminStatsSerializer,
    AvailabilitySerializer,
    BookingCreateSerializer,
    BookingSerializer,
    OwnerStatsSerializer,
    PriceBreakdownSerializer,
    PrincipalSerializer,
    SignInSerializer,
    VenueSerializer,
    VenueSummarySerializer,
)
from venues.services import (
    BookingRequest,
    build_authenticator,
    build_booking_service,
    build_catalog_service,
    build_dashboard_service,
)
from venues.services.availability import is_date_available, time_slots_for

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.VENUE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TRANSIENT_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}

INVALID_REQUEST = "INVALID_REQUEST"


def _error(code: str, message: str, http_status: int) -> Response:
    return Response({"error": {"code": code, "message": message}}, status=http_status)


def domain_error_response(error: DomainError) -> Response:
    http_status = ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST)
    logger.info("Domain error %s -> %d", error.code.value, http_status)
    return _error(error.code.value, error.message, http_status)


def invalid_request_response(errors: dict) -> Response:
    fields = ", ".join(sorted(errors))
    return _error(INVALID_REQUEST, f"Invalid fields: {fields}", status.HTTP_400_BAD_REQUEST)


def _cached(key: str, build):
    data = cache.get(key)
    if data is None:
        data = build()
        cache.set(key, data, settings.VENUES_CACHE_TIMEOUT)
    return data


class VenueListView(APIView):
    """Handler for GET /api/venues?q=&category="""

    def get(self, request: Request) -> Response:
        query = request.query_params.get("q", "")
        category = request.query_params.get("category", "all")
        service = build_catalog_service()

        def build():
            venues = async_to_sync(service.list_venues)(query, category)
            return {"results": VenueSummarySerializer(venues, many=True).data}

        try:
            return Response(_cached(cache_keys.venue_list(query, category), build))
        except DomainError as e:
            return domain_error_response(e)


class VenueDetailView(APIView):
    """Handler for GET /api/venues/{venue_id}"""

    def get(self, request: Request, venue_id: str) -> Response:
        service = build_catalog_service()

        def build():
            venue = async_to_sync(service.get_venue)(venue_id)
            return VenueSerializer(venue).data

        try:
            return Response(_cached(cache_keys.venue_detail(venue_id), build))
        except DomainError as e:
            return domain_error_response(e)


class VenueAvailabilityView(APIView):
    """Handler for GET /api/venues/{venue_id}/availability?date=YYYY-MM-DD"""

    def get(self, request: Request, venue_id: str) -> Response:
        try:
            day = parse_day(request.query_params.get("date"))
            venue = async_to_sync(build_catalog_service().get_venue)(venue_id)
        except DomainError as e:
            return domain_error_response(e)
        payload = {
            "date": day,
            "available": is_date_available(venue, day),
            "time_slots": time_slots_for(venue, day),
        }
        return Response(AvailabilitySerializer(payload).data)


class VenueQuoteView(APIView):
    """Handler for GET /api/venues/{venue_id}/quote?hours=1"""

    def get(self, request: Request, venue_id: str) -> Response:
        try:
            hours = int(request.query_params.get("hours", 1))
        except ValueError:
            return invalid_request_response({"hours": "not an integer"})
        if hours <= 0:
            return invalid_request_response({"hours": "must be positive"})
        try:
            price = async_to_sync(build_booking_service().quote)(venue_id, hours)
        except DomainError as e:
            return domain_error_response(e)
        return Response(PriceBreakdownSerializer(price).data)


class BookingListView(APIView):
    """Handler for GET /api/bookings?filter= and POST /api/bookings"""

    def get(self, request: Request) -> Response:
        booking_filter = request.query_params.get("filter", "upcoming")
        try:
            bookings = async_to_sync(build_booking_service().list_bookings)(booking_filter)
        except DomainError as e:
            return domain_error_response(e)
        return Response({"results": BookingSerializer(bookings, many=True).data})

    def post(self, request: Request) -> Response:
        serializer = BookingCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request_response(serializer.errors)
        booking_request = BookingRequest(**serializer.validated_data)
        try:
            booking = async_to_sync(build_booking_service().confirm_booking)(booking_request)
        except DomainError as e:
            return domain_error_response(e)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class SignInView(APIView):
    """Handler for POST /api/auth/sign-in"""

    def post(self, request: Request) -> Response:
        serializer = SignInSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request_response(serializer.errors)
        data = serializer.validated_data
        try:
            principal = async_to_sync(build_authenticator().sign_in)(
                data["email"], data["password"], data["role"]
            )
        except DomainError as e:
            return domain_error_response(e)
        return Response(PrincipalSerializer(principal).data)


class OwnerDashboardView(APIView):
    """Handler for GET /api/owners/{owner_id}/dashboard"""

    def get(self, request: Request, owner_id: str) -> Response:
        service = build_dashboard_service()

        def build():
            stats = async_to_sync(service.owner_stats)(owner_id)
            venues = async_to_sync(service.owner_venues)(owner_id)
            return {
                "stats": OwnerStatsSerializer(stats).data,
                "venues": VenueSummarySerializer(venues, many=True).data,
            }

        try:
            return Response(_cached(cache_keys.owner_dashboard(owner_id), build))
        except DomainError as e:
            return domain_error_response(e)


class AdminDashboardView(APIView):
    """Handler for GET /api/admin/dashboard"""

    def get(self, request: Request) -> Response:
        service = build_dashboard_service()

        def build():
            stats = async_to_sync(service.admin_stats)()
            return {"stats": AdminStatsSerializer(stats).data}

        try:
            return Response(_cached(cache_keys.admin_dashboard(), build))
        except DomainError as e:
            return domain_error_response(e)
