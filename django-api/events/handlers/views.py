"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from collections import Counter

from django.conf import settings
from django.core.cache import cache
from django.middleware.csrf import get_token, rotate_token
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import DomainError
from events.handlers.authentication import IsAdmin
from events.handlers.dependencies import get_catalog_service, get_session_service
from events.handlers.errors import domain_error_response
from events.handlers.serializers import (
    BookingSerializer,
    BookingStatusSerializer,
    DashboardSerializer,
    EventInputSerializer,
    EventSerializer,
    IdentitySerializer,
    LoginSerializer,
    MemberSerializer,
)
from events.services import queries
from events.services.directory import MEMBERS
from events.signals import EVENT_LIST_CACHE_KEY


def _event_names(catalog) -> dict[str, str]:
    return {event.id.value: event.name for event in catalog.events}


class SessionView(APIView):
    """Handler for /api/session (current identity, login, logout)

    GET and a successful login set the CSRF cookie that later unsafe
    requests must echo in the X-CSRFToken header.
    """

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        user = get_session_service(request).user
        get_token(request)
        return Response({"user": IdentitySerializer(user).data if user else None})

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            identity = get_session_service(request).login(**serializer.validated_data)
        except DomainError as error:
            return domain_error_response(error)
        request.session.cycle_key()
        rotate_token(request)
        return Response({"user": IdentitySerializer(identity).data})

    def delete(self, request: Request) -> Response:
        get_session_service(request).logout()
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventListView(APIView):
    """Handler for /api/events"""

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAdmin()]
        return [AllowAny()]

    def get(self, request: Request) -> Response:
        events = cache.get(EVENT_LIST_CACHE_KEY)
        if events is None:
            events = get_catalog_service(request).events
            cache.set(
                EVENT_LIST_CACHE_KEY,
                events,
                settings.EVENTEASE["EVENT_LIST_CACHE_SECONDS"],
            )
        params = request.query_params
        events = queries.filter_events(
            events,
            category=params.get("category"),
            search=params.get("search"),
            sort_by=params.get("sortBy"),
        )
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_catalog_service(request).add_event(serializer.to_draft())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class FeaturedEventListView(APIView):
    """Handler for GET /api/events/featured"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        events = queries.featured_events(get_catalog_service(request).events)
        return Response(EventSerializer(events, many=True).data)


class EventDetailView(APIView):
    """Handler for /api/events/{event_id}"""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAdmin()]

    def get(self, request: Request, event_id: str) -> Response:
        try:
            event = get_catalog_service(request).get_event(event_id)
        except DomainError as error:
            return domain_error_response(error)
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_catalog_service(request).update_event(event_id, **serializer.to_changes())
        except DomainError as error:
            return domain_error_response(error)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_catalog_service(request).delete_event(event_id)
        except DomainError as error:
            return domain_error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventBookingListView(APIView):
    """Handler for /api/events/{event_id}/bookings"""

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAuthenticated()]
        return [IsAdmin()]

    def get(self, request: Request, event_id: str) -> Response:
        catalog = get_catalog_service(request)
        try:
            catalog.get_event(event_id)
        except DomainError as error:
            return domain_error_response(error)
        bookings = catalog.get_event_bookings(event_id)
        return Response(BookingSerializer(bookings, many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        identity = request.user.identity
        try:
            booking = get_catalog_service(request).book_event(
                event_id, identity.id, identity.name, identity.email
            )
        except DomainError as error:
            return domain_error_response(error)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class MyBookingListView(APIView):
    """Handler for GET /api/me/bookings"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        catalog = get_catalog_service(request)
        upcoming, past = queries.split_user_bookings(
            catalog.get_user_bookings(request.user.identity.id)
        )
        context = {"event_names": _event_names(catalog)}
        return Response(
            {
                "upcoming": BookingSerializer(upcoming, many=True, context=context).data,
                "past": BookingSerializer(past, many=True, context=context).data,
            }
        )


class BookingListView(APIView):
    """Handler for GET /api/bookings"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        catalog = get_catalog_service(request)
        events = catalog.events
        bookings = queries.filter_bookings(
            catalog.bookings,
            events,
            search=request.query_params.get("search"),
            status=request.query_params.get("status"),
        )
        context = {"event_names": _event_names(catalog)}
        return Response(
            {
                "counts": queries.booking_status_counts(catalog.bookings),
                "results": BookingSerializer(bookings, many=True, context=context).data,
            }
        )


class BookingDetailView(APIView):
    """Handler for PATCH /api/bookings/{booking_id}"""

    permission_classes = [IsAdmin]

    def patch(self, request: Request, booking_id: str) -> Response:
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            booking = get_catalog_service(request).update_booking_status(
                booking_id, serializer.to_status()
            )
        except DomainError as error:
            return domain_error_response(error)
        return Response(BookingSerializer(booking).data)


class DashboardView(APIView):
    """Handler for GET /api/admin/dashboard"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        catalog = get_catalog_service(request)
        summary = queries.dashboard_summary(catalog.events, catalog.bookings, timezone.localdate())
        return Response(DashboardSerializer(summary).data)


class MemberListView(APIView):
    """Handler for GET /api/admin/users"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        catalog = get_catalog_service(request)
        members = queries.search_members(MEMBERS, request.query_params.get("search"))
        counts = Counter(b.user_id for b in catalog.bookings)
        return Response(MemberSerializer(members, many=True, context={"booking_counts": counts}).data)
