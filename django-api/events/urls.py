from django.urls import path

from events.handlers import (
    BookingDetailView,
    BookingListView,
    DashboardView,
    EventBookingListView,
    EventDetailView,
    EventListView,
    FeaturedEventListView,
    MemberListView,
    MyBookingListView,
    SessionView,
)

urlpatterns = [
    path("session", SessionView.as_view(), name="session"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/featured", FeaturedEventListView.as_view(), name="event-featured"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/bookings",
        EventBookingListView.as_view(),
        name="event-booking-list",
    ),
    path("me/bookings", MyBookingListView.as_view(), name="my-booking-list"),
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path("admin/dashboard", DashboardView.as_view(), name="admin-dashboard"),
    path("admin/users", MemberListView.as_view(), name="admin-users"),
]
