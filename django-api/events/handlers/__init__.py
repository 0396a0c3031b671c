from events.handlers.views import (
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

__all__ = [
    "SessionView",
    "EventListView",
    "FeaturedEventListView",
    "EventDetailView",
    "EventBookingListView",
    "MyBookingListView",
    "BookingListView",
    "BookingDetailView",
    "DashboardView",
    "MemberListView",
]
