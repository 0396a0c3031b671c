"""Read-side views over the catalog used by listing and admin pages.

All functions are pure: they never mutate their inputs and return new lists.
"""

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from events.domain import Booking, BookingStatus, Event, EventCategory, EventId, Identity

UNKNOWN_EVENT_NAME = "Unknown Event"
TOP_EVENTS_LIMIT = 5

_SORTS = {
    "date-asc": (lambda e: e.date, False),
    "date-desc": (lambda e: e.date, True),
    "price-asc": (lambda e: e.price.amount, False),
    "price-desc": (lambda e: e.price.amount, True),
}


def filter_events(
    events: Iterable[Event],
    category: str | None = None,
    search: str | None = None,
    sort_by: str | None = None,
) -> list[Event]:
    """Filter by category and free-text search, then sort.

    Unknown sort keys leave the order unchanged.
    """
    result = list(events)
    if category:
        result = [e for e in result if e.category.value == category]
    if search:
        needle = search.lower()
        result = [
            e
            for e in result
            if needle in e.name.lower()
            or needle in e.description.lower()
            or needle in e.location.lower()
        ]
    if sort_by in _SORTS:
        key, reverse = _SORTS[sort_by]
        result.sort(key=key, reverse=reverse)
    return result


def featured_events(events: Iterable[Event]) -> list[Event]:
    return [e for e in events if e.featured]


def event_name(events: Iterable[Event], event_id: EventId) -> str:
    for event in events:
        if event.id == event_id:
            return event.name
    return UNKNOWN_EVENT_NAME


def filter_bookings(
    bookings: Iterable[Booking],
    events: Sequence[Event],
    search: str | None = None,
    status: str | None = None,
) -> list[Booking]:
    """Admin booking search over user name, user email and event name."""
    needle = (search or "").lower()
    result = []
    for booking in bookings:
        if status and booking.status.value != status:
            continue
        if needle and not (
            needle in booking.user_name.lower()
            or needle in booking.user_email.lower()
            or needle in event_name(events, booking.event_id).lower()
        ):
            continue
        result.append(booking)
    return result


def booking_status_counts(bookings: Iterable[Booking]) -> dict[str, int]:
    counts = Counter(b.status.value for b in bookings)
    summary = {status.value: counts.get(status.value, 0) for status in BookingStatus}
    summary["total"] = sum(counts.values())
    return summary


@dataclass(frozen=True)
class DashboardSummary:
    """Figures shown on the admin dashboard."""

    total_events: int
    upcoming_events: int
    total_bookings: int
    top_events: list[tuple[str, int]]
    bookings_by_category: dict[str, int]


def dashboard_summary(
    events: Sequence[Event], bookings: Sequence[Booking], today: date
) -> DashboardSummary:
    per_event = Counter(b.event_id for b in bookings)
    # most_common keeps first-seen order among equal counts
    top_events = [
        (event_name(events, event_id), count)
        for event_id, count in per_event.most_common(TOP_EVENTS_LIMIT)
    ]

    by_category: dict[str, int] = {}
    for event in events:
        name = event.category.value.capitalize()
        by_category[name] = by_category.get(name, 0) + per_event.get(event.id, 0)

    return DashboardSummary(
        total_events=len(events),
        upcoming_events=sum(1 for e in events if e.date >= today),
        total_bookings=len(bookings),
        top_events=top_events,
        bookings_by_category=by_category,
    )


def split_user_bookings(bookings: Iterable[Booking]) -> tuple[list[Booking], list[Booking]]:
    """Split into (upcoming, past) for a user's profile."""
    upcoming, past = [], []
    for booking in bookings:
        if booking.status in (BookingStatus.CONFIRMED, BookingStatus.UPCOMING):
            upcoming.append(booking)
        else:
            past.append(booking)
    return upcoming, past


def search_members(members: Iterable[Identity], term: str | None = None) -> list[Identity]:
    needle = (term or "").lower()
    return [
        m
        for m in members
        if needle in m.name.lower() or needle in m.email.lower() or needle in m.role.value
    ]


def category_choices() -> list[tuple[str, str]]:
    return [(c.value, c.label) for c in EventCategory]
