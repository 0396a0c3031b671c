from events.domain.models import Booking, Event, EventDraft, Identity, Notification
from events.domain.value_objects import (
    BookingId,
    BookingStatus,
    EventCategory,
    EventId,
    Money,
    Role,
    Severity,
)

__all__ = [
    "Event",
    "EventDraft",
    "Booking",
    "Identity",
    "Notification",
    "EventId",
    "BookingId",
    "Money",
    "EventCategory",
    "BookingStatus",
    "Role",
    "Severity",
]
