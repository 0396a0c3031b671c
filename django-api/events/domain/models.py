"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
The Django ORM model in events/models.py only stores serialized snapshots.
"""

from dataclasses import dataclass, fields
from datetime import date

from events.domain.value_objects import (
    BookingId,
    BookingStatus,
    EventCategory,
    EventId,
    Money,
    Role,
    Severity,
)


@dataclass(frozen=True)
class EventDraft:
    """Everything needed to create an Event except its identifier."""

    name: str
    description: str
    category: EventCategory
    date: date
    time: str
    location: str
    organizer_name: str
    price: Money
    image: str
    featured: bool = False


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    category: EventCategory
    date: date
    time: str
    location: str
    organizer_name: str
    price: Money
    image: str
    featured: bool = False

    @classmethod
    def from_draft(cls, event_id: EventId, draft: EventDraft) -> "Event":
        values = {f.name: getattr(draft, f.name) for f in fields(draft)}
        return cls(id=event_id, **values)


EDITABLE_EVENT_FIELDS = frozenset(f.name for f in fields(EventDraft))


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking.

    user_name and user_email are captured when the booking is made and are
    not kept in sync with later profile changes.
    """

    id: BookingId
    event_id: EventId
    user_id: str
    user_name: str
    user_email: str
    date: date
    status: BookingStatus


@dataclass(frozen=True)
class Identity:
    """The authenticated user of a client session."""

    id: str
    name: str
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class Notification:
    """Short-lived user-facing message emitted after an operation."""

    title: str
    description: str
    severity: Severity = Severity.DEFAULT
