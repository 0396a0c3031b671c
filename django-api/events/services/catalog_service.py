"""Catalog service - all event and booking business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors

Both collections are loaded when the service is constructed and written back
in full after every mutation. A missing storage key means the catalog was
never initialized and is seeded; a stored empty list is kept empty.
"""

import dataclasses
import logging
from collections.abc import Callable
from datetime import date
from decimal import Decimal

from django.utils import timezone

from events.domain import (
    Booking,
    BookingId,
    BookingStatus,
    Event,
    EventCategory,
    EventDraft,
    EventId,
    Money,
    Notification,
    Severity,
)
from events.domain.errors import (
    AlreadyBookedError,
    BookingNotFoundError,
    EventNotFoundError,
    InvalidEventUpdateError,
)
from events.domain.models import EDITABLE_EVENT_FIELDS
from events.services.seed import sample_bookings, sample_events
from events.signals import send_notification
from events.stores import codec
from events.stores.interfaces import ClientStorage

logger = logging.getLogger(__name__)

EVENTS_KEY = "events"
BOOKINGS_KEY = "bookings"


class CatalogService:
    """Service owning the event and booking collections."""

    def __init__(
        self,
        storage: ClientStorage,
        notifier: Callable[[Notification], None] = send_notification,
        seed: bool = True,
    ) -> None:
        self._storage = storage
        self._notify = notifier
        self._events: list[Event] = self._load(
            EVENTS_KEY, codec.load_events, codec.dump_events, sample_events if seed else list
        )
        self._bookings: list[Booking] = self._load(
            BOOKINGS_KEY, codec.load_bookings, codec.dump_bookings, sample_bookings if seed else list
        )

    @property
    def events(self) -> list[Event]:
        return list(self._events)

    @property
    def bookings(self) -> list[Booking]:
        return list(self._bookings)

    def add_event(self, draft: EventDraft) -> Event:
        """Create an event with a newly generated identifier."""
        event = Event.from_draft(EventId.generate(), draft)
        self._events.append(event)
        self._save_events()
        self._notify(
            Notification(
                title="Event Added",
                description=f"{event.name} has been successfully added.",
            )
        )
        return event

    def update_event(self, event_id: str, **changes) -> Event:
        """Merge changes into an existing event. Unlisted fields keep their value.

        Raises:
            InvalidEventUpdateError: If changes name the id or an unknown field,
                or carry a value of the wrong type.
            EventNotFoundError: If the event does not exist.
        """
        invalid = [name for name in changes if name not in EDITABLE_EVENT_FIELDS]
        if invalid:
            raise InvalidEventUpdateError(invalid)

        coerced = {}
        for name, value in changes.items():
            try:
                coerced[name] = _coerce_event_field(name, value)
            except (TypeError, ValueError) as exc:
                raise InvalidEventUpdateError([name]) from exc

        index = self._event_index(event_id)
        updated = dataclasses.replace(self._events[index], **coerced)
        candidate = list(self._events)
        candidate[index] = updated
        # Storage is written before memory so a failed write leaves both unchanged.
        self._storage.set_item(EVENTS_KEY, codec.dump_events(candidate))
        self._events = candidate
        self._notify(
            Notification(
                title="Event Updated",
                description="The event has been successfully updated.",
            )
        )
        return updated

    def delete_event(self, event_id: str) -> list[Booking]:
        """Delete an event and every booking that references it.

        Returns the bookings removed by the cascade.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        index = self._event_index(event_id)
        removed_event = self._events.pop(index)
        removed = [b for b in self._bookings if b.event_id == removed_event.id]
        self._bookings = [b for b in self._bookings if b.event_id != removed_event.id]
        self._save_events()
        self._save_bookings()
        logger.info("Deleted event %s and %d booking(s)", event_id, len(removed))
        self._notify(
            Notification(
                title="Event Deleted",
                description="The event has been successfully deleted.",
            )
        )
        return removed

    def book_event(self, event_id: str, user_id: str, user_name: str, user_email: str) -> Booking:
        """Create a confirmed booking for a user.

        Raises:
            EventNotFoundError: If the event does not exist.
            AlreadyBookedError: If the user already holds a booking for the event.
        """
        event = self.get_event_by_id(event_id)
        if event is None:
            self._notify(
                Notification(
                    title="Booking Failed",
                    description="Event not found.",
                    severity=Severity.DESTRUCTIVE,
                )
            )
            raise EventNotFoundError(event_id)

        if any(b.event_id == event.id and b.user_id == user_id for b in self._bookings):
            self._notify(
                Notification(
                    title="Already Booked",
                    description="You have already booked this event.",
                    severity=Severity.DESTRUCTIVE,
                )
            )
            raise AlreadyBookedError(event_id, user_id)

        booking = Booking(
            id=BookingId.generate(),
            event_id=event.id,
            user_id=user_id,
            user_name=user_name,
            user_email=user_email,
            date=timezone.localdate(),
            status=BookingStatus.CONFIRMED,
        )
        self._bookings.append(booking)
        self._save_bookings()
        self._notify(
            Notification(
                title="Booking Confirmed",
                description=f"You have successfully booked {event.name}.",
            )
        )
        return booking

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking:
        """Overwrite a booking's status. Any transition is allowed.

        Raises:
            BookingNotFoundError: If the booking does not exist.
        """
        for index, booking in enumerate(self._bookings):
            if booking.id.value == booking_id:
                break
        else:
            raise BookingNotFoundError(booking_id)

        updated = dataclasses.replace(booking, status=status)
        self._bookings[index] = updated
        self._save_bookings()
        self._notify(
            Notification(
                title="Booking Updated",
                description=f"Booking status changed to {status.value}.",
            )
        )
        return updated

    def get_user_bookings(self, user_id: str) -> list[Booking]:
        return [b for b in self._bookings if b.user_id == user_id]

    def get_event_bookings(self, event_id: str) -> list[Booking]:
        return [b for b in self._bookings if b.event_id.value == event_id]

    def get_event_by_id(self, event_id: str) -> Event | None:
        for event in self._events:
            if event.id.value == event_id:
                return event
        return None

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self.get_event_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _event_index(self, event_id: str) -> int:
        for index, event in enumerate(self._events):
            if event.id.value == event_id:
                return index
        raise EventNotFoundError(event_id)

    def _load(
        self,
        key: str,
        load: Callable[[str], list],
        dump: Callable[[list], str],
        default: Callable[[], list],
    ) -> list:
        raw = self._storage.get_item(key)
        if raw is not None:
            try:
                return load(raw)
            except codec.SnapshotDecodeError:
                logger.warning("Discarding unreadable %s snapshot", key, exc_info=True)
                self._storage.remove_item(key)

        items = default()
        self._storage.set_item(key, dump(items))
        return items

    def _save_events(self) -> None:
        self._storage.set_item(EVENTS_KEY, codec.dump_events(self._events))

    def _save_bookings(self) -> None:
        self._storage.set_item(BOOKINGS_KEY, codec.dump_bookings(self._bookings))


def _coerce_event_field(name: str, value: object) -> object:
    """Convert a raw update value to the domain type of the named field.

    Raises TypeError or ValueError when the value cannot be converted.
    """
    if name == "category":
        return value if isinstance(value, EventCategory) else EventCategory(value)
    if name == "price":
        if isinstance(value, Money):
            return value
        if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
            raise TypeError(f"Invalid price: {value!r}")
        return Money.of(value)
    if name == "date":
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Invalid date: {value!r}")
        return date.fromisoformat(value)
    if name == "featured":
        if not isinstance(value, bool):
            raise TypeError(f"Invalid featured flag: {value!r}")
        return value
    if not isinstance(value, str):
        raise TypeError(f"Invalid {name}: {value!r}")
    return value
