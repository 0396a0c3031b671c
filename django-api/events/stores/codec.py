"""JSON snapshots of domain collections as written to client storage."""

import json
from datetime import date
from typing import Any

from django.core.serializers.json import DjangoJSONEncoder

from events.domain import (
    Booking,
    BookingId,
    BookingStatus,
    Event,
    EventCategory,
    EventId,
    Identity,
    Money,
    Role,
)


class SnapshotDecodeError(ValueError):
    """Raised when a stored snapshot cannot be turned back into domain objects."""


def _dumps(payload: Any) -> str:
    return json.dumps(payload, cls=DjangoJSONEncoder)


def _loads(raw: str) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, json.JSONDecodeError) as exc:
        raise SnapshotDecodeError(f"Malformed JSON: {exc}") from exc


def _load_list(raw: str) -> list[dict[str, Any]]:
    payload = _loads(raw)
    if not isinstance(payload, list) or not all(isinstance(row, dict) for row in payload):
        raise SnapshotDecodeError("Expected a list of objects")
    return payload


def event_to_dict(event: Event) -> dict[str, Any]:
    return {
        "id": event.id.value,
        "name": event.name,
        "description": event.description,
        "category": event.category.value,
        "date": event.date,
        "time": event.time,
        "location": event.location,
        "organizer_name": event.organizer_name,
        "price": event.price.amount,
        "image": event.image,
        "featured": event.featured,
    }


def event_from_dict(row: dict[str, Any]) -> Event:
    return Event(
        id=EventId(str(row["id"])),
        name=row["name"],
        description=row["description"],
        category=EventCategory(row["category"]),
        date=date.fromisoformat(row["date"]),
        time=row["time"],
        location=row["location"],
        organizer_name=row["organizer_name"],
        price=Money.of(row["price"]),
        image=row["image"],
        featured=bool(row.get("featured", False)),
    )


def booking_to_dict(booking: Booking) -> dict[str, Any]:
    return {
        "id": booking.id.value,
        "event_id": booking.event_id.value,
        "user_id": booking.user_id,
        "user_name": booking.user_name,
        "user_email": booking.user_email,
        "date": booking.date,
        "status": booking.status.value,
    }


def booking_from_dict(row: dict[str, Any]) -> Booking:
    return Booking(
        id=BookingId(str(row["id"])),
        event_id=EventId(str(row["event_id"])),
        user_id=str(row["user_id"]),
        user_name=row["user_name"],
        user_email=row["user_email"],
        date=date.fromisoformat(row["date"]),
        status=BookingStatus(row["status"]),
    )


def dump_events(events: list[Event]) -> str:
    return _dumps([event_to_dict(event) for event in events])


def load_events(raw: str) -> list[Event]:
    try:
        return [event_from_dict(row) for row in _load_list(raw)]
    except SnapshotDecodeError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise SnapshotDecodeError(f"Invalid event record: {exc}") from exc


def dump_bookings(bookings: list[Booking]) -> str:
    return _dumps([booking_to_dict(booking) for booking in bookings])


def load_bookings(raw: str) -> list[Booking]:
    try:
        return [booking_from_dict(row) for row in _load_list(raw)]
    except SnapshotDecodeError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise SnapshotDecodeError(f"Invalid booking record: {exc}") from exc


def dump_identity(identity: Identity) -> str:
    return _dumps(
        {
            "id": identity.id,
            "name": identity.name,
            "email": identity.email,
            "role": identity.role.value,
        }
    )


def load_identity(raw: str) -> Identity:
    payload = _loads(raw)
    if not isinstance(payload, dict):
        raise SnapshotDecodeError("Expected an object")
    try:
        return Identity(
            id=str(payload["id"]),
            name=payload["name"],
            email=payload["email"],
            role=Role(payload["role"]),
        )
    except (KeyError, ValueError) as exc:
        raise SnapshotDecodeError(f"Invalid identity record: {exc}") from exc
