"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Self
from uuid import uuid4


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("EventId cannot be empty")

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4().hex)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4().hex)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def of(cls, value: Decimal | int | float | str) -> Self:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid money amount: {value!r}") from exc
        return cls(amount=amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


class EventCategory(Enum):
    """Fixed set of event categories."""

    MUSIC = "music"
    TECH = "tech"
    WORKSHOP = "workshop"
    BUSINESS = "business"
    FITNESS = "fitness"
    FOOD = "food"
    ART = "art"
    COMMUNITY = "community"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    EventCategory.MUSIC: "Music",
    EventCategory.TECH: "Technology",
    EventCategory.WORKSHOP: "Workshop",
    EventCategory.BUSINESS: "Business",
    EventCategory.FITNESS: "Fitness",
    EventCategory.FOOD: "Food & Drink",
    EventCategory.ART: "Arts",
    EventCategory.COMMUNITY: "Community",
}


class BookingStatus(Enum):
    """Booking lifecycle status. Transitions between any two are allowed."""

    CONFIRMED = "confirmed"
    UPCOMING = "upcoming"
    ATTENDED = "attended"
    CANCELLED = "cancelled"


class Role(Enum):
    """Role of an authenticated identity."""

    USER = "user"
    ADMIN = "admin"


class Severity(Enum):
    """Severity of a user-facing notification."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
