"""Demonstration dataset used when storage has never been initialized."""

from datetime import date

from events.domain import (
    Booking,
    BookingId,
    BookingStatus,
    Event,
    EventCategory,
    EventId,
    Money,
)


def sample_events() -> list[Event]:
    return [
        Event(
            id=EventId("1"),
            name="Tech Summit 2025",
            description=(
                "Join us for the biggest tech summit of the year featuring keynotes "
                "from industry leaders and hands-on workshops."
            ),
            category=EventCategory.TECH,
            date=date(2025, 7, 15),
            time="09:00 AM",
            location="Convention Center, San Francisco",
            organizer_name="Tech Innovators Association",
            price=Money.of("149.99"),
            image="https://images.unsplash.com/photo-1649972904349-6e44c42644a7?w=800&auto=format&fit=crop",
            featured=True,
        ),
        Event(
            id=EventId("2"),
            name="Music Festival Weekend",
            description=(
                "Three days of amazing performances from top artists across multiple "
                "stages in a beautiful outdoor setting."
            ),
            category=EventCategory.MUSIC,
            date=date(2025, 6, 10),
            time="04:00 PM",
            location="Central Park, New York",
            organizer_name="Harmony Productions",
            price=Money.of("89.99"),
            image="https://images.unsplash.com/photo-1501854140801-50d01698950b?w=800&auto=format&fit=crop",
        ),
        Event(
            id=EventId("3"),
            name="Startup Workshop",
            description=(
                "Learn essential skills for launching your startup from successful "
                "entrepreneurs and venture capitalists."
            ),
            category=EventCategory.WORKSHOP,
            date=date(2025, 8, 20),
            time="10:00 AM",
            location="Innovation Hub, Austin",
            organizer_name="Entrepreneur Network",
            price=Money.of("49.99"),
            image="https://images.unsplash.com/photo-1488590528505-98d2b5aba04b?w=800&auto=format&fit=crop",
            featured=True,
        ),
        Event(
            id=EventId("4"),
            name="Business Conference",
            description="Connect with industry leaders and peers at this premier business networking event.",
            category=EventCategory.BUSINESS,
            date=date(2025, 9, 5),
            time="08:00 AM",
            location="Grand Hotel, Chicago",
            organizer_name="Business Leadership Council",
            price=Money.of("199.99"),
            image="https://images.unsplash.com/photo-1461749280684-dccba630e2f6?w=800&auto=format&fit=crop",
        ),
        Event(
            id=EventId("5"),
            name="Fitness Expo",
            description=(
                "Discover the latest fitness trends, products, and techniques with "
                "demonstrations from fitness experts."
            ),
            category=EventCategory.FITNESS,
            date=date(2025, 5, 30),
            time="09:00 AM",
            location="Sports Complex, Miami",
            organizer_name="Health & Fitness Association",
            price=Money.of("29.99"),
            image="https://images.unsplash.com/photo-1581091226825-a6a2a5aee158?w=800&auto=format&fit=crop",
        ),
        Event(
            id=EventId("6"),
            name="Culinary Festival",
            description=(
                "Taste extraordinary dishes prepared by renowned chefs and discover "
                "new culinary trends."
            ),
            category=EventCategory.FOOD,
            date=date(2025, 10, 10),
            time="11:00 AM",
            location="Waterfront Plaza, Seattle",
            organizer_name="Gourmet Guild",
            price=Money.of("75.00"),
            image="https://images.unsplash.com/photo-1526374965328-7f61d4dc18c5?w=800&auto=format&fit=crop",
        ),
    ]


def sample_bookings() -> list[Booking]:
    return [
        Booking(
            id=BookingId("1"),
            event_id=EventId("1"),
            user_id="2",
            user_name="John Doe",
            user_email="user@eventease.com",
            date=date(2025, 5, 20),
            status=BookingStatus.UPCOMING,
        ),
        Booking(
            id=BookingId("2"),
            event_id=EventId("3"),
            user_id="2",
            user_name="John Doe",
            user_email="user@eventease.com",
            date=date(2025, 5, 19),
            status=BookingStatus.CONFIRMED,
        ),
    ]
