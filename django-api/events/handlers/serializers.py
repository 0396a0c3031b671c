"""Serializers for transforming domain models to API responses and back."""

from rest_framework import serializers

from events.domain import BookingStatus, EventCategory, EventDraft, Money
from events.services import queries

STATUS_CHOICES = [s.value for s in BookingStatus]


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    category = serializers.CharField(source="category.value")
    category_label = serializers.CharField(source="category.label")
    date = serializers.DateField()
    time = serializers.CharField()
    location = serializers.CharField()
    organizer_name = serializers.CharField()
    price = serializers.DecimalField(source="price.amount", max_digits=10, decimal_places=2)
    image = serializers.URLField()
    featured = serializers.BooleanField()


class EventInputSerializer(serializers.Serializer):
    """Validates event form input for create and partial update."""

    name = serializers.CharField(min_length=5)
    description = serializers.CharField(min_length=20)
    category = serializers.ChoiceField(choices=queries.category_choices())
    date = serializers.DateField()
    time = serializers.CharField()
    location = serializers.CharField(min_length=5)
    organizer_name = serializers.CharField(min_length=3)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    image = serializers.URLField()
    featured = serializers.BooleanField(default=False)

    def to_changes(self) -> dict:
        """Validated data converted to domain field values."""
        changes = dict(self.validated_data)
        if "category" in changes:
            changes["category"] = EventCategory(changes["category"])
        if "price" in changes:
            changes["price"] = Money(changes["price"])
        return changes

    def to_draft(self) -> EventDraft:
        return EventDraft(**self.to_changes())


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model.

    Pass ``event_names`` in the context to include the booked event's name.
    """

    id = serializers.CharField(source="id.value")
    event_id = serializers.CharField(source="event_id.value")
    event_name = serializers.SerializerMethodField()
    user_id = serializers.CharField()
    user_name = serializers.CharField()
    user_email = serializers.EmailField()
    date = serializers.DateField()
    status = serializers.CharField(source="status.value")

    def get_event_name(self, booking) -> str | None:
        names = self.context.get("event_names")
        if names is None:
            return None
        return names.get(booking.event_id.value, "Unknown Event")


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=STATUS_CHOICES)

    def to_status(self) -> BookingStatus:
        return BookingStatus(self.validated_data["status"])


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class IdentitySerializer(serializers.Serializer):
    """Serializer for Identity domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField(source="role.value")


class MemberSerializer(IdentitySerializer):
    """Identity with the number of bookings it holds.

    Expects ``booking_counts`` in the context.
    """

    booking_count = serializers.SerializerMethodField()

    def get_booking_count(self, identity) -> int:
        return self.context["booking_counts"].get(identity.id, 0)


class TopEventSerializer(serializers.Serializer):
    name = serializers.CharField()
    bookings = serializers.IntegerField()


class DashboardSerializer(serializers.Serializer):
    total_events = serializers.IntegerField()
    upcoming_events = serializers.IntegerField()
    total_bookings = serializers.IntegerField()
    top_events = serializers.SerializerMethodField()
    bookings_by_category = serializers.DictField(child=serializers.IntegerField())

    def get_top_events(self, summary) -> list:
        rows = [{"name": name, "bookings": count} for name, count in summary.top_events]
        return TopEventSerializer(rows, many=True).data
