"""Django signals for notifications and cache invalidation."""

import logging

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import Signal, receiver

from events.domain import Notification, Severity
from events.models import StoredItem

logger = logging.getLogger(__name__)

EVENT_LIST_CACHE_KEY = "events:list"

# Sent with a ``notification`` keyword argument after every store operation.
notification_sent = Signal()


def send_notification(notification: Notification) -> None:
    """Default notifier handed to services."""
    notification_sent.send(sender=Notification, notification=notification)


@receiver(notification_sent)
def log_notification(sender, notification: Notification, **kwargs):
    """Record every user-facing notification in the application log."""
    level = logging.WARNING if notification.severity is Severity.DESTRUCTIVE else logging.INFO
    logger.log(level, "%s: %s", notification.title, notification.description)


@receiver([post_save, post_delete], sender=StoredItem)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate the listing cache once an events snapshot change is committed.

    Deleting earlier would let a concurrent reader re-cache the old snapshot.
    """
    if instance.key == "events":
        transaction.on_commit(lambda: cache.delete(EVENT_LIST_CACHE_KEY))
