"""Django-backed implementations of ClientStorage."""

from django.contrib.sessions.backends.base import SessionBase

from events.models import StoredItem
from events.stores.interfaces import ClientStorage


class DjangoClientStorage(ClientStorage):
    """Database-backed storage using the StoredItem model.

    With for_update=True reads lock the row until the surrounding
    transaction ends, so concurrent writers of the same scope serialize.
    """

    def __init__(self, scope: str, for_update: bool = False) -> None:
        self._scope = scope
        self._for_update = for_update

    def get_item(self, key: str) -> str | None:
        queryset = StoredItem.objects.filter(scope=self._scope, key=key)
        if self._for_update:
            queryset = queryset.select_for_update()
        item = queryset.first()
        return item.value if item is not None else None

    def set_item(self, key: str, value: str) -> None:
        item, created = StoredItem.objects.get_or_create(
            scope=self._scope, key=key, defaults={"value": value}
        )
        if not created:
            item.value = value
            item.save(update_fields=["value", "updated_at"])

    def remove_item(self, key: str) -> None:
        # Delete per instance so post_delete receivers fire.
        for item in StoredItem.objects.filter(scope=self._scope, key=key):
            item.delete()


class SessionClientStorage(ClientStorage):
    """Storage scoped to a single client through its Django session."""

    def __init__(self, session: SessionBase) -> None:
        self._session = session

    def get_item(self, key: str) -> str | None:
        return self._session.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._session[key] = value

    def remove_item(self, key: str) -> None:
        self._session.pop(key, None)
