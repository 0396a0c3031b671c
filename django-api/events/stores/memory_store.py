"""In-process ClientStorage, used by tests and one-off scripts."""

from events.stores.interfaces import ClientStorage


class InMemoryClientStorage(ClientStorage):
    """Dictionary-backed storage. Contents are lost with the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._items
