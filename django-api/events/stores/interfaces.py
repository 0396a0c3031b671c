"""Store interfaces (repository pattern).

Stores must be swappable. Services see durable client storage only as a
string-valued key-value mapping.
"""

from abc import ABC, abstractmethod


class ClientStorage(ABC):
    """Interface for durable, client-scoped key-value storage."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value for key, or None if nothing is stored."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Removing a missing key is not an error."""
        ...
