from events.stores.interfaces import ClientStorage
from events.stores.memory_store import InMemoryClientStorage

__all__ = ["ClientStorage", "InMemoryClientStorage"]
