"""Storage drivers implementing the set/get/delete store protocol."""

from lumen_store.stores.base import Store
from lumen_store.stores.file import FileStore
from lumen_store.stores.memory import InMemoryStore

__all__ = ["FileStore", "InMemoryStore", "Store"]
