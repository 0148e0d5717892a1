"""lumen_store — an embedded key-value store with per-key TTL.

Values live in memory and every write rewrites one backing file.  Stores are
opened by driver name plus parameters and expose ``set``, ``get`` and
``delete``.
"""

from lumen_store.config import StoreConfig
from lumen_store.exceptions import (
    CorruptStoreError,
    KeyNotFoundError,
    StoreError,
    StoreIOError,
    UnknownDriverError,
)
from lumen_store.factory import StoreFactory, open_store, open_store_from_config
from lumen_store.namespace import NamespacedStore
from lumen_store.stores import FileStore, InMemoryStore, Store

__all__ = [
    "CorruptStoreError",
    "FileStore",
    "InMemoryStore",
    "KeyNotFoundError",
    "NamespacedStore",
    "Store",
    "StoreConfig",
    "StoreError",
    "StoreFactory",
    "StoreIOError",
    "UnknownDriverError",
    "open_store",
    "open_store_from_config",
]
