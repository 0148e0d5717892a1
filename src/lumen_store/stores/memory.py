"""InMemoryStore — zero-config store for development and testing.  Data is lost on exit."""

from __future__ import annotations

from datetime import timedelta

from lumen_store._internal.clock import WALL_CLOCK, Clock
from lumen_store._internal.rwlock import ReadWriteLock
from lumen_store.exceptions import KeyNotFoundError
from lumen_store.model import Entry
from lumen_store.stores.base import Store


class InMemoryStore(Store):
    """Dict-backed store with the same TTL semantics as :class:`FileStore`."""

    driver = "memory"

    def __init__(self, name: str = "", *, clock: Clock | None = None) -> None:
        self._name = name
        self._clock = clock or WALL_CLOCK
        self._lock = ReadWriteLock()
        self._pairs: dict[str, Entry] = {}

    @property
    def parameters(self) -> str:
        return self._name

    def set(self, key: str, value: str, ttl: timedelta | float = 0) -> None:
        entry = Entry.for_ttl(value, ttl, self._clock.now())
        with self._lock.write():
            self._pairs[key] = entry

    def get(self, key: str) -> str:
        with self._lock.read():
            entry = self._pairs.get(key)
            if entry is None or entry.expired(self._clock.now()):
                raise KeyNotFoundError(key)
            return entry.value

    def delete(self, key: str) -> None:
        with self._lock.write():
            self._pairs.pop(key, None)
