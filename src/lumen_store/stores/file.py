"""FileStore — durable store that rewrites a single JSON file on every mutation."""

from __future__ import annotations

import logging
from datetime import timedelta

from lumen_store._internal.clock import WALL_CLOCK, Clock
from lumen_store._internal.rwlock import ReadWriteLock
from lumen_store.exceptions import KeyNotFoundError
from lumen_store.model import Entry
from lumen_store.persistence import load_or_create, sync
from lumen_store.stores.base import Store

logger = logging.getLogger(__name__)


class FileStore(Store):
    """Persistent store backed by one file holding the whole dataset.

    The dataset is loaded (or created) once at construction.  ``set`` and
    ``delete`` hold the write lock across mutation, ``seq`` bump and file
    sync, so each call is atomic with respect to every other call on this
    instance.  ``get`` holds the read lock and never touches the file.

    Expired entries are hidden from ``get`` but stay in the file until they
    are overwritten or deleted.

    Only one ``FileStore`` (in one process) should own a given path; no
    file locking is attempted.

    Parameters:
        path:   Backing file.  Created with mode ``0600`` if missing.
        clock:  Injectable clock for testing.
        atomic: Write to a temp file and rename it over *path* on each sync.

    Raises:
        CorruptStoreError: *path* exists but its content is not a dataset.
        StoreIOError: *path* cannot be read, or a new file cannot be created.
    """

    driver = "file"

    def __init__(self, path: str, *, clock: Clock | None = None, atomic: bool = False) -> None:
        self._path = path
        self._clock = clock or WALL_CLOCK
        self._atomic = atomic
        self._lock = ReadWriteLock()
        self._data = load_or_create(path, atomic=atomic)

    @property
    def parameters(self) -> str:
        return self._path

    @property
    def path(self) -> str:
        return self._path

    @property
    def seq(self) -> int:
        with self._lock.read():
            return self._data.seq

    @property
    def version(self) -> str:
        return self._data.version

    def _sync(self) -> None:
        # Caller must hold the write lock.
        sync(self._data, self._path, atomic=self._atomic)

    # ── Store protocol ───────────────────────────────────────

    def set(self, key: str, value: str, ttl: timedelta | float = 0) -> None:
        entry = Entry.for_ttl(value, ttl, self._clock.now())
        with self._lock.write():
            logger.debug(
                "writing val: %s (ttl: %s)",
                value,
                ttl,
                extra={"store": self.driver, "method": "set", "key": key},
            )
            self._data.put(key, entry)
            self._data.bump()
            self._sync()

    def get(self, key: str) -> str:
        log_extra = {"store": self.driver, "method": "get", "key": key}
        with self._lock.read():
            entry = self._data.lookup(key)
            now = self._clock.now()
            if entry is None or entry.expired(now):
                logger.debug("not found, expired: %s", entry is not None, extra=log_extra)
                raise KeyNotFoundError(key)
            logger.debug(
                "got val: %s (expires: %s, expires_on: %s)",
                entry.value,
                not entry.no_expire,
                entry.expires_on.isoformat(),
                extra=log_extra,
            )
            return entry.value

    def delete(self, key: str) -> None:
        with self._lock.write():
            logger.debug("deleting", extra={"store": self.driver, "method": "delete", "key": key})
            self._data.remove(key)
            self._data.bump()
            self._sync()
