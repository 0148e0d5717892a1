"""NamespacedStore — a key-prefixing view so several tools can share one store."""

from __future__ import annotations

import logging
from datetime import timedelta

from lumen_store.stores.base import Store

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"


class NamespacedStore:
    """Reads and writes ``"<namespace>:<key>"`` in an underlying :class:`Store`.

    Variables set through the view never expire unless a *ttl* is given.
    """

    def __init__(self, store: Store, namespace: str = DEFAULT_NAMESPACE) -> None:
        if not namespace:
            raise ValueError("namespace must not be empty")
        self._store = store
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def store(self) -> Store:
        return self._store

    def qualify(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def set_var(self, key: str, value: str, ttl: timedelta | float = 0) -> None:
        key = self.qualify(key)
        logger.debug("setting %s: %s", key, value, extra={"store": "namespace", "method": "set_var"})
        self._store.set(key, value, ttl)

    def get_var(self, key: str) -> str:
        key = self.qualify(key)
        logger.debug("getting %s", key, extra={"store": "namespace", "method": "get_var"})
        return self._store.get(key)

    def del_var(self, key: str) -> None:
        key = self.qualify(key)
        logger.debug("deleting %s", key, extra={"store": "namespace", "method": "del_var"})
        self._store.delete(key)
