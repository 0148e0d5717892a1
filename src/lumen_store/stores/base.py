"""Store protocol — the set/get/delete capability every driver provides."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta


class Store(ABC):
    """Abstract base for all storage drivers.

    A driver is selected by name plus a driver-specific parameter string
    (a filesystem path for ``"file"``).  Callers depend only on ``set``,
    ``get`` and ``delete``; everything else is driver detail.
    """

    driver: str = ""

    @property
    def parameters(self) -> str:
        """The parameter string this store was opened with."""
        return ""

    @abstractmethod
    def set(self, key: str, value: str, ttl: timedelta | float = 0) -> None:
        """Create or replace *key*.  A zero *ttl* means the value never expires."""
        ...

    @abstractmethod
    def get(self, key: str) -> str:
        """Return the value of *key*.

        Raises:
            KeyNotFoundError: *key* is absent or has expired.
        """
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete *key*.  No-op if the key does not exist."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.driver}:{self.parameters})"
