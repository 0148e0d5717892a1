"""Custom exceptions for the lumen_store package."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all store errors.

    ``operation`` names the step that failed (``"load"``, ``"sync"``,
    ``"get"``, ``"open"``) so callers can react without parsing messages.
    """

    operation = "store"

    def __init__(self, detail: str = "", *, operation: str | None = None) -> None:
        if operation is not None:
            self.operation = operation
        self.detail = detail
        super().__init__(detail)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.operation} failed: {self.detail}"
        return f"{self.operation} failed"


class CorruptStoreError(StoreError):
    """An existing backing file does not hold a valid dataset."""

    operation = "load"

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        super().__init__(f"invalid content in {path}" + (f": {detail}" if detail else ""))


class StoreIOError(StoreError):
    """The backing file could not be read (``load``) or written (``sync``)."""

    def __init__(self, operation: str, path: str, detail: str = "") -> None:
        self.path = path
        super().__init__(f"{path}: {detail}" if detail else path, operation=operation)


class KeyNotFoundError(StoreError):
    """``get`` on a key that is absent or has expired; the two are indistinguishable."""

    operation = "get"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"not found: {key}")


class UnknownDriverError(StoreError):
    """No store driver is registered under the requested name."""

    operation = "open"

    def __init__(self, driver: str, available: list[str] | None = None) -> None:
        self.driver = driver
        detail = f"unknown driver '{driver}'"
        if available:
            detail += f" (available: {', '.join(sorted(available))})"
        super().__init__(detail)
