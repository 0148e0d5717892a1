# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Store factory for opening drivers by name.

Uses the Registry pattern to map driver names to builders, so new backends
can be plugged in without touching callers.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import Any, ClassVar

from lumen_store.config import StoreConfig
from lumen_store.exceptions import UnknownDriverError
from lumen_store.stores import FileStore, InMemoryStore, Store

logger = logging.getLogger(__name__)

StoreBuilder = Callable[..., Store]


def _open_file(parameters: str, **options: Any) -> Store:
    return FileStore(os.path.expanduser(parameters), **options)


def _open_memory(parameters: str, **options: Any) -> Store:
    options.pop("atomic", None)
    return InMemoryStore(parameters, **options)


class StoreFactory:
    """Creates store instances from a driver name and parameter string.

    Builders are registered at class level and take
    ``(parameters, **options)``; options such as ``clock`` or ``atomic`` are
    passed through.

    Example:
        store = StoreFactory.create("file", "/tmp/data.yml")
        store.set("greeting", "hello")
    """

    _registry: ClassVar[dict[str, StoreBuilder]] = {
        "file": _open_file,
        "memory": _open_memory,
    }

    @classmethod
    def register(cls, driver: str, builder: StoreBuilder) -> None:
        """Register a builder for *driver*, replacing any existing one.

        Raises:
            ValueError: *driver* is empty or contains ``:``.
        """
        if not driver or ":" in driver:
            raise ValueError(f"invalid driver name: '{driver}'")
        cls._registry[driver] = builder

    @classmethod
    def unregister(cls, driver: str) -> None:
        cls._registry.pop(driver, None)

    @classmethod
    def registered_drivers(cls) -> list[str]:
        """Return list of registered driver names."""
        return list(cls._registry.keys())

    @classmethod
    def create(cls, driver: str, parameters: str, **options: Any) -> Store:
        """Open a store.

        Raises:
            UnknownDriverError: No builder is registered for *driver*.
            CorruptStoreError, StoreIOError: The driver failed to open.
        """
        builder = cls._registry.get(driver)
        if builder is None:
            raise UnknownDriverError(driver, cls.registered_drivers())

        logger.debug(
            "selecting store driver: %s params: %s",
            driver,
            parameters,
            extra={"store": driver, "method": "open"},
        )
        return builder(parameters, **options)


def open_store(driver: str, parameters: str, **options: Any) -> Store:
    """Shorthand for :meth:`StoreFactory.create`."""
    return StoreFactory.create(driver, parameters, **options)


def open_store_from_config(config: StoreConfig, **options: Any) -> Store:
    if config.driver == "file":
        options.setdefault("atomic", config.atomic)
    return StoreFactory.create(config.driver, config.parameters, **options)
