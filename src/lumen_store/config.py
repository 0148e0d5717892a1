# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Store selection settings.

A store is chosen by a driver name plus a driver-specific parameter string,
written together as ``"<driver>:<parameters>"`` (e.g.
``"file:/home/me/.lumen-data.yml"``).
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

ENV_VAR = "LUMEN_STORE"
DEFAULT_DRIVER = "file"
DEFAULT_PATH = "~/.lumen-data.yml"


class StoreConfig(BaseModel):
    """Which store driver to open, and with what.

    Attributes:
        driver:     Registered driver name ("file" or "memory").
        parameters: Driver-specific parameters (path to the backing file for
                    the file driver).
        atomic:     File driver only: rename a fully written temp file over
                    the backing file on every sync.
    """

    driver: str = Field(default=DEFAULT_DRIVER, min_length=1)
    parameters: str = DEFAULT_PATH
    atomic: bool = False

    @classmethod
    def parse(cls, spec: str, **overrides: object) -> StoreConfig:
        """Build a config from ``"<driver>:<parameters>"``.

        Only the first ``:`` separates the driver, so parameters may contain
        colons of their own.

        Raises:
            ValueError: *spec* has no ``:`` or an empty driver name.
        """
        driver, sep, parameters = spec.partition(":")
        if not sep or not driver:
            raise ValueError(f"invalid store '{spec}', expected '<driver>:<parameters>'")
        return cls(driver=driver, parameters=parameters, **overrides)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> StoreConfig:
        """Read ``LUMEN_STORE`` from *environ* (default ``os.environ``)."""
        env = os.environ if environ is None else environ
        spec = env.get(ENV_VAR, "")
        if not spec:
            return cls()
        return cls.parse(spec)

    def __str__(self) -> str:
        return f"{self.driver}:{self.parameters}"
