"""Time source for TTL bookkeeping."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class _WallClock:
    # Non-monotonic: operator clock changes move expirations with them.
    __slots__ = ()

    def now(self) -> datetime:
        return datetime.now(UTC)


WALL_CLOCK: Clock = _WallClock()
