"""Shared test fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from lumen_store import FileStore, InMemoryStore


class FakeClock:
    def __init__(self, start: datetime | None = None):
        self._now = start or datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / "lumen-data.yml")


@pytest.fixture
def file_store(store_path, clock):
    return FileStore(store_path, clock=clock)


@pytest.fixture
def memory_store(clock):
    return InMemoryStore(clock=clock)
