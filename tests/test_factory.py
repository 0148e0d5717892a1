"""Tests for the store factory."""

import os

import pytest

from lumen_store import (
    CorruptStoreError,
    FileStore,
    InMemoryStore,
    Store,
    StoreConfig,
    StoreFactory,
    UnknownDriverError,
    open_store,
    open_store_from_config,
)


class DummyStore(Store):
    driver = "dummy"

    def __init__(self, parameters):
        self._parameters = parameters
        self.pairs = {}

    @property
    def parameters(self):
        return self._parameters

    def set(self, key, value, ttl=0):
        self.pairs[key] = value

    def get(self, key):
        return self.pairs[key]

    def delete(self, key):
        self.pairs.pop(key, None)


@pytest.fixture
def dummy_driver():
    StoreFactory.register("dummy", lambda parameters, **options: DummyStore(parameters))
    yield
    StoreFactory.unregister("dummy")


def test_builtin_drivers_registered():
    drivers = StoreFactory.registered_drivers()
    assert "file" in drivers
    assert "memory" in drivers


def test_open_file_store(store_path, clock):
    store = open_store("file", store_path, clock=clock)
    assert isinstance(store, FileStore)
    assert store.parameters == store_path
    store.set("k", "v")
    assert store.get("k") == "v"


def test_file_path_expands_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    store = open_store("file", "~/data.yml")
    assert store.parameters == os.path.join(str(tmp_path), "data.yml")
    assert os.path.exists(store.parameters)


def test_open_memory_store():
    store = open_store("memory", "scratch", atomic=True)
    assert isinstance(store, InMemoryStore)
    assert repr(store) == "InMemoryStore(memory:scratch)"


def test_unknown_driver():
    with pytest.raises(UnknownDriverError) as exc_info:
        open_store("redis", "localhost:6379")
    assert exc_info.value.driver == "redis"
    assert "file" in str(exc_info.value)


def test_driver_errors_propagate(store_path):
    with open(store_path, "w") as fh:
        fh.write("garbage")
    with pytest.raises(CorruptStoreError):
        open_store("file", store_path)


def test_register_custom_driver(dummy_driver):
    store = open_store("dummy", "anything")
    assert isinstance(store, DummyStore)
    store.set("k", "v")
    assert store.get("k") == "v"


@pytest.mark.parametrize("name", ["", "bad:name"])
def test_register_rejects_bad_names(name):
    with pytest.raises(ValueError):
        StoreFactory.register(name, lambda parameters, **options: DummyStore(parameters))


def test_open_from_config(store_path):
    config = StoreConfig.parse(f"file:{store_path}", atomic=True)
    store = open_store_from_config(config)
    assert isinstance(store, FileStore)
    store.set("k", "v")
    assert not os.path.exists(store_path + ".tmp")
