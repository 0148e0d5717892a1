"""Tests for InMemoryStore."""

import pytest

from lumen_store import InMemoryStore, KeyNotFoundError


def test_get_nonexistent(memory_store):
    with pytest.raises(KeyNotFoundError):
        memory_store.get("k")


def test_set_and_get(memory_store):
    memory_store.set("k", "v")
    assert memory_store.get("k") == "v"


def test_overwrite(memory_store):
    memory_store.set("k", "a")
    memory_store.set("k", "b")
    assert memory_store.get("k") == "b"


def test_delete(memory_store):
    memory_store.set("k", "v")
    memory_store.delete("k")
    with pytest.raises(KeyNotFoundError):
        memory_store.get("k")


def test_delete_nonexistent(memory_store):
    memory_store.delete("nope")  # should not raise


def test_ttl_expires(memory_store, clock):
    memory_store.set("k", "v", ttl=10)
    clock.advance(9)
    assert memory_store.get("k") == "v"
    clock.advance(2)
    with pytest.raises(KeyNotFoundError):
        memory_store.get("k")


def test_instances_are_isolated(clock):
    a = InMemoryStore("a", clock=clock)
    b = InMemoryStore("b", clock=clock)
    a.set("k", "1")
    with pytest.raises(KeyNotFoundError):
        b.get("k")
    assert a.driver == "memory"
    assert a.parameters == "a"
