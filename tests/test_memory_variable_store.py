from __future__ import annotations

from adapters.variable_store.memory_store import InMemoryVariableStore
from ports.variable_store import VariableStore


def test_store_satisfies_port():
    assert isinstance(InMemoryVariableStore(), VariableStore)


def test_lookup_of_unbound_name_is_none():
    store = InMemoryVariableStore()

    assert store.lookup("x") is None
    assert "x" not in store


def test_assign_overwrites_and_keeps_order():
    store = InMemoryVariableStore()

    store.assign("b", 1)
    store.assign("a", 2)
    store.assign("b", 3)

    assert store.names() == ["b", "a"]
    assert store.lookup("b") == 3.0
    assert len(store) == 2


def test_snapshot_is_a_copy():
    store = InMemoryVariableStore({"x": 1})

    snap = store.snapshot()
    snap["x"] = 99

    assert store.lookup("x") == 1.0


def test_clear():
    store = InMemoryVariableStore({"x": 1, "y": 2})

    store.clear()

    assert len(store) == 0
