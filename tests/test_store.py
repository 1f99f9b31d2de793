# tests/test_store.py
import dataclasses
import pytest

from dictidx.store import IndexStore, Sense
from dictidx.loader import build_store


def test_add_and_get_keeps_insertion_order():
    store = IndexStore()
    store.add("cat", 16, 5)
    store.add("dog", 100, 7)
    store.add("cat", 32, 3)
    assert store.get("cat") == [Sense(16, 5), Sense(32, 3)]
    assert store.get("dog") == [Sense(100, 7)]


def test_unknown_key_returns_empty_without_creating_entry():
    store = IndexStore()
    assert store.get("missing") == []
    assert "missing" not in store
    assert len(store) == 0


def test_duplicates_are_not_merged():
    store = IndexStore()
    store.add("bank", 1, 1)
    store.add("bank", 1, 1)
    assert store.get("bank") == [Sense(1, 1), Sense(1, 1)]
    assert store.sense_count() == 2
    assert len(store) == 1


def test_sense_is_immutable():
    s = Sense(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.offset = 5


def test_get_returns_a_copy():
    store = IndexStore()
    store.add("a", 1, 1)
    store.get("a").append(Sense(9, 9))
    assert store.get("a") == [Sense(1, 1)]


def test_from_records():
    store = IndexStore.from_records([("x", 1, 2), ("y", 3, 4), ("x", 5, 6)])
    assert sorted(store.keys()) == ["x", "y"]
    assert dict(store.items())["x"] == [Sense(1, 2), Sense(5, 6)]
    assert store.map["y"] == [Sense(3, 4)]


def test_no_empty_entries_after_build():
    store = IndexStore.from_records([("a", 0, 1), ("b", 1, 1)])
    assert all(senses for senses in store.map.values())


def test_build_store_cat_scenario():
    data = (b"cat\x00" + bytes.fromhex("0000001000000005")
            + b"cat\x00" + bytes.fromhex("0000002000000003"))
    store = build_store(data, 4)
    assert store.get("cat") == [Sense(offset=16, size=5), Sense(offset=32, size=3)]
    assert len(store) == 1


def test_build_store_empty_input():
    store = build_store(b"", 8)
    assert len(store) == 0
    assert store.sense_count() == 0


def test_empty_key_stored_and_retrievable():
    store = build_store(b"\x00" + bytes(8), 4)
    assert store.get("") == [Sense(0, 0)]


def test_repr():
    store = IndexStore.from_records([("a", 0, 1), ("a", 1, 1)])
    assert repr(store) == "IndexStore(1 headwords, 2 senses)"
