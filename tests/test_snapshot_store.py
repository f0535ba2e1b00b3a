"""Tests for the session-scoped SnapshotStore."""

from __future__ import annotations

from geocoin.core.models import Tile
from geocoin.core.snapshot import CacheSnapshot, SnapshotStore


class TestSnapshotStore:

    def test_load_missing_returns_none(self):
        store = SnapshotStore()
        assert store.load(Tile(0, 0)) is None
        assert Tile(0, 0) not in store

    def test_save_and_load(self):
        store = SnapshotStore()
        snap = CacheSnapshot(Tile(1, 2), ("a",))
        store.save(snap)
        assert store.load(Tile(1, 2)) == snap
        assert Tile(1, 2) in store
        assert len(store) == 1

    def test_save_overwrites(self):
        store = SnapshotStore()
        store.save(CacheSnapshot(Tile(1, 2), ("a",)))
        store.save(CacheSnapshot(Tile(1, 2), ("a", "b")))
        assert store.load(Tile(1, 2)).coins == ("a", "b")
        assert len(store) == 1
        assert store.writes == 2

    def test_identical_save_is_not_a_write(self):
        store = SnapshotStore()
        store.save(CacheSnapshot(Tile(1, 2), ("a",)))
        store.save(CacheSnapshot(Tile(1, 2), ("a",)))
        assert store.writes == 1

    def test_keys_are_structured(self):
        store = SnapshotStore()
        store.save(CacheSnapshot(Tile(1, 23), ("x",)))
        store.save(CacheSnapshot(Tile(12, 3), ("y",)))
        assert store.load(Tile(1, 23)).coins == ("x",)
        assert store.load(Tile(12, 3)).coins == ("y",)

    def test_clear(self):
        store = SnapshotStore()
        store.save(CacheSnapshot(Tile(0, 0), ()))
        store.clear()
        assert len(store) == 0
        assert store.writes == 0
