"""Visibility window: keeps exactly the caches near the player instantiated."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from geocoin.core.cache import Cache
from geocoin.core.grid import TileGrid
from geocoin.core.models import LatLng, Tile
from geocoin.core.snapshot import SnapshotStore
from geocoin.systems.oracle import CacheOracle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VisibilityDelta:
    """Tiles that left and entered the window during one update."""

    evicted: tuple[Tile, ...] = ()
    admitted: tuple[Tile, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.evicted or self.admitted)


class VisibilityWindow:
    """Owns the active cache map and the snapshot store for one session.

    A tile is visible when it lies inside the neighborhood square around the
    player's tile and its center is within the radius. Caches that stop being
    visible are snapshotted and dropped; caches that become visible are rebuilt
    from their snapshot, or generated fresh if never seen.
    """

    __slots__ = ("_grid", "_oracle", "_store", "_neighborhood", "_radius_m", "_active")

    def __init__(
        self,
        grid: TileGrid,
        oracle: CacheOracle,
        store: SnapshotStore,
        neighborhood_size: int,
        radius_m: float,
    ) -> None:
        self._grid = grid
        self._oracle = oracle
        self._store = store
        self._neighborhood = neighborhood_size
        self._radius_m = radius_m
        self._active: dict[Tile, Cache] = {}

    @property
    def store(self) -> SnapshotStore:
        return self._store

    @property
    def radius_m(self) -> float:
        return self._radius_m

    # -- queries --

    def in_range(self, tile: Tile, position: LatLng) -> bool:
        return position.distance_to(self._grid.tile_center(tile)) <= self._radius_m

    def in_neighborhood(self, tile: Tile, position: LatLng) -> bool:
        center = self._grid.tile_of(position)
        n = self._neighborhood
        return abs(tile.i - center.i) <= n and abs(tile.j - center.j) <= n

    def is_visible(self, tile: Tile, position: LatLng) -> bool:
        """Window membership test shared by eviction and admission."""
        return self.in_neighborhood(tile, position) and self.in_range(tile, position)

    def is_active(self, tile: Tile) -> bool:
        return tile in self._active

    def get(self, tile: Tile) -> Cache | None:
        return self._active.get(tile)

    def active_tiles(self) -> list[Tile]:
        return sorted(self._active)

    def active_caches(self) -> list[Cache]:
        return [self._active[t] for t in sorted(self._active)]

    def __len__(self) -> int:
        return len(self._active)

    # -- updates --

    def update(self, position: LatLng) -> VisibilityDelta:
        """Re-fit the window around *position*; eviction runs before admission."""
        evicted = self._evict(position)
        admitted = self._admit(position)
        delta = VisibilityDelta(evicted=tuple(evicted), admitted=tuple(admitted))
        if delta.changed:
            logger.debug(
                "Window at %.6f,%.6f: -%d +%d (%d active)",
                position.lat, position.lng, len(evicted), len(admitted), len(self._active),
            )
        return delta

    def record(self, cache: Cache) -> None:
        """Persist an active cache's current state after a mutation."""
        self._store.save(cache.snapshot())

    def clear(self) -> None:
        self._active.clear()

    def _evict(self, position: LatLng) -> list[Tile]:
        evicted: list[Tile] = []
        for tile in sorted(self._active):
            if self.is_visible(tile, position):
                continue
            cache = self._active.pop(tile)
            self._store.save(cache.snapshot())
            evicted.append(tile)
        return evicted

    def _admit(self, position: LatLng) -> list[Tile]:
        center = self._grid.tile_of(position)
        n = self._neighborhood
        admitted: list[Tile] = []
        for d_i in range(-n, n + 1):
            for d_j in range(-n, n + 1):
                tile = center.shifted(d_i, d_j)
                if tile in self._active:
                    continue
                if not self._oracle.exists(tile) or not self.is_visible(tile, position):
                    continue
                self._active[tile] = self._materialize(tile)
                admitted.append(tile)
        return admitted

    def _materialize(self, tile: Tile) -> Cache:
        snapshot = self._store.load(tile)
        if snapshot is not None:
            return Cache.from_snapshot(snapshot)
        return Cache.initialize(tile, self._oracle)
