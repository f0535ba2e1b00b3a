"""Immutable cache snapshots and the session-scoped store that keeps them."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from geocoin.core.models import Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CacheSnapshot:
    """Read-only copy of one cache's coins at the moment of capture."""

    tile: Tile
    coins: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.coins)


class SnapshotStore:
    """Latest snapshot per tile, kept for the lifetime of the session.

    Entries are overwritten but never evicted; growth is bounded only by how
    many distinct tiles the player has touched.
    """

    __slots__ = ("_snapshots", "_writes")

    def __init__(self) -> None:
        self._snapshots: dict[Tile, CacheSnapshot] = {}
        self._writes: int = 0

    @property
    def writes(self) -> int:
        """Number of saves that changed the stored value."""
        return self._writes

    def save(self, snapshot: CacheSnapshot) -> None:
        if self._snapshots.get(snapshot.tile) == snapshot:
            return
        self._snapshots[snapshot.tile] = snapshot
        self._writes += 1
        logger.debug("Saved snapshot for %s (%d coins)", snapshot.tile, snapshot.count)

    def load(self, tile: Tile) -> CacheSnapshot | None:
        return self._snapshots.get(tile)

    def __contains__(self, tile: object) -> bool:
        return tile in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)

    def clear(self) -> None:
        self._snapshots.clear()
        self._writes = 0
