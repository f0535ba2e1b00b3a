"""Core data models: tiles, caches, snapshots, player."""

from geocoin.core.enums import Direction, EventCategory
from geocoin.core.models import LatLng, Tile, TileBounds
from geocoin.core.grid import TileGrid
from geocoin.core.snapshot import CacheSnapshot, SnapshotStore
from geocoin.core.cache import Cache, coin_id
from geocoin.core.player import Player

__all__ = [
    "Cache",
    "CacheSnapshot",
    "Direction",
    "EventCategory",
    "LatLng",
    "Player",
    "SnapshotStore",
    "Tile",
    "TileBounds",
    "TileGrid",
    "coin_id",
]
