"""Seeded string-keyed hash generator using xxhash.

Every random decision in the game is a pure function of a text key, so a
tile's cache looks the same no matter when or how often it is generated.

Formula: luck(key) = xxh64(key, seed) / 2**64
"""

from __future__ import annotations

import xxhash

from geocoin.core.models import Tile


def tile_key(tile: Tile, *suffix: str) -> str:
    """Canonical text key for a tile, e.g. ``"3,-7"`` or ``"3,-7,initialValue"``.

    Integers never contain a comma, so distinct tiles never share a key.
    """
    return ",".join((str(tile.i), str(tile.j), *suffix))


class SeededHash:
    """Stateless pseudo-random generator keyed by strings.

    Each call is a pure function of (seed, key): no internal mutable state,
    therefore safe to call from any thread in any order.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int = 0) -> None:
        self._seed = seed & self._MAX_UINT64

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, key: str) -> int:
        return xxhash.xxh64(key.encode("utf-8"), seed=self._seed).intdigest()

    def luck(self, key: str) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(key) / (self._MAX_UINT64 + 1)
