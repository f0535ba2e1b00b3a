"""Cache existence oracle: which tiles hold a cache and what it starts with."""

from __future__ import annotations

import math

from geocoin.core.models import Tile
from geocoin.systems.rng import SeededHash, tile_key

INITIAL_VALUE_DOMAIN = "initialValue"


class CacheOracle:
    """Pure per-tile decisions derived from a SeededHash.

    Independent of any mutable game state; ``exists`` answers are memoized.
    """

    __slots__ = ("_rng", "_spawn_probability", "_initial_value_scale", "_memo")

    def __init__(self, rng: SeededHash, spawn_probability: float, initial_value_scale: int = 100) -> None:
        self._rng = rng
        self._spawn_probability = spawn_probability
        self._initial_value_scale = initial_value_scale
        self._memo: dict[Tile, bool] = {}

    @property
    def spawn_probability(self) -> float:
        return self._spawn_probability

    def exists(self, tile: Tile) -> bool:
        """Return True if a cache spawns at *tile*."""
        hit = self._memo.get(tile)
        if hit is None:
            hit = self._rng.luck(tile_key(tile)) < self._spawn_probability
            self._memo[tile] = hit
        return hit

    def initial_coin_count(self, tile: Tile) -> int:
        """Number of coins a never-touched cache at *tile* holds."""
        return math.floor(self._rng.luck(tile_key(tile, INITIAL_VALUE_DOMAIN)) * self._initial_value_scale)
