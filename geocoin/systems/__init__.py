"""Engine systems: seeded hashing, cache oracle, visibility window."""

from geocoin.systems.rng import SeededHash, tile_key
from geocoin.systems.oracle import CacheOracle
from geocoin.systems.visibility import VisibilityDelta, VisibilityWindow

__all__ = ["CacheOracle", "SeededHash", "VisibilityDelta", "VisibilityWindow", "tile_key"]
