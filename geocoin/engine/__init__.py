"""Engine layer: the game session facade."""

from geocoin.engine.session import CacheView, GameSession

__all__ = ["CacheView", "GameSession"]
