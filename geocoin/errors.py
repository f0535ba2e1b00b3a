"""Exception types raised by the game engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geocoin.core.models import Tile


class GeocoinError(Exception):
    """Base class for engine errors."""


class ConfigError(GeocoinError, ValueError):
    """Raised when a GameConfig holds an invalid value."""


class InactiveCacheError(GeocoinError, LookupError):
    """Raised when a command targets a tile with no visible cache."""

    def __init__(self, tile: Tile) -> None:
        super().__init__(f"No active cache at tile {tile}")
        self.tile = tile
