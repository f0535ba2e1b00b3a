"""Game configuration with defaults matching the campus map."""

from __future__ import annotations

import math
from dataclasses import dataclass

from geocoin.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one play session."""

    # Grid
    tile_degrees: float = 1e-4
    neighborhood_size: int = 8          # half-width of the scanned square, in tiles

    # Caches
    spawn_probability: float = 0.1
    initial_value_scale: int = 100      # fresh caches hold 0 .. scale-1 coins
    seed: int = 0

    # Player spawn point (Oakes College classroom)
    origin_lat: float = 36.98949379578401
    origin_lng: float = -122.06277128548504

    # Visibility
    meters_per_degree: float = 111_320.0
    visibility_radius_m: float | None = None   # None -> neighborhood_size tiles

    # Logging
    log_level: str = "INFO"
    event_log_size: int = 500

    def __post_init__(self) -> None:
        if not math.isfinite(self.tile_degrees) or self.tile_degrees <= 0:
            raise ConfigError(f"tile_degrees must be a positive number, got {self.tile_degrees!r}")
        if self.neighborhood_size < 0:
            raise ConfigError(f"neighborhood_size must be >= 0, got {self.neighborhood_size!r}")
        if not 0.0 <= self.spawn_probability <= 1.0:
            raise ConfigError(f"spawn_probability must be within [0, 1], got {self.spawn_probability!r}")
        if self.initial_value_scale <= 0:
            raise ConfigError(f"initial_value_scale must be positive, got {self.initial_value_scale!r}")
        if not math.isfinite(self.meters_per_degree) or self.meters_per_degree <= 0:
            raise ConfigError(f"meters_per_degree must be positive, got {self.meters_per_degree!r}")
        if self.visibility_radius_m is not None and not self.visibility_radius_m > 0:
            raise ConfigError(f"visibility_radius_m must be positive, got {self.visibility_radius_m!r}")
        if not (math.isfinite(self.origin_lat) and -90.0 <= self.origin_lat <= 90.0):
            raise ConfigError(f"origin_lat must be within [-90, 90], got {self.origin_lat!r}")
        if not (math.isfinite(self.origin_lng) and -180.0 <= self.origin_lng <= 180.0):
            raise ConfigError(f"origin_lng must be within [-180, 180], got {self.origin_lng!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        if self.event_log_size <= 0:
            raise ConfigError(f"event_log_size must be positive, got {self.event_log_size!r}")

    @property
    def radius_m(self) -> float:
        """Effective visibility radius in metres."""
        if self.visibility_radius_m is not None:
            return self.visibility_radius_m
        return self.neighborhood_size * self.tile_degrees * self.meters_per_degree
