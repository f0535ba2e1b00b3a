"""Core value types: Tile, LatLng, TileBounds."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_M = 6_371_000.0


@dataclass(frozen=True, slots=True, order=True)
class Tile:
    """Immutable integer grid cell; i indexes latitude, j longitude."""

    i: int
    j: int

    def shifted(self, d_i: int, d_j: int) -> Tile:
        return Tile(self.i + d_i, self.j + d_j)

    def __repr__(self) -> str:
        return f"({self.i}, {self.j})"


@dataclass(frozen=True, slots=True)
class LatLng:
    """Immutable geographic point in degrees."""

    lat: float
    lng: float

    def distance_to(self, other: LatLng) -> float:
        """Great-circle distance in metres (haversine)."""
        phi1 = math.radians(self.lat)
        phi2 = math.radians(other.lat)
        d_phi = phi2 - phi1
        d_lambda = math.radians(other.lng - self.lng)
        a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
        return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(a)))


@dataclass(frozen=True, slots=True)
class TileBounds:
    """Geographic rectangle covered by one tile."""

    lat_min: float
    lng_min: float
    lat_max: float
    lng_max: float

    @property
    def center(self) -> LatLng:
        return LatLng((self.lat_min + self.lat_max) / 2, (self.lng_min + self.lng_max) / 2)

    def contains(self, point: LatLng) -> bool:
        """Half-open containment: [min, max) on both axes."""
        return (
            self.lat_min <= point.lat < self.lat_max
            and self.lng_min <= point.lng < self.lng_max
        )
