"""Grid coordinate mapper between geographic points and tiles."""

from __future__ import annotations

import math

from geocoin.core.models import LatLng, Tile, TileBounds


class TileGrid:
    """Infinite square lattice anchored at (0, 0) with a fixed tile size in degrees."""

    __slots__ = ("tile_degrees",)

    def __init__(self, tile_degrees: float) -> None:
        self.tile_degrees = tile_degrees

    def to_tile(self, lat: float, lng: float) -> Tile:
        return Tile(self._index(lat), self._index(lng))

    def _index(self, value: float) -> int:
        # floor, not int(): negative coordinates belong to the tile below them
        size = self.tile_degrees
        idx = math.floor(value / size)
        # keep the index consistent with tile_bounds() under float rounding
        if idx * size > value:
            idx -= 1
        elif (idx + 1) * size <= value:
            idx += 1
        return idx

    def tile_of(self, point: LatLng) -> Tile:
        return self.to_tile(point.lat, point.lng)

    def tile_bounds(self, tile: Tile) -> TileBounds:
        size = self.tile_degrees
        return TileBounds(
            lat_min=tile.i * size,
            lng_min=tile.j * size,
            lat_max=(tile.i + 1) * size,
            lng_max=(tile.j + 1) * size,
        )

    def tile_center(self, tile: Tile) -> LatLng:
        size = self.tile_degrees
        return LatLng((tile.i + 0.5) * size, (tile.j + 0.5) * size)

    def offset(self, point: LatLng, d_i: int, d_j: int) -> LatLng:
        """Shift *point* by whole tiles."""
        return LatLng(point.lat + d_i * self.tile_degrees, point.lng + d_j * self.tile_degrees)
