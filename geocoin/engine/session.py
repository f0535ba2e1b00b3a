"""GameSession: the command/query surface the presentation layer talks to.

All public methods run under one re-entrant lock, so a reader never sees a
window update half applied (API handlers run on a thread pool).
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geocoin.core.enums import Direction, EventCategory
from geocoin.core.grid import TileGrid
from geocoin.core.models import LatLng, Tile, TileBounds
from geocoin.core.player import Player
from geocoin.core.snapshot import SnapshotStore
from geocoin.errors import InactiveCacheError
from geocoin.systems.oracle import CacheOracle
from geocoin.systems.rng import SeededHash
from geocoin.systems.visibility import VisibilityWindow
from geocoin.utils.event_log import EventLog, GameEvent

if TYPE_CHECKING:
    from geocoin.config import GameConfig
    from geocoin.core.cache import Cache

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CacheView:
    """What the map needs to draw one cache."""

    tile: Tile
    bounds: TileBounds
    coin_count: int


class GameSession:
    """One play session: player, visible caches and their remembered state."""

    def __init__(self, config: GameConfig) -> None:
        self._config = config
        self._lock = threading.RLock()
        self._rng = SeededHash(config.seed)
        self._grid = TileGrid(config.tile_degrees)
        self._oracle = CacheOracle(self._rng, config.spawn_probability, config.initial_value_scale)
        self._event_log = EventLog(config.event_log_size)
        self._build()

    def _build(self) -> None:
        cfg = self._config
        self._window = VisibilityWindow(
            grid=self._grid,
            oracle=self._oracle,
            store=SnapshotStore(),
            neighborhood_size=cfg.neighborhood_size,
            radius_m=cfg.radius_m,
        )
        origin = LatLng(cfg.origin_lat, cfg.origin_lng)
        self._player = Player(origin)
        self._turn = 0
        self._window.update(origin)
        logger.info(
            "Session ready at %s: %d caches visible (radius %.1f m)",
            self._grid.tile_of(origin), len(self._window), self._window.radius_m,
        )

    # -- read-only properties --

    @property
    def lock(self) -> threading.RLock:
        """Hold while reading several pieces of state that must agree."""
        return self._lock

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def grid(self) -> TileGrid:
        return self._grid

    @property
    def oracle(self) -> CacheOracle:
        return self._oracle

    @property
    def window(self) -> VisibilityWindow:
        return self._window

    @property
    def player(self) -> Player:
        return self._player

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def turn(self) -> int:
        return self._turn

    # -- queries --

    def active_caches(self) -> list[CacheView]:
        with self._lock:
            return [self._view(c) for c in self._window.active_caches()]

    def cache_view(self, tile: Tile) -> CacheView:
        with self._lock:
            return self._view(self._require(tile))

    # -- movement --

    def on_position_changed(self, lat: float, lng: float) -> list[CacheView]:
        """Move the player to (lat, lng) and re-fit the visibility window."""
        with self._lock:
            position = LatLng(lat, lng)
            self._player.move_to(position)
            delta = self._window.update(position)
            self._record(
                EventCategory.MOVE,
                f"Moved to {self._grid.tile_of(position)}: "
                f"{len(delta.admitted)} caches appeared, {len(delta.evicted)} vanished",
                self._grid.tile_of(position),
            )
            return self.active_caches()

    def move(self, direction: Direction) -> list[CacheView]:
        """Step one tile in *direction*."""
        with self._lock:
            d_i, d_j = direction.offset
            target = self._grid.offset(self._player.position, d_i, d_j)
            return self.on_position_changed(target.lat, target.lng)

    # -- cache commands --

    def collect_token(self, tile: Tile) -> str | None:
        """Pop the top coin of the cache at *tile*; None when it is empty."""
        with self._lock:
            cache = self._require(tile)
            coin = cache.collect()
            self._window.record(cache)
            return coin

    def deposit_token(self, tile: Tile, coin: str) -> int:
        """Push *coin* onto the cache at *tile*; returns the new coin count."""
        with self._lock:
            cache = self._require(tile)
            cache.deposit(coin)
            self._window.record(cache)
            return cache.count

    def collect(self, tile: Tile) -> str | None:
        """Move the top coin of a cache into the player's wallet."""
        with self._lock:
            coin = self.collect_token(tile)
            if coin is None:
                return None
            self._player.receive(coin)
            logger.info("Collected coin: %s", coin)
            self._record(EventCategory.COLLECT, f"Collected coin {coin}", tile)
            return coin

    def deposit(self, tile: Tile) -> str | None:
        """Move the player's most recent coin into a cache; None if the wallet is empty."""
        with self._lock:
            self._require(tile)
            coin = self._player.spend()
            if coin is None:
                return None
            self.deposit_token(tile, coin)
            logger.info("Deposited coin: %s", coin)
            self._record(EventCategory.DEPOSIT, f"Deposited coin {coin}", tile)
            return coin

    # -- lifecycle --

    def reset(self) -> None:
        """Forget every cache mutation and put a fresh player at the origin."""
        with self._lock:
            self._event_log.clear()
            self._build()
            self._record(EventCategory.RESET, "Session reset")
            logger.info("Session reset.")

    # -- internals --

    def _require(self, tile: Tile) -> Cache:
        cache = self._window.get(tile)
        if cache is None:
            raise InactiveCacheError(tile)
        return cache

    def _view(self, cache: Cache) -> CacheView:
        return CacheView(tile=cache.tile, bounds=self._grid.tile_bounds(cache.tile), coin_count=cache.count)

    def _record(self, category: EventCategory, message: str, tile: Tile | None = None) -> None:
        self._turn += 1
        self._event_log.append(GameEvent(turn=self._turn, category=category, message=message, tile=tile))
