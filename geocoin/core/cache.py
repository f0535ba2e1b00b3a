"""Cache entity: the coin stack sitting on one tile."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geocoin.core.models import Tile
from geocoin.core.snapshot import CacheSnapshot

if TYPE_CHECKING:
    from geocoin.systems.oracle import CacheOracle


def coin_id(tile: Tile, serial: int) -> str:
    """Identifier of the *serial*-th coin minted at *tile*, e.g. ``"3:-7#12"``."""
    return f"{tile.i}:{tile.j}#{serial}"


class Cache:
    """Mutable LIFO coin inventory for one tile.

    The coin count is always the stack length, so it can never go negative.
    """

    __slots__ = ("tile", "_coins")

    def __init__(self, tile: Tile, coins: list[str] | None = None) -> None:
        self.tile = tile
        self._coins: list[str] = list(coins) if coins else []

    @classmethod
    def initialize(cls, tile: Tile, oracle: CacheOracle) -> Cache:
        """Fresh cache whose contents depend only on *tile*."""
        count = oracle.initial_coin_count(tile)
        return cls(tile, [coin_id(tile, serial) for serial in range(count)])

    @classmethod
    def from_snapshot(cls, snapshot: CacheSnapshot) -> Cache:
        return cls(snapshot.tile, list(snapshot.coins))

    # -- inventory --

    @property
    def count(self) -> int:
        return len(self._coins)

    @property
    def coins(self) -> tuple[str, ...]:
        """Bottom-to-top copy of the stack."""
        return tuple(self._coins)

    def peek(self) -> str | None:
        return self._coins[-1] if self._coins else None

    def collect(self) -> str | None:
        """Remove and return the top coin, or None when the cache is empty."""
        if not self._coins:
            return None
        return self._coins.pop()

    def deposit(self, coin: str) -> None:
        self._coins.append(coin)

    # -- memento --

    def snapshot(self) -> CacheSnapshot:
        return CacheSnapshot(tile=self.tile, coins=tuple(self._coins))

    def restore(self, snapshot: CacheSnapshot) -> None:
        if snapshot.tile != self.tile:
            raise ValueError(f"Snapshot for {snapshot.tile} cannot restore cache at {self.tile}")
        self._coins = list(snapshot.coins)

    def __repr__(self) -> str:
        return f"Cache(tile={self.tile!r}, count={self.count})"
