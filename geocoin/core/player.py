"""Player state: position, coin wallet and movement trail."""

from __future__ import annotations

from geocoin.core.models import LatLng


class Player:
    """The single player of a session.

    The wallet is a LIFO stack like a cache, so the most recently collected
    coin is the first one deposited again.
    """

    __slots__ = ("position", "_wallet", "_trail")

    def __init__(self, position: LatLng) -> None:
        self.position = position
        self._wallet: list[str] = []
        self._trail: list[LatLng] = [position]

    @property
    def balance(self) -> int:
        return len(self._wallet)

    @property
    def wallet(self) -> tuple[str, ...]:
        return tuple(self._wallet)

    @property
    def trail(self) -> tuple[LatLng, ...]:
        return tuple(self._trail)

    def move_to(self, position: LatLng) -> None:
        self.position = position
        self._trail.append(position)

    def receive(self, coin: str) -> None:
        self._wallet.append(coin)

    def spend(self) -> str | None:
        """Take the most recent coin out of the wallet, or None when broke."""
        if not self._wallet:
            return None
        return self._wallet.pop()
