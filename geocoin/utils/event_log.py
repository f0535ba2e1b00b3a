"""Thread-safe ring buffer for game events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

from geocoin.core.enums import EventCategory
from geocoin.core.models import Tile


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single entry in the game event feed."""

    turn: int
    category: EventCategory
    message: str
    tile: Tile | None = None


class EventLog:
    """Bounded event log. Writers append; readers get copies.

    The oldest events fall off once *maxlen* is reached.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int = 500) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append(self, event: GameEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def since_turn(self, turn: int) -> list[GameEvent]:
        """Return all events with turn >= *turn*."""
        with self._lock:
            return [e for e in self._buffer if e.turn >= turn]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        if count <= 0:
            return []
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
