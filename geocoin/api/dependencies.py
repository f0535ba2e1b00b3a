"""FastAPI dependency injection: provides the GameSession singleton."""

from __future__ import annotations

from geocoin.engine.session import GameSession

_game_session: GameSession | None = None


def set_game_session(session: GameSession | None) -> None:
    global _game_session
    _game_session = session


def get_game_session() -> GameSession:
    if _game_session is None:
        raise RuntimeError("GameSession not initialized: server not started correctly.")
    return _game_session
