"""POST /api/v1/move, /position, /reset: player movement and session lifecycle."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_game_session
from geocoin.api.schemas import ControlResponse, LatLngSchema
from geocoin.core.enums import Direction
from geocoin.engine.session import GameSession

router = APIRouter()


@router.post("/move/{direction}", response_model=ControlResponse)
def move(direction: Direction, session: GameSession = Depends(get_game_session)) -> ControlResponse:
    with session.lock:
        caches = session.move(direction)
        return ControlResponse(
            status="ok",
            message=f"Moved {direction.value}; {len(caches)} caches visible.",
            turn=session.turn,
        )


@router.post("/position", response_model=ControlResponse)
def set_position(body: LatLngSchema, session: GameSession = Depends(get_game_session)) -> ControlResponse:
    with session.lock:
        caches = session.on_position_changed(body.lat, body.lng)
        return ControlResponse(
            status="ok",
            message=f"Position updated; {len(caches)} caches visible.",
            turn=session.turn,
        )


@router.post("/reset", response_model=ControlResponse)
def reset(session: GameSession = Depends(get_game_session)) -> ControlResponse:
    session.reset()
    return ControlResponse(status="ok", message="Session reset.", turn=session.turn)
