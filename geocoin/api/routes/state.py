"""GET /api/v1/state and /events: player, visible caches and the event feed."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from geocoin.api.dependencies import get_game_session
from geocoin.api.schemas import EventSchema, GameStateResponse
from geocoin.api.serializers import cache_schema, event_schema, player_schema
from geocoin.engine.session import GameSession

router = APIRouter()


@router.get("/state", response_model=GameStateResponse)
def get_state(session: GameSession = Depends(get_game_session)) -> GameStateResponse:
    with session.lock:
        return GameStateResponse(
            turn=session.turn,
            player=player_schema(session),
            caches=[cache_schema(v) for v in session.active_caches()],
            remembered_caches=len(session.window.store),
        )


@router.get("/events", response_model=list[EventSchema])
def get_events(
    count: int = Query(50, ge=1, le=500, description="Number of most recent events"),
    session: GameSession = Depends(get_game_session),
) -> list[EventSchema]:
    return [event_schema(e) for e in session.event_log.latest(count)]
