"""GET /api/v1/config: expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_game_session
from geocoin.api.schemas import GameConfigResponse, LatLngSchema
from geocoin.engine.session import GameSession

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(session: GameSession = Depends(get_game_session)) -> GameConfigResponse:
    cfg = session.config
    return GameConfigResponse(
        tile_degrees=cfg.tile_degrees,
        neighborhood_size=cfg.neighborhood_size,
        spawn_probability=cfg.spawn_probability,
        initial_value_scale=cfg.initial_value_scale,
        seed=cfg.seed,
        origin=LatLngSchema(lat=cfg.origin_lat, lng=cfg.origin_lng),
        visibility_radius_m=cfg.radius_m,
    )
