"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Geometry ---

class LatLngSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


class TileSchema(BaseModel):
    i: int
    j: int


class BoundsSchema(BaseModel):
    lat_min: float
    lng_min: float
    lat_max: float
    lng_max: float


# --- Caches ---

class CacheSchema(BaseModel):
    tile: TileSchema
    bounds: BoundsSchema
    coin_count: int
    top_coin: str | None = None


class TokenResponse(BaseModel):
    status: str  # "ok" | "noop"
    coin: str | None = None
    coin_count: int
    balance: int


# --- Player / state ---

class PlayerSchema(BaseModel):
    position: LatLngSchema
    tile: TileSchema
    balance: int
    wallet: list[str] = []
    trail: list[LatLngSchema] = []


class GameStateResponse(BaseModel):
    turn: int
    player: PlayerSchema
    caches: list[CacheSchema] = []
    remembered_caches: int = 0


class EventSchema(BaseModel):
    turn: int
    category: str
    message: str
    tile: TileSchema | None = None


class ControlResponse(BaseModel):
    status: str
    message: str
    turn: int


# --- Config ---

class GameConfigResponse(BaseModel):
    tile_degrees: float
    neighborhood_size: int
    spawn_probability: float
    initial_value_scale: int
    seed: int
    origin: LatLngSchema
    visibility_radius_m: float
