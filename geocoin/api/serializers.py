"""Conversion from engine objects to API schemas."""

from __future__ import annotations

from geocoin.api.schemas import (
    BoundsSchema,
    CacheSchema,
    EventSchema,
    LatLngSchema,
    PlayerSchema,
    TileSchema,
)
from geocoin.core.models import LatLng, Tile
from geocoin.engine.session import CacheView, GameSession
from geocoin.utils.event_log import GameEvent


def tile_schema(tile: Tile) -> TileSchema:
    return TileSchema(i=tile.i, j=tile.j)


def latlng_schema(point: LatLng) -> LatLngSchema:
    return LatLngSchema(lat=point.lat, lng=point.lng)


def cache_schema(view: CacheView, top_coin: str | None = None) -> CacheSchema:
    b = view.bounds
    return CacheSchema(
        tile=tile_schema(view.tile),
        bounds=BoundsSchema(lat_min=b.lat_min, lng_min=b.lng_min, lat_max=b.lat_max, lng_max=b.lng_max),
        coin_count=view.coin_count,
        top_coin=top_coin,
    )


def player_schema(session: GameSession) -> PlayerSchema:
    p = session.player
    return PlayerSchema(
        position=latlng_schema(p.position),
        tile=tile_schema(session.grid.tile_of(p.position)),
        balance=p.balance,
        wallet=list(p.wallet),
        trail=[latlng_schema(pt) for pt in p.trail],
    )


def event_schema(event: GameEvent) -> EventSchema:
    return EventSchema(
        turn=event.turn,
        category=event.category.value,
        message=event.message,
        tile=tile_schema(event.tile) if event.tile is not None else None,
    )
