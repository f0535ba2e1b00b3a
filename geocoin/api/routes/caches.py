"""/api/v1/caches/{i}/{j}: inspect a visible cache, collect from it, deposit into it."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from geocoin.api.dependencies import get_game_session
from geocoin.api.schemas import CacheSchema, TokenResponse
from geocoin.api.serializers import cache_schema
from geocoin.core.models import Tile
from geocoin.engine.session import GameSession
from geocoin.errors import InactiveCacheError

router = APIRouter()


@router.get("/caches/{i}/{j}", response_model=CacheSchema)
def get_cache(i: int, j: int, session: GameSession = Depends(get_game_session)) -> CacheSchema:
    tile = Tile(i, j)
    with session.lock:
        try:
            view = session.cache_view(tile)
        except InactiveCacheError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return cache_schema(view, top_coin=session.window.get(tile).peek())


@router.post("/caches/{i}/{j}/collect", response_model=TokenResponse)
def collect(i: int, j: int, session: GameSession = Depends(get_game_session)) -> TokenResponse:
    tile = Tile(i, j)
    with session.lock:
        try:
            coin = session.collect(tile)
            view = session.cache_view(tile)
        except InactiveCacheError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return TokenResponse(
            status="ok" if coin is not None else "noop",
            coin=coin,
            coin_count=view.coin_count,
            balance=session.player.balance,
        )


@router.post("/caches/{i}/{j}/deposit", response_model=TokenResponse)
def deposit(i: int, j: int, session: GameSession = Depends(get_game_session)) -> TokenResponse:
    tile = Tile(i, j)
    with session.lock:
        try:
            coin = session.deposit(tile)
            view = session.cache_view(tile)
        except InactiveCacheError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return TokenResponse(
            status="ok" if coin is not None else "noop",
            coin=coin,
            coin_count=view.coin_count,
            balance=session.player.balance,
        )
