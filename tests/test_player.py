"""Tests for the Player wallet and trail."""

from __future__ import annotations

from geocoin.core.models import LatLng
from geocoin.core.player import Player


class TestPlayer:

    def test_starts_broke_at_spawn(self):
        p = Player(LatLng(1.0, 2.0))
        assert p.balance == 0
        assert p.trail == (LatLng(1.0, 2.0),)
        assert p.spend() is None
        assert p.balance == 0

    def test_wallet_is_lifo(self):
        p = Player(LatLng(0.0, 0.0))
        p.receive("a")
        p.receive("b")
        assert p.balance == 2
        assert p.spend() == "b"
        assert p.wallet == ("a",)

    def test_trail_records_moves(self):
        p = Player(LatLng(0.0, 0.0))
        p.move_to(LatLng(0.0, 1.0))
        p.move_to(LatLng(1.0, 1.0))
        assert p.position == LatLng(1.0, 1.0)
        assert p.trail == (LatLng(0.0, 0.0), LatLng(0.0, 1.0), LatLng(1.0, 1.0))
