"""Tests for the bounded game event feed."""

from __future__ import annotations

import unittest

from geocoin.core.enums import EventCategory
from geocoin.core.models import Tile
from geocoin.utils.event_log import EventLog, GameEvent


def _event(turn: int) -> GameEvent:
    return GameEvent(turn=turn, category=EventCategory.MOVE, message=f"turn {turn}", tile=Tile(0, turn))


class TestEventLog(unittest.TestCase):

    def test_latest(self):
        log = EventLog()
        for t in range(1, 6):
            log.append(_event(t))
        self.assertEqual([e.turn for e in log.latest(2)], [4, 5])
        self.assertEqual(log.latest(0), [])

    def test_bounded(self):
        log = EventLog(maxlen=3)
        for t in range(1, 11):
            log.append(_event(t))
        self.assertEqual(len(log), 3)
        self.assertEqual([e.turn for e in log.latest(10)], [8, 9, 10])

    def test_since_turn(self):
        log = EventLog()
        for t in range(1, 6):
            log.append(_event(t))
        self.assertEqual([e.turn for e in log.since_turn(4)], [4, 5])

    def test_clear(self):
        log = EventLog()
        log.append(_event(1))
        log.clear()
        self.assertEqual(len(log), 0)
