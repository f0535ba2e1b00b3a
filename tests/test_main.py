"""Tests for the command-line parser."""

from __future__ import annotations

import pytest

from geocoin.__main__ import _build_parser
from geocoin.config import LOG_LEVELS


class TestParser:

    @pytest.mark.parametrize("command", ["serve", "cli"])
    @pytest.mark.parametrize("level", LOG_LEVELS)
    def test_accepts_every_config_log_level(self, command, level):
        args = _build_parser().parse_args([command, "--log-level", level])
        assert args.log_level == level

    def test_cli_defaults(self):
        args = _build_parser().parse_args(["cli"])
        assert args.direction == "west"
        assert args.steps == 20
        assert args.seed == 0

    def test_rejects_unknown_level(self):
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["cli", "--log-level", "LOUD"])
