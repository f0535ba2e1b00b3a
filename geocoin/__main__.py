"""Entry point: ``python -m geocoin``.

Supports two modes:
  - ``python -m geocoin``            → Launch the FastAPI server
  - ``python -m geocoin cli``        → Headless walk that collects along the way
"""

from __future__ import annotations

import argparse
import logging

from geocoin.config import LOG_LEVELS
from geocoin.core.enums import Direction
from geocoin.core.models import Tile

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic location-based coin caches")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=0)
    srv.add_argument("--log-level", type=str, default="INFO", choices=list(LOG_LEVELS))

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Walk the player headlessly, collecting from every cache seen")
    cli.add_argument("--seed", type=int, default=0)
    cli.add_argument("--steps", type=int, default=20)
    cli.add_argument("--direction", type=str, default=Direction.WEST.value, choices=[d.value for d in Direction])
    cli.add_argument("--log-level", type=str, default="INFO", choices=list(LOG_LEVELS))

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from geocoin.api.app import create_app
    from geocoin.config import GameConfig

    config = GameConfig(seed=args.seed, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from geocoin.config import GameConfig
    from geocoin.engine.session import GameSession
    from geocoin.utils.logging import setup_logging

    config = GameConfig(seed=args.seed, log_level=args.log_level)
    setup_logging(config.log_level)

    session = GameSession(config)
    direction = Direction(args.direction)
    visited: set[Tile] = set()

    for step in range(args.steps + 1):
        if step:
            session.move(direction)
        for view in session.active_caches():
            if view.tile in visited:
                continue
            visited.add(view.tile)
            while session.collect(view.tile) is not None:
                pass

    logger.info(
        "Walked %d tiles %s: emptied %d caches, wallet holds %d coins (%d caches remembered)",
        args.steps, direction.value, len(visited), session.player.balance, len(session.window.store),
    )


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
