"""Application entry point."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from collections.abc import Sequence

from seabattle.game.app.loop import ConsoleGameLoop
from seabattle.game.core.rules import create_session
from seabattle.game.infra.config import load_default_env_files, load_settings
from seabattle.game.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player console sea battle.")
    parser.add_argument("--player-one", type=str, default=None, help="Name of the first player")
    parser.add_argument("--player-two", type=str, default=None, help="Name of the second player")
    parser.add_argument("--log-level", type=str, default=None, help="Override log level")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a game on stdin/stdout and return the process exit code."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    settings = load_settings()
    overrides = {
        key: value
        for key, value in (
            ("player_one", args.player_one),
            ("player_two", args.player_two),
            ("log_level", args.log_level.upper() if args.log_level else None),
        )
        if value
    }
    settings = dataclasses.replace(settings, **overrides)
    setup_logging(settings)

    session = create_session(settings.player_one, settings.player_two)
    loop = ConsoleGameLoop(session, read_line=input, write=print)
    try:
        winner = loop.run()
        if winner is not None:
            logger.info("game_finished winner=%s", winner.owner)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
        logger.info("game_aborted")
    finally:
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
