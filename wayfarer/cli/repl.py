"""
Interactive REPL for Wayfarer.

Reads one command per line from the terminal and plays the starter world.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from pydantic import ValidationError

from wayfarer.cli.output import ConsoleOutput
from wayfarer.content import create_starter_world
from wayfarer.engine import EngineConfig, GameSession

logger = logging.getLogger(__name__)


class GameREPL:
    """
    Interactive REPL for playing Wayfarer.

    Wires the starter world, the session and the console together.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        *,
        stream: TextIO | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.output = ConsoleOutput(stream, width=self.config.wrap_width)

    def create_session(self) -> GameSession:
        """Build the world and a fresh session at the configured start."""
        result = create_starter_world()
        return GameSession(
            world=result.world,
            start_location_id=self.config.start_location_id,
            output=self.output,
        )

    def run(self, read_line: Callable[[], str] | None = None) -> GameSession:
        """
        Run a fresh session until quit, death, or end of input.

        Args:
            read_line: Source of command lines, the terminal by default

        Returns:
            The finished session
        """
        return self.play(self.create_session(), read_line)

    def play(
        self,
        session: GameSession,
        read_line: Callable[[], str] | None = None,
    ) -> GameSession:
        """Drive an existing session; end of input finishes quietly."""
        try:
            session.run(read_line or input)
        except (KeyboardInterrupt, EOFError):
            self.output.println()
            logger.info("Input closed, leaving the game")

        return session


def configure_logging(level: str) -> None:
    """Send log records to stderr so they never mix with game text."""
    logging.basicConfig(
        level=getattr(logging, level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wayfarer Text Adventure")
    parser.add_argument("--width", type=int, default=None, help="Wrap output at this column")
    parser.add_argument("--start", default=None, help="Starting location id")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (default: WARNING)",
    )
    return parser


def run_game(config: EngineConfig | None = None) -> int:
    """
    Run the game on stdin/stdout.

    Returns:
        Process exit status: 0 on a normal ending, 1 on a stream or decoding failure,
        2 when the world cannot be set up
    """
    repl = GameREPL(config)
    try:
        session = repl.create_session()
    except ValueError as e:
        logger.error("Cannot start game: %s", e)
        return 2

    try:
        repl.play(session)
    except (OSError, UnicodeDecodeError):
        logger.exception("There was an error.")
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        config = EngineConfig.from_env(
            wrap_width=args.width,
            start_location_id=args.start,
            log_level=args.log_level,
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        raise SystemExit(2) from e

    configure_logging(config.log_level)
    raise SystemExit(run_game(config))


if __name__ == "__main__":
    main()
