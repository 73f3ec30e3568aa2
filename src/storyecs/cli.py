"""Console entry point.

Usage:
    storyecs                    # Play the demo scenario
    storyecs --debug            # Enable dump/list commands
    storyecs --max-turns 20     # Stop after 20 turns
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator
from typing import Any

from storyecs import scenario
from storyecs.config import GameSettings
from storyecs.game import Game


def read_lines(prompt: str) -> Iterator[str]:
    """Yield input lines until end of file."""
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="storyecs",
        description="storyecs - a tiny interactive fiction engine",
    )
    parser.add_argument("--debug", action="store_true", help="Enable dump/list commands")
    parser.add_argument("--max-turns", type=int, help="Stop after this many turns")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )

    args = parser.parse_args(argv)
    overrides: dict[str, Any] = {}
    if args.debug:
        overrides["debug_commands"] = True
    if args.max_turns is not None:
        overrides["max_turns"] = args.max_turns
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    settings = GameSettings(**overrides)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = Game(scenario.build(), settings)
    game.run(read_lines(settings.prompt), emit=lambda text: print(f"{text}\n"))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
