"""Entry point for atomgame."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError
from textual.logging import TextualHandler

from .game.config import GameConfig
from .game.engine import GameEngine
from .ui.app import AtomGameApp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atomgame",
        description="Build atoms and test yourself on their numbers",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for challenge generation")
    parser.add_argument("--timer", action="store_true", help="time each level")
    parser.add_argument("--config", default=None, help="JSON game configuration file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (records go to the textual console)",
    )
    return parser


def load_config(args: argparse.Namespace) -> GameConfig:
    """Build the game configuration from an optional file and CLI flags.

    Flags given on the command line win over values from the file.
    """
    config = GameConfig.from_file(args.config) if args.config else GameConfig()
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.timer:
        overrides["timer_enabled"] = True
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the atomgame application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, handlers=[TextualHandler()])

    try:
        config = load_config(args)
    except (OSError, ValidationError) as e:
        print(f"atomgame: could not load config: {e}", file=sys.stderr)
        return 2

    logger.info("Starting atomgame with %d levels", len(config.levels))
    app = AtomGameApp(engine=GameEngine(config))
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
