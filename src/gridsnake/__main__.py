from __future__ import annotations

import argparse
import logging
import random
import sys

from . import config
from .config import Settings
from .errors import SimulationError
from .logic import run_headless
from .state import Heading

logger = logging.getLogger("gridsnake")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake on a fixed-step clock.")
    parser.add_argument("--grid-size", type=float, default=config.GRID_SIZE, help="Pixels per cell.")
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT, help="Grid height in cells.")
    parser.add_argument(
        "--tick-interval",
        type=float,
        default=config.TICK_INTERVAL,
        help="Seconds between snake steps.",
    )
    parser.add_argument("--length", type=int, default=config.INITIAL_LENGTH, help="Initial snake length.")
    parser.add_argument(
        "--heading",
        type=Heading.parse,
        default=config.INITIAL_HEADING,
        help="Initial heading (up, down, left, right).",
    )
    parser.add_argument("--fps", type=int, default=config.FPS, help="Frame rate limit.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--headless-ticks",
        type=int,
        default=None,
        metavar="N",
        help="Run N steps without opening a window and print the final state.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = Settings(
            grid_size=args.grid_size,
            grid_width=args.width,
            grid_height=args.height,
            tick_interval=args.tick_interval,
            initial_length=args.length,
            initial_heading=args.heading,
            fps=args.fps,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    rng = random.Random(args.seed)

    try:
        if args.headless_ticks is not None:
            state = run_headless(settings, args.headless_ticks, rng)
            print("snake:", list(state.snake.cells))
            print("heading:", state.snake.heading.name.lower())
            print("food:", state.food)
            return 0

        from .game import main as run_game

        run_game(settings, rng)
    except SimulationError as e:
        logger.error("simulation halted: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
