"""
cli.py — Command line entry point.

Parses the grid, timing and logging options, builds the GameModel and hands
it to the pygame GameController. Installed as the `tilesnake` command.
"""

import argparse
import logging

from .controller import GameController
from .model import GameModel
from .config import (
    GRID_W, GRID_H, TILE, MAX_SCORE, GROWTH_RATE, TICK_DELAY_MS,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grid snake game")
    parser.add_argument("--width", type=int, default=GRID_W, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=GRID_H, help="Grid height in cells")
    parser.add_argument("--tile-size", type=int, default=TILE, help="Pixels per cell")
    parser.add_argument("--max-score", type=int, default=MAX_SCORE, help="Food needed to win")
    parser.add_argument("--growth-rate", type=int, default=GROWTH_RATE,
                        help="Segments gained per food")
    parser.add_argument("--delay", type=int, default=TICK_DELAY_MS,
                        help="Milliseconds between ticks")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--no-auto-reset", action="store_true",
                        help="Pause after a crash instead of restarting at once")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        model = GameModel(
            width=args.width,
            height=args.height,
            max_score=args.max_score,
            growth_rate=args.growth_rate,
            auto_reset=not args.no_auto_reset,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))
    if args.tile_size < 1:
        parser.error(f"tile size must be >= 1 px, got {args.tile_size}")
    if args.delay <= 0:
        parser.error(f"tick delay must be > 0 ms, got {args.delay}")

    GameController(model, tile=args.tile_size, tick_delay_ms=args.delay).run()
