"""Command-line driver for Infected Life.

Prints the seeded grid, then one line per generation until the game is over:

    infected-life --width 3 --height 3 --infect-after 1 --max-generations 2 \\
        --seed "0 0 0 0 1 0 0 0 0"
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import (
    DEFAULT_HEIGHT, DEFAULT_INFECT_AFTER, DEFAULT_MAX_GENERATIONS, DEFAULT_WIDTH,
    GameConfig, InvalidConfigError, MissingSeedError,
)
from .core.game import Game
from .seed import SeedError, render_grid

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="infected-life",
        description="Conway's Game of Life followed by an Infection phase",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help="The width of the world")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT,
                        help="The height of the world")
    parser.add_argument("--infect-after", type=int, default=DEFAULT_INFECT_AFTER,
                        help="The number of generations after which the infection stage will start")
    parser.add_argument("--max-generations", type=int, default=DEFAULT_MAX_GENERATIONS,
                        help="The maximum number of generations that can be created, including all phases of the game")
    parser.add_argument("--seed", default="",
                        help="The initial state of the world as space-separated 1/0 cells")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (logs go to stderr)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run a game from command-line arguments.

    Returns:
        Process exit status: 0 on success, 1 on invalid configuration
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s',
                        stream=sys.stderr)

    config = GameConfig(
        width=args.width,
        height=args.height,
        infect_after=args.infect_after,
        max_generations=args.max_generations,
        seed=args.seed,
    )

    try:
        game = Game.from_config(config)
    except (InvalidConfigError, MissingSeedError, SeedError) as e:
        logger.error(f"Invalid configuration: {e}")
        print(e, file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    for grid in game.run():
        render_grid(grid)

    return 0


if __name__ == "__main__":
    sys.exit(main())
