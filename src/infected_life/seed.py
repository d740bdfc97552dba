"""Seed decoding and flat rendering.

A seed is a space-separated list of cell tokens in row-major order; the token
"1" marks a live cell and anything else a dead one. Rendering is the inverse
without separators: one '1'/'0' character per cell.
"""

from typing import Optional, TextIO
import logging
import sys

from .core.grid import Grid

logger = logging.getLogger(__name__)

ALIVE_TOKEN = "1"
SEPARATOR = " "


class SeedError(ValueError):
    """Seed does not fit the grid."""


def parse_seed(width: int, height: int, seed: str) -> Grid:
    """Decode a seed string into a grid.

    The i-th token sets cell (i % width, i // width). Cells without a token
    stay dead.

    Args:
        width: Grid width
        height: Grid height
        seed: Space-separated cell tokens

    Returns:
        Grid: New grid holding the seed pattern

    Raises:
        SeedError: If the seed has more tokens than the grid has cells
    """
    tokens = seed.split(SEPARATOR)
    if len(tokens) > width * height:
        raise SeedError(
            f"seed has {len(tokens)} cells but a {width}x{height} grid holds {width * height}"
        )

    grid = Grid(width, height)
    for i, token in enumerate(tokens):
        grid.set(i % width, i // width, token == ALIVE_TOKEN)

    logger.debug(f"Parsed seed into {grid!r}")
    return grid


def render_grid(grid: Grid, out: Optional[TextIO] = None) -> None:
    """Write the grid as a single newline-terminated line of '1'/'0'."""
    if out is None:
        out = sys.stdout
    out.write(grid.render() + "\n")
