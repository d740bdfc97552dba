"""Grid state for the Infected Life cellular automaton.

The grid is a fixed-size boolean field stored as a numpy array. Reads through
``alive`` are bounds-safe: any coordinate outside the grid is a dead cell, so
the edge of the world behaves as a hard boundary rather than a torus.
"""

import numpy as np
from typing import Tuple
import logging

logger = logging.getLogger(__name__)

# (dx, dy) offsets of the two neighbourhood halves
DIAGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, -1), (1, 1), (1, -1), (-1, 1))
ORTHOGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Grid:
    """2D boolean grid of live and dead cells.

    Attributes:
        state: 2D numpy boolean array of shape (height, width), True=alive
    """

    def __init__(self, width: int, height: int):
        """Initialize an all-dead grid.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)

        Raises:
            ValueError: If either dimension is not positive
        """
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self.state = np.zeros((height, width), dtype=bool)

        logger.debug(f"Created grid {width}x{height}")

    @classmethod
    def from_array(cls, state) -> 'Grid':
        """Create grid from a 2D array-like of truthy values.

        Rows of ``state`` are y, columns are x. The data is copied.
        """
        array = np.asarray(state).astype(bool)
        if array.ndim != 2:
            raise ValueError(f"Grid state must be 2-dimensional, got shape {array.shape}")

        height, width = array.shape
        grid = cls(width, height)
        grid.state[:] = array
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set(self, x: int, y: int, alive: bool) -> None:
        """Set cell state at coordinates.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)
            alive: True to set alive, False to set dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self._width}x{self._height} grid")
        self.state[y, x] = alive

    def alive(self, x: int, y: int) -> bool:
        """Return whether the cell at (x, y) is alive.

        Cells outside the grid are always dead.
        """
        if not self.in_bounds(x, y):
            return False
        return bool(self.state[y, x])

    def diagonal_live_neighbours(self, x: int, y: int) -> int:
        """Count live cells among the four diagonally adjacent cells."""
        return sum(self.alive(x + dx, y + dy) for dx, dy in DIAGONAL_OFFSETS)

    def orthogonal_live_neighbours(self, x: int, y: int) -> int:
        """Count live cells among the four horizontally and vertically adjacent cells."""
        return sum(self.alive(x + dx, y + dy) for dx, dy in ORTHOGONAL_OFFSETS)

    def live_neighbours(self, x: int, y: int) -> int:
        """Count all live neighbours of a cell (0-8)."""
        return self.diagonal_live_neighbours(x, y) + self.orthogonal_live_neighbours(x, y)

    def render(self) -> str:
        """Flatten the grid row by row into '1' (alive) and '0' (dead) characters."""
        return ''.join('1' if cell else '0' for cell in self.state.flat)

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        return Grid.from_array(self.state)

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self.state))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.state)

    def to_array(self) -> np.ndarray:
        """Get grid as numpy array (copy)."""
        return self.state.copy()

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using grid[x, y] syntax."""
        x, y = key
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self._width}x{self._height} grid")
        return bool(self.state[y, x])

    def __setitem__(self, key: Tuple[int, int], value: bool) -> None:
        """Set cell state using grid[x, y] = value syntax."""
        x, y = key
        self.set(x, y, value)

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid):
            return False
        return (self._width == other._width and
                self._height == other._height and
                np.array_equal(self.state, other.state))

    def __str__(self) -> str:
        """String representation showing live cells as X."""
        return '\n'.join(
            ''.join('X' if cell else '.' for cell in row)
            for row in self.state
        )

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height}, alive={self.count_alive()})"
