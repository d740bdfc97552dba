"""
Life and Infection Rules

The two rule regimes of Infected Life. Each rule computes the next state of a
single cell from a grid snapshot; it never writes to the grid, so every cell
of a generation sees the same unmodified state.
"""

from enum import Enum
from typing import Dict, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import Grid


# Life rule, simplified: exactly 3 neighbours -> alive,
# exactly 2 neighbours -> unchanged, otherwise dead
BIRTH_NEIGHBOURS: int = 3
SURVIVAL_NEIGHBOURS: int = 2


def life_next_state(alive: bool, live_neighbours: int) -> bool:
    """Apply the Life rule to a cell.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbours: Number of live neighbours (0-8)

    Returns:
        Next cell state
    """
    return live_neighbours == BIRTH_NEIGHBOURS or (live_neighbours == SURVIVAL_NEIGHBOURS and alive)


def infection_next_state(alive: bool, orthogonal: int, diagonal: int) -> bool:
    """Apply the Infection rule to a cell.

    A dead cell with exactly one live neighbour becomes infected. A live cell
    stays alive only while it has at least one orthogonal live neighbour.

    Args:
        alive: Current cell state
        orthogonal: Live horizontal and vertical neighbours (0-4)
        diagonal: Live diagonal neighbours (0-4)

    Returns:
        Next cell state
    """
    if not alive and orthogonal + diagonal == 1:
        return True
    if alive and orthogonal > 0:
        return True
    return False


class Rule(Enum):
    """The rule regime applied to a whole generation."""

    LIFE = "life"
    INFECTION = "infection"

    def apply(self, grid: 'Grid', x: int, y: int) -> bool:
        """Return the next state of the cell at (x, y) in ``grid``."""
        if self is Rule.LIFE:
            return life_next_state(grid.alive(x, y), grid.live_neighbours(x, y))
        return infection_next_state(
            grid.alive(x, y),
            grid.orthogonal_live_neighbours(x, y),
            grid.diagonal_live_neighbours(x, y),
        )

    def rule_table(self) -> Dict[Tuple[bool, int, int], bool]:
        """Tabulate the rule over every possible neighbourhood.

        Returns:
            Dictionary mapping (alive, orthogonal, diagonal) to next state
        """
        table = {}
        for alive in (False, True):
            for orthogonal in range(5):
                for diagonal in range(5):
                    if self is Rule.LIFE:
                        next_state = life_next_state(alive, orthogonal + diagonal)
                    else:
                        next_state = infection_next_state(alive, orthogonal, diagonal)
                    table[(alive, orthogonal, diagonal)] = next_state
        return table

    def __str__(self) -> str:
        return self.value
