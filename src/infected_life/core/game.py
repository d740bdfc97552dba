"""Generation stepping for Infected Life.

A ``Game`` owns the current grid and advances it one generation at a time,
running the Life rule up to and including generation ``infect_after`` and the
Infection rule afterwards, until ``max_generations`` steps have been taken.
"""

from typing import Iterator, TYPE_CHECKING
import logging

from .grid import Grid
from .rules import Rule

if TYPE_CHECKING:
    from ..config import GameConfig

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when stepping a game that already reached its generation limit."""


class Game:
    """Two-phase cellular automaton simulation.

    Attributes:
        grid: Current generation's grid
        infect_after: Last generation evolved with the Life rule
        max_generations: Number of steps after which the game is over
        generation: Number of completed steps
    """

    def __init__(self, width: int, height: int, infect_after: int, max_generations: int):
        """Initialize a game with an all-dead grid.

        Parameters are expected to be validated by the caller
        (see ``GameConfig.validate``).
        """
        self.grid = Grid(width, height)
        self.infect_after = infect_after
        self.max_generations = max_generations
        self.generation = 0

    @classmethod
    def from_config(cls, config: 'GameConfig') -> 'Game':
        """Create a seeded game from a validated configuration.

        Raises:
            InvalidConfigError: If a dimension or generation count is not positive
            MissingSeedError: If the configuration has no seed
            SeedError: If the seed holds more cells than the grid
        """
        from ..seed import parse_seed

        config.validate()
        game = cls(config.width, config.height, config.infect_after, config.max_generations)
        game.seed(parse_seed(config.width, config.height, config.seed))
        return game

    def seed(self, grid: Grid) -> None:
        """Replace the game's grid with the given one."""
        self.grid = grid
        logger.debug(f"Seeded {grid!r}")

    def is_over(self) -> bool:
        return self.generation >= self.max_generations

    def select_rule(self) -> Rule:
        """Rule for the current generation: Life up to infect_after, Infection after."""
        if self.generation <= self.infect_after:
            return Rule.LIFE
        return Rule.INFECTION

    def step(self) -> Grid:
        """Advance the game by one generation.

        The next generation is computed into a fresh grid so that every cell
        is evaluated against the same snapshot.

        Returns:
            The new current grid

        Raises:
            GameOverError: If the game is already over
        """
        if self.is_over():
            raise GameOverError(
                f"Game is over after {self.max_generations} generations"
            )

        current = self.grid
        rule = self.select_rule()
        if rule is Rule.INFECTION and self.generation == self.infect_after + 1:
            logger.info(f"Infection phase started at generation {self.generation}")

        next_generation = Grid(current.width, current.height)
        for y in range(current.height):
            for x in range(current.width):
                next_generation.set(x, y, rule.apply(current, x, y))

        self.grid = next_generation
        self.generation += 1

        logger.debug(f"Generation {self.generation} ({rule}): {next_generation.count_alive()} alive")
        if self.is_over():
            logger.info(f"Game over after {self.generation} generations")

        return next_generation

    def run(self) -> Iterator[Grid]:
        """Yield the current grid, then the grid after each step until the game is over."""
        yield self.grid
        while not self.is_over():
            yield self.step()

    def __repr__(self) -> str:
        return (f"Game({self.grid.width}x{self.grid.height}, generation={self.generation}/"
                f"{self.max_generations}, infect_after={self.infect_after})")
