"""Game configuration and validation.

Collects the command-line parameters of a game and checks them before a
``Game`` is constructed; the core itself does not re-validate.
"""

from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 3
DEFAULT_HEIGHT = 3
DEFAULT_INFECT_AFTER = 1
DEFAULT_MAX_GENERATIONS = 1


class InvalidConfigError(ValueError):
    """A grid dimension or generation count is not positive."""


class MissingSeedError(ValueError):
    """No initial state was supplied."""


@dataclass(frozen=True)
class GameConfig:
    """Parameters of a single game run."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    infect_after: int = DEFAULT_INFECT_AFTER
    max_generations: int = DEFAULT_MAX_GENERATIONS
    seed: str = ""

    def validate(self) -> None:
        """Check the configuration, raising on the first violation.

        Raises:
            InvalidConfigError: If width, height, infect_after or
                max_generations is less than 1
            MissingSeedError: If seed is empty
        """
        if self.width < 1 or self.height < 1:
            raise InvalidConfigError("width and height must be at least 1")

        if self.infect_after < 1:
            raise InvalidConfigError("infect-after must be at least 1")

        if self.max_generations < 1:
            raise InvalidConfigError("max-generations must be at least 1")

        if not self.seed:
            raise MissingSeedError("seed must be provided")

        logger.debug(f"Validated {self!r}")

    @property
    def cell_count(self) -> int:
        return self.width * self.height
