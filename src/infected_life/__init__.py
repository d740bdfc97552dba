"""
Infected Life

A two-phase cellular automaton: Conway's Game of Life for the first
generations, then the Infection rules until the generation limit.
"""

from .core import Game, GameOverError, Grid, Rule
from .config import GameConfig, InvalidConfigError, MissingSeedError
from .seed import SeedError, parse_seed, render_grid

__version__ = "0.1.0"

__all__ = [
    'Game',
    'GameOverError',
    'Grid',
    'Rule',
    'GameConfig',
    'InvalidConfigError',
    'MissingSeedError',
    'SeedError',
    'parse_seed',
    'render_grid',
]
