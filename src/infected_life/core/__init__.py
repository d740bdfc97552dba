"""
Infected Life core: grid, rules and generation stepping.
"""

from .grid import Grid
from .rules import Rule, life_next_state, infection_next_state
from .game import Game, GameOverError

__all__ = [
    'Grid',
    'Rule',
    'life_next_state',
    'infection_next_state',
    'Game',
    'GameOverError',
]
