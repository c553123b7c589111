"""
lifeworld: Life-like Cellular Automata

Finite-grid simulation of Life-like rules (B3/S23 and friends) with a
textual board format.
"""

from .core import (
    World, WorldSnapshot, RuleSet, Grid, Cell, Location,
    LifeWorldError, BoardFormatError, RuleFormatError,
    OutOfBoundsError, WorldNotInitializedError,
    parse_board, serialize_board, parse_rule, CONWAY_RULE
)
from .config import WorldConfig

__version__ = "0.1.0"

__all__ = [
    'World',
    'WorldSnapshot',
    'WorldConfig',
    'RuleSet',
    'Grid',
    'Cell',
    'Location',
    'LifeWorldError',
    'BoardFormatError',
    'RuleFormatError',
    'OutOfBoundsError',
    'WorldNotInitializedError',
    'parse_board',
    'serialize_board',
    'parse_rule',
    'CONWAY_RULE',
]
