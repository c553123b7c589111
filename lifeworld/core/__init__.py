"""Core engine: rules, grid, board codec, evolution step and World."""

from .errors import (
    LifeWorldError, BoardFormatError, RuleFormatError,
    OutOfBoundsError, WorldNotInitializedError
)
from .rules import RuleSet, parse_rule, resolve_rule, CONWAY_RULE, NAMED_RULES
from .grid import Cell, Grid, Location
from .board import parse_board, serialize_board, validate_board
from .evolution import NEIGHBOR_OFFSETS, count_neighbors, evolve_grid
from .world import World, WorldSnapshot

__all__ = [
    'LifeWorldError',
    'BoardFormatError',
    'RuleFormatError',
    'OutOfBoundsError',
    'WorldNotInitializedError',
    'RuleSet',
    'parse_rule',
    'resolve_rule',
    'CONWAY_RULE',
    'NAMED_RULES',
    'Cell',
    'Grid',
    'Location',
    'parse_board',
    'serialize_board',
    'validate_board',
    'NEIGHBOR_OFFSETS',
    'count_neighbors',
    'evolve_grid',
    'World',
    'WorldSnapshot',
]
