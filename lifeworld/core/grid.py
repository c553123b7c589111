"""Grid state for Life-like cellular automata.

The grid is a finite rows x cols board backed by a numpy boolean array.
Edges are hard: locations outside the board do not exist and are never alive.
"""

import numpy as np
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple, Union
import logging

from .errors import OutOfBoundsError

logger = logging.getLogger(__name__)


class Location(NamedTuple):
    """A (row, col) lookup key on the grid."""
    row: int
    col: int


LocationLike = Union[Location, Tuple[int, int]]


@dataclass(frozen=True)
class Cell:
    """Single immutable cell value."""
    alive: bool = False

    def __bool__(self) -> bool:
        return self.alive


ALIVE = Cell(True)
DEAD = Cell(False)


def _is_coordinate(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def as_location(location: LocationLike) -> Location:
    """Accept a Location or any (row, col) pair of integers.

    Raises:
        TypeError: If either coordinate is not an integer
    """
    row, col = location
    if not (_is_coordinate(row) and _is_coordinate(col)):
        raise TypeError(f"Location coordinates must be integers, got ({row!r}, {col!r})")
    if isinstance(location, Location):
        return location
    return Location(int(row), int(col))


class Grid:
    """2D boolean grid of cell states.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        state: 2D numpy boolean array of shape (rows, cols), True=alive
    """

    def __init__(self, rows: int, cols: int, initial_state: Optional[np.ndarray] = None):
        """Initialize grid with given dimensions.

        Args:
            rows: Row count (> 0)
            cols: Column count (> 0)
            initial_state: Optional initial boolean array of shape (rows, cols)

        Raises:
            ValueError: If dimensions are invalid or initial_state doesn't match
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols

        if initial_state is not None:
            if initial_state.shape != (rows, cols):
                raise ValueError(f"Initial state shape {initial_state.shape} doesn't match grid size {(rows, cols)}")
            if initial_state.dtype != bool:
                raise ValueError("Initial state must be boolean array")
            self.state = initial_state.copy()
        else:
            self.state = np.zeros((rows, cols), dtype=bool)

    @classmethod
    def from_rows(cls, rows: list) -> 'Grid':
        """Create grid from a list of equal-length rows of truthy values."""
        state = np.array(rows, dtype=bool)
        if state.ndim != 2:
            raise ValueError("Rows must form a rectangular 2D layout")
        return cls(state.shape[0], state.shape[1], state)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        return Grid(self.rows, self.cols, self.state)

    def in_bounds(self, location: LocationLike) -> bool:
        """Check 0 <= row < rows and 0 <= col < cols."""
        row, col = as_location(location)
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, location: LocationLike) -> bool:
        """Get cell state at location.

        Raises:
            OutOfBoundsError: If location is outside the grid
        """
        row, col = as_location(location)
        if not self.in_bounds((row, col)):
            raise OutOfBoundsError(f"Location ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")
        return bool(self.state[row, col])

    def set(self, location: LocationLike, alive: bool) -> None:
        """Set cell state at location.

        Raises:
            OutOfBoundsError: If location is outside the grid
        """
        row, col = as_location(location)
        if not self.in_bounds((row, col)):
            raise OutOfBoundsError(f"Location ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")
        self.state[row, col] = bool(alive)

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self.state))

    def density(self) -> float:
        """Get fraction of cells that are alive."""
        return self.count_alive() / (self.rows * self.cols)

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.state)

    def __getitem__(self, key: LocationLike) -> bool:
        """Access cell state using grid[row, col] syntax."""
        return self.get(key)

    def __setitem__(self, key: LocationLike, value: bool) -> None:
        """Set cell state using grid[row, col] = value syntax."""
        self.set(key, value)

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid):
            return False
        return (self.rows == other.rows and
                self.cols == other.cols and
                np.array_equal(self.state, other.state))

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        density_pct = self.density() * 100
        return f"Grid({self.rows}x{self.cols}, alive={self.count_alive()}, density={density_pct:.1f}%)"
