"""Life-like evolution step.

Computes the next generation of a grid under a RuleSet. Neighbor counts use
the Moore neighborhood clipped to the grid: edges are hard boundaries, there
is no wraparound. Every cell is evaluated against the pre-transition grid
and the result is always a new Grid.
"""

import numpy as np
from typing import Dict, Tuple
import logging

from .grid import Grid, LocationLike
from .rules import RuleSet

logger = logging.getLogger(__name__)


# (drow, dcol) for W, SW, S, SE, E, NE, N, NW
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, -1), (1, -1), (1, 0), (1, 1),
    (0, 1), (-1, 1), (-1, 0), (-1, -1),
)


def count_neighbors(grid: Grid, location: LocationLike) -> int:
    """Count living neighbors of a cell.

    Args:
        grid: The grid containing the cell
        location: (row, col) of the cell

    Returns:
        Number of living in-bounds neighbors (0-8)
    """
    row, col = location
    count = 0

    for drow, dcol in NEIGHBOR_OFFSETS:
        neighbor = (row + drow, col + dcol)

        # Cells outside the grid don't exist
        if grid.in_bounds(neighbor) and grid.state[neighbor]:
            count += 1

    return count


def neighbor_counts(grid: Grid) -> np.ndarray:
    """Count living neighbors for every cell at once.

    Returns:
        Integer array of shape (rows, cols)
    """
    # One ring of dead padding stands in for "no neighbor there"
    padded = np.pad(grid.state, 1, mode='constant', constant_values=False).astype(np.uint8)
    counts = np.zeros(grid.shape, dtype=np.uint8)

    for drow, dcol in NEIGHBOR_OFFSETS:
        counts += padded[1 + drow:1 + drow + grid.rows, 1 + dcol:1 + dcol + grid.cols]

    return counts


def _lookup_tables(rules: RuleSet) -> Tuple[np.ndarray, np.ndarray]:
    survive_table = np.zeros(9, dtype=bool)
    birth_table = np.zeros(9, dtype=bool)
    for count in rules.survival:
        survive_table[count] = True
    for count in rules.birth:
        birth_table[count] = True
    return survive_table, birth_table


def evolve_cell(grid: Grid, rules: RuleSet, location: LocationLike) -> bool:
    """Determine next state of a single cell.

    Args:
        grid: Current grid state
        rules: Rule set to apply
        location: (row, col) of the cell

    Returns:
        Next state of the cell (True=alive, False=dead)
    """
    alive = grid.get(location)
    return rules.next_state(alive, count_neighbors(grid, location))


def evolve_grid(grid: Grid, rules: RuleSet) -> Grid:
    """Apply one generation of the rules to the entire grid.

    Args:
        grid: Current grid state (not modified)
        rules: Rule set to apply

    Returns:
        New grid with next generation state
    """
    counts = neighbor_counts(grid)
    survive_table, birth_table = _lookup_tables(rules)

    next_state = np.where(grid.state, survive_table[counts], birth_table[counts])
    return Grid(grid.rows, grid.cols, next_state)


def rule_table(rules: RuleSet) -> Dict[Tuple[bool, int], bool]:
    """Get the outcome for every (current_state, neighbor_count) pair.

    Returns:
        Dictionary with 18 entries mapping (alive, neighbors) to next state
    """
    table = {}
    for alive in [False, True]:
        for neighbors in range(9):
            table[(alive, neighbors)] = rules.next_state(alive, neighbors)
    return table
