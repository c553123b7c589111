"""Classic Conway patterns as board text.

Patterns are stored in the same text format the World parses, so they can
be stamped into a larger board with place_pattern() and passed to init().
"""

from typing import Dict, NamedTuple
import logging

from ..core.board import parse_board, serialize_board
from ..core.errors import BoardFormatError
from ..core.grid import Grid

logger = logging.getLogger(__name__)


class Pattern(NamedTuple):
    """A named pattern and its period under Conway rules (23/3)."""
    name: str
    board: str
    period: int  # 1 for still lifes
    moves: bool = False


PATTERNS: Dict[str, Pattern] = {
    # Still lifes
    'block': Pattern('block',
                     '**\n'
                     '**\n', 1),
    'beehive': Pattern('beehive',
                       '.**.\n'
                       '*..*\n'
                       '.**.\n', 1),
    'loaf': Pattern('loaf',
                    '.**.\n'
                    '*..*\n'
                    '.*.*\n'
                    '..*.\n', 1),
    'boat': Pattern('boat',
                    '**.\n'
                    '*.*\n'
                    '.*.\n', 1),

    # Oscillators
    'blinker': Pattern('blinker',
                       '***\n', 2),
    'toad': Pattern('toad',
                    '.***\n'
                    '***.\n', 2),
    'beacon': Pattern('beacon',
                      '**..\n'
                      '**..\n'
                      '..**\n'
                      '..**\n', 2),

    # Spaceships
    'glider': Pattern('glider',
                      '.*.\n'
                      '..*\n'
                      '***\n', 4, moves=True),
}


def get_pattern(name: str) -> Pattern:
    """Look up a pattern by name (case-insensitive).

    Raises:
        KeyError: If no pattern has that name
    """
    key = name.strip().lower()
    if key not in PATTERNS:
        raise KeyError(f"Unknown pattern '{name}'; available: {', '.join(sorted(PATTERNS))}")
    return PATTERNS[key]


def place_pattern(pattern: str, rows: int, cols: int, row: int = 0, col: int = 0) -> str:
    """Stamp a pattern into an otherwise dead board.

    Args:
        pattern: Pattern board text (or a Pattern name from PATTERNS)
        rows: Board row count
        cols: Board column count
        row: Top row of the pattern on the board
        col: Left column of the pattern on the board

    Returns:
        Board text of size rows x cols

    Raises:
        BoardFormatError: If the pattern is malformed or doesn't fit
    """
    if pattern.strip().lower() in PATTERNS:
        pattern = PATTERNS[pattern.strip().lower()].board

    stamp = parse_board(pattern)

    # No wraparound: the whole pattern must land on the board
    if row < 0 or col < 0 or row + stamp.rows > rows or col + stamp.cols > cols:
        raise BoardFormatError(
            f"Pattern {stamp.rows}x{stamp.cols} at ({row}, {col}) doesn't fit a {rows}x{cols} board"
        )

    board = Grid(rows, cols)
    board.state[row:row + stamp.rows, col:col + stamp.cols] = stamp.state
    logger.debug(f"Placed {stamp.rows}x{stamp.cols} pattern at ({row}, {col}) on {rows}x{cols} board")
    return serialize_board(board)
