"""Board text codec.

Boards are rows of '.' (dead) and '*' (alive) characters, each row terminated
by a newline:

    ......
    ***...
    ......

Parsing validates the whole text before any grid is built.
"""

import numpy as np
from typing import List, Optional
import logging

from .errors import BoardFormatError
from .grid import Grid

logger = logging.getLogger(__name__)


ALIVE_CHAR = '*'
DEAD_CHAR = '.'
LINE_TERMINATOR = '\n'
VALID_CHARS = frozenset((ALIVE_CHAR, DEAD_CHAR, LINE_TERMINATOR))


def split_rows(text: str) -> List[str]:
    """Split board text into rows, consuming the trailing terminator."""
    rows = text.split(LINE_TERMINATOR)
    if rows and rows[-1] == '':
        rows.pop()
    return rows


def validate_board(text: str,
                   max_rows: Optional[int] = None,
                   max_cols: Optional[int] = None) -> List[str]:
    """Validate board text and return its rows.

    Args:
        text: Board text
        max_rows: Optional upper bound on row count
        max_cols: Optional upper bound on column count

    Returns:
        List of row strings

    Raises:
        BoardFormatError: On an illegal character, unequal row lengths,
            an empty board or a board larger than the given limits
    """
    if not isinstance(text, str):
        raise BoardFormatError(f"Board must be a string, got {type(text).__name__}")

    rows = split_rows(text)

    # Characters are checked before row lengths
    for row_index, row in enumerate(rows):
        for col_index, char in enumerate(row):
            if char not in VALID_CHARS:
                raise BoardFormatError(
                    f"Illegal character {char!r} at row {row_index}, column {col_index}; "
                    f"board may only contain '{DEAD_CHAR}', '{ALIVE_CHAR}' and newlines",
                    row_index, col_index,
                )

    if not rows or not rows[0]:
        raise BoardFormatError("Board must contain at least one row and one column")

    cols = len(rows[0])
    for row_index, row in enumerate(rows):
        if len(row) != cols:
            raise BoardFormatError(
                f"Row {row_index} has length {len(row)}, expected {cols}; "
                f"all rows must be of the same length",
                row_index,
            )

    if max_rows is not None and len(rows) > max_rows:
        raise BoardFormatError(f"Board has {len(rows)} rows, limit is {max_rows}")
    if max_cols is not None and cols > max_cols:
        raise BoardFormatError(f"Board has {cols} columns, limit is {max_cols}")

    return rows


def parse_board(text: str,
                max_rows: Optional[int] = None,
                max_cols: Optional[int] = None) -> Grid:
    """Parse board text into a new Grid.

    Raises:
        BoardFormatError: If the text does not follow the board grammar
    """
    rows = validate_board(text, max_rows, max_cols)
    state = np.array([[char == ALIVE_CHAR for char in row] for row in rows], dtype=bool)
    grid = Grid(len(rows), len(rows[0]), state)
    logger.debug(f"Parsed board {grid.rows}x{grid.cols} with {grid.count_alive()} live cells")
    return grid


def serialize_board(grid: Grid) -> str:
    """Serialize a Grid to board text, every row newline-terminated."""
    chars = np.where(grid.state, ALIVE_CHAR, DEAD_CHAR)
    return ''.join(''.join(row) + LINE_TERMINATOR for row in chars)
