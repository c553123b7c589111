"""Tests for the board text codec.

Parsing validates characters and row lengths before building a grid;
serialization writes every row newline-terminated so the two round-trip.
"""

import pytest
import numpy as np
from lifeworld.core.board import parse_board, serialize_board, validate_board, split_rows
from lifeworld.core.grid import Grid
from lifeworld.core.errors import BoardFormatError


BLINKER_BOARD = ('......\n'
                 '***...\n'
                 '......\n'
                 '......\n'
                 '......\n'
                 '......\n')


class TestParseBoard:
    """Test board text parsing."""

    def test_dimensions(self):
        """Rows come from line count, columns from the first row."""
        grid = parse_board(BLINKER_BOARD)
        assert grid.rows == 6
        assert grid.cols == 6

    def test_cell_states(self):
        """'*' is alive and '.' is dead."""
        grid = parse_board(BLINKER_BOARD)
        assert grid[1, 0] is True
        assert grid[1, 1] is True
        assert grid[1, 2] is True
        assert grid[1, 3] is False
        assert grid[0, 0] is False
        assert grid.count_alive() == 3

    def test_trailing_terminator_consumed(self):
        """No empty row is produced for the final newline."""
        assert split_rows("..\n**\n") == ["..", "**"]
        assert parse_board("..\n**\n").rows == 2

    def test_missing_final_terminator(self):
        """A last row without a newline is still a row."""
        grid = parse_board("..\n**")
        assert grid.rows == 2
        assert grid[1, 1] is True

    def test_single_cell(self):
        """Smallest legal board is 1x1."""
        grid = parse_board("*\n")
        assert grid.shape == (1, 1)
        assert grid[0, 0] is True

    def test_non_square(self):
        """Rows and columns are independent."""
        grid = parse_board("*..\n.*.\n")
        assert grid.shape == (2, 3)
        np.testing.assert_array_equal(grid.state, [[True, False, False], [False, True, False]])


class TestBoardValidation:
    """Test board validation failures."""

    def test_illegal_character(self):
        """Any character other than '.', '*' or newline is rejected."""
        with pytest.raises(BoardFormatError, match="Illegal character 'x'"):
            parse_board("...\n.x.\n...\n")

    def test_illegal_character_position(self):
        """The error records where the bad character is."""
        with pytest.raises(BoardFormatError) as excinfo:
            parse_board("...\n..o\n")
        assert excinfo.value.row == 1
        assert excinfo.value.col == 2

    @pytest.mark.parametrize("text", [
        "..\r\n..\r\n",   # carriage returns
        ". .\n...\n",     # space
        "O..\n...\n",     # other alive marker
        "\t\n",
    ])
    def test_other_illegal_characters(self, text):
        """Whitespace and foreign markers are illegal."""
        with pytest.raises(BoardFormatError):
            parse_board(text)

    def test_unequal_row_lengths(self):
        """Rows must all match the first row's length."""
        with pytest.raises(BoardFormatError, match="same length"):
            parse_board("......\n.....\n......\n")

    def test_blank_line_in_middle(self):
        """A blank line is a row of the wrong length."""
        with pytest.raises(BoardFormatError):
            parse_board("..\n\n..\n")

    @pytest.mark.parametrize("text", ["", "\n"])
    def test_empty_board(self, text):
        """Boards need at least one row and one column."""
        with pytest.raises(BoardFormatError, match="at least one row"):
            parse_board(text)

    def test_character_errors_reported_first(self):
        """Illegal characters are found before row length problems."""
        with pytest.raises(BoardFormatError, match="Illegal character"):
            parse_board("...\n..\n.#.\n")

    def test_non_string(self):
        """Only text can be parsed."""
        with pytest.raises(BoardFormatError):
            parse_board(None)

    def test_size_limits(self):
        """Optional row and column limits are enforced."""
        assert len(validate_board("...\n...\n", max_rows=2, max_cols=3)) == 2

        with pytest.raises(BoardFormatError, match="limit is 1"):
            validate_board("...\n...\n", max_rows=1)

        with pytest.raises(BoardFormatError, match="limit is 2"):
            validate_board("...\n...\n", max_cols=2)

    def test_format_error_is_value_error(self):
        """BoardFormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_board("?\n")


class TestSerializeBoard:
    """Test grid to text serialization."""

    def test_every_row_terminated(self):
        """Last row also ends with a newline."""
        grid = Grid(2, 3)
        grid[0, 0] = True
        grid[1, 2] = True
        assert serialize_board(grid) == "*..\n..*\n"

    def test_text_round_trip(self):
        """serialize(parse(text)) reproduces the text."""
        assert serialize_board(parse_board(BLINKER_BOARD)) == BLINKER_BOARD

    @pytest.mark.parametrize("seed,shape", [
        (0, (1, 1)),
        (1, (3, 7)),
        (2, (16, 5)),
        (3, (32, 32)),
    ])
    def test_grid_round_trip(self, seed, shape):
        """parse(serialize(grid)) reproduces the grid."""
        rng = np.random.default_rng(seed)
        grid = Grid(shape[0], shape[1], rng.random(shape) < 0.5)
        assert parse_board(serialize_board(grid)) == grid
