"""World aggregate for Life-like cellular automata.

A World owns one grid, one rule set and the generation counter. It is built
empty, initialized from board text and a rule string, and then evolved one
generation at a time:

    world = World().init('......\\n***...\\n......\\n', '23/3')
    world.evolve()
    print(world.to_string())

A World is not thread-safe; use one World per thread or serialize access.
"""

from dataclasses import dataclass
from typing import Optional, Union
import logging

from ..config import WorldConfig
from .board import parse_board, serialize_board
from .errors import OutOfBoundsError, RuleFormatError, WorldNotInitializedError
from .evolution import evolve_grid
from .grid import Cell, Grid, LocationLike, as_location
from .rules import RuleSet, parse_rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorldSnapshot:
    """Read-only view of a world at one generation."""
    board: str
    rules: str
    generation: int
    alive_count: int


class World:
    """A finite Life-like world.

    Attributes:
        config: WorldConfig in effect for this world
    """

    def __init__(self, config: Optional[WorldConfig] = None):
        """Create an empty world.

        Args:
            config: Optional configuration (defaults to WorldConfig())
        """
        self.config = config or WorldConfig()
        self._grid: Optional[Grid] = None
        self._rules = RuleSet()
        self._generation = 0

    def init(self, text: str, rule_string: Optional[str] = None) -> 'World':
        """Initialize the world from board text and a rule string.

        Nothing is committed unless both inputs are valid.

        Args:
            text: Board text ('.' dead, '*' alive, newline-terminated rows)
            rule_string: Rule in "S/B" form; config.default_rule if None

        Returns:
            This world

        Raises:
            BoardFormatError: If the board text is malformed
            RuleFormatError: If the rule string is malformed
        """
        grid = parse_board(text, self.config.max_rows, self.config.max_cols)
        rules = parse_rule(self.config.default_rule if rule_string is None else rule_string)

        self._grid = grid
        self._rules = rules
        self._generation = 0

        logger.debug(f"Initialized {grid.rows}x{grid.cols} world with rule {rules.rule_string}, "
                     f"{grid.count_alive()} live cells")
        return self

    @property
    def initialized(self) -> bool:
        return self._grid is not None

    def _require_grid(self) -> Grid:
        if self._grid is None:
            raise WorldNotInitializedError("World has not been initialized; call init() first")
        return self._grid

    def in_bounds(self, location: LocationLike) -> bool:
        """Check 0 <= row < rows and 0 <= col < cols.

        An uninitialized world has no cells, so nothing is in bounds.
        """
        location = as_location(location)
        if self._grid is None:
            return False
        return self._grid.in_bounds(location)

    def get_cell(self, location: LocationLike) -> Optional[Cell]:
        """Get the cell at location, or None if location is out of bounds."""
        location = as_location(location)
        if not self.in_bounds(location):
            return None
        return Cell(self._grid.get(location))

    def set_cell(self, location: LocationLike, state: Union[Cell, bool]) -> None:
        """Replace the cell at location.

        Args:
            location: (row, col) of the cell
            state: New Cell or alive flag

        Raises:
            OutOfBoundsError: If location is outside the grid
        """
        location = as_location(location)
        if not self.in_bounds(location):
            raise OutOfBoundsError(f"Location ({location.row}, {location.col}) is out of bounds "
                                   f"for {self.get_rows()}x{self.get_cols()} world")
        alive = state.alive if isinstance(state, Cell) else bool(state)
        self._grid.set(location, alive)

    def get_rules(self) -> RuleSet:
        return self._rules

    def set_rules(self, rules: Union[RuleSet, str]) -> RuleSet:
        """Replace the rule set wholesale.

        Args:
            rules: RuleSet or "S/B" rule string

        Raises:
            RuleFormatError: If a rule string is malformed
        """
        if isinstance(rules, str):
            rules = parse_rule(rules)
        elif not isinstance(rules, RuleSet):
            raise RuleFormatError(f"Expected RuleSet or rule string, got {type(rules).__name__}")
        logger.debug(f"Rules changed {self._rules.rule_string} -> {rules.rule_string}")
        self._rules = rules
        return rules

    def get_rows(self) -> int:
        return self._grid.rows if self._grid is not None else 0

    def get_cols(self) -> int:
        return self._grid.cols if self._grid is not None else 0

    def get_generation(self) -> int:
        return self._generation

    def get_alive_count(self) -> int:
        """Number of live cells, recomputed from the grid."""
        return self._grid.count_alive() if self._grid is not None else 0

    def get_grid(self) -> Grid:
        """Copy of the current grid."""
        return self._require_grid().copy()

    def evolve(self, generations: int = 1) -> 'World':
        """Advance the world by one or more generations.

        Args:
            generations: Number of generations to advance (>= 0)

        Returns:
            This world

        Raises:
            WorldNotInitializedError: If init() was never called
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"generations must be non-negative, got {generations}")
        grid = self._require_grid()

        for _ in range(generations):
            grid = evolve_grid(grid, self._rules)
            self._grid = grid
            self._generation += 1

            if self.config.log_generations:
                logger.debug(f"Generation {self._generation}: alive={grid.count_alive()}")

        return self

    def snapshot(self) -> WorldSnapshot:
        """Capture board, rules, generation and alive count."""
        return WorldSnapshot(
            board=self.to_string(),
            rules=self._rules.rule_string,
            generation=self._generation,
            alive_count=self.get_alive_count(),
        )

    def to_string(self) -> str:
        """Serialize the current grid to board text."""
        return serialize_board(self._require_grid())

    def __str__(self) -> str:
        return self.to_string() if self._grid is not None else ''

    def __repr__(self) -> str:
        if self._grid is None:
            return "World(uninitialized)"
        return (f"World({self._grid.rows}x{self._grid.cols}, rule={self._rules.rule_string}, "
                f"generation={self._generation}, alive={self.get_alive_count()})")
