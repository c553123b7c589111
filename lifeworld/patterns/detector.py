"""Cycle detection for evolving worlds.

Runs a copy of a world forward and reports whether it dies out, settles
into a still life, or enters a repeating oscillation. Because the grid is
finite the board sequence must eventually repeat; max_generations bounds
how long we look.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional
import logging

from ..core.world import World

logger = logging.getLogger(__name__)


class CycleKind(Enum):
    """Long-run behavior of a world."""
    EXTINCT = 'extinct'
    STILL_LIFE = 'still_life'
    OSCILLATOR = 'oscillator'
    UNRESOLVED = 'unresolved'


@dataclass
class CycleDetection:
    """Result of detect_cycle().

    Generations are counted from the world's state when detection started.
    """
    kind: CycleKind
    period: Optional[int]       # None when unresolved
    first_generation: Optional[int]  # First generation of the repeating cycle
    generations_run: int


def detect_cycle(world: World, max_generations: int = 1000) -> CycleDetection:
    """Find the first repeated board reachable from the world's current state.

    The world passed in is not modified.

    Args:
        world: Initialized world to examine
        max_generations: Maximum generations to evolve before giving up

    Returns:
        CycleDetection describing the outcome

    Raises:
        WorldNotInitializedError: If the world was never initialized
        ValueError: If max_generations is negative
    """
    if max_generations < 0:
        raise ValueError(f"max_generations must be non-negative, got {max_generations}")

    trial = World(world.config).init(world.to_string(), world.get_rules().rule_string)

    seen: Dict[bytes, int] = {}
    generation = 0

    while True:
        key = trial.get_grid().state.tobytes()
        if key in seen:
            period = generation - seen[key]
            # An empty board is only extinct if it stays empty; B0 rules refill it
            if period == 1 and trial.get_alive_count() == 0:
                kind = CycleKind.EXTINCT
            elif period == 1:
                kind = CycleKind.STILL_LIFE
            else:
                kind = CycleKind.OSCILLATOR
            result = CycleDetection(kind, period, seen[key], generation)
            break
        seen[key] = generation

        if generation >= max_generations:
            result = CycleDetection(CycleKind.UNRESOLVED, None, None, generation)
            break

        trial.evolve()
        generation += 1

    logger.debug(f"Cycle detection: {result.kind.value}, period={result.period}, "
                 f"after {result.generations_run} generations")
    return result
