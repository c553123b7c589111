"""
Life-like Rule Model

Parses "S/B" rule strings (survival counts before the slash, birth counts
after it) into rule sets and applies them to single cells.
"""

from typing import Dict, Tuple
import logging

from .errors import RuleFormatError

logger = logging.getLogger(__name__)


RULE_SEPARATOR = '/'
VALID_COUNTS = '012345678'

CONWAY_RULE = '23/3'  # Live cells survive with 2-3 neighbors, born with 3

# Well-known Life-like rules, in S/B order
NAMED_RULES: Dict[str, str] = {
    'life': CONWAY_RULE,
    'highlife': '23/36',
    'seeds': '/2',
    'life-without-death': '012345678/3',
    'day-and-night': '34678/3678',
    'maze': '12345/3',
    'mazectric': '1234/3',
    '2x2': '125/36',
    'diamoeba': '5678/35678',
    'replicator': '1357/1357',
    'drylife': '23/37',
    'live-free-or-die': '0/2',
}


class RuleSet:
    """Survival and birth neighbor counts for a Life-like automaton.

    Counts are kept exactly as parsed: order is preserved and duplicate
    digits are not removed. Membership is all the evolution step needs.
    """

    __slots__ = ('_survival', '_birth')

    def __init__(self, survival: Tuple[int, ...] = (), birth: Tuple[int, ...] = ()):
        """Initialize rule set.

        Args:
            survival: Neighbor counts that keep a live cell alive
            birth: Neighbor counts that bring a dead cell to life

        Raises:
            RuleFormatError: If any count is outside 0-8
        """
        survival = tuple(survival)
        birth = tuple(birth)
        for count in survival + birth:
            if isinstance(count, bool) or not isinstance(count, int) or not 0 <= count <= 8:
                raise RuleFormatError(f"Neighbor counts must be integers 0-8, got {count!r}")
        self._survival = survival
        self._birth = birth

    @classmethod
    def standard(cls) -> 'RuleSet':
        """Create standard Conway rules (23/3)."""
        return parse_rule(CONWAY_RULE)

    @property
    def survival(self) -> Tuple[int, ...]:
        return self._survival

    @property
    def birth(self) -> Tuple[int, ...]:
        return self._birth

    @property
    def rule_string(self) -> str:
        """Rule in "S/B" form; round-trips the string it was parsed from."""
        survival = ''.join(str(count) for count in self._survival)
        birth = ''.join(str(count) for count in self._birth)
        return f"{survival}{RULE_SEPARATOR}{birth}"

    def next_state(self, alive: bool, live_neighbors: int) -> bool:
        """Apply the rule to one cell.

        Args:
            alive: Current cell state
            live_neighbors: Number of live neighbors (0-8)

        Returns:
            Next cell state
        """
        if alive:
            return live_neighbors in self._survival
        else:
            return live_neighbors in self._birth

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return self._survival == other._survival and self._birth == other._birth

    def __hash__(self) -> int:
        return hash((self._survival, self._birth))

    def __str__(self) -> str:
        return self.rule_string

    def __repr__(self) -> str:
        return f"RuleSet(survival={self._survival}, birth={self._birth})"


def _parse_counts(segment: str, rule_string: str) -> Tuple[int, ...]:
    counts = []
    for char in segment:
        if char not in VALID_COUNTS:
            raise RuleFormatError(
                f"Rule '{rule_string}' contains invalid neighbor count {char!r}; "
                f"expected digits 0-8",
                rule_string,
            )
        counts.append(int(char))
    return tuple(counts)


def parse_rule(rule_string: str) -> RuleSet:
    """Parse a "S/B" rule string into a RuleSet.

    Args:
        rule_string: Survival digits, '/', birth digits (e.g. "23/3")

    Returns:
        Parsed RuleSet, digits kept in the order given

    Raises:
        RuleFormatError: If the separator is missing or repeated, or a
            character is not a digit 0-8
    """
    if not isinstance(rule_string, str):
        raise RuleFormatError(f"Rule must be a string, got {type(rule_string).__name__}")

    segments = rule_string.split(RULE_SEPARATOR)
    if len(segments) != 2:
        raise RuleFormatError(
            f"Rule '{rule_string}' must have exactly one '{RULE_SEPARATOR}' "
            f"separating survival and birth counts",
            rule_string,
        )

    survival_segment, birth_segment = segments
    rules = RuleSet(_parse_counts(survival_segment, rule_string),
                    _parse_counts(birth_segment, rule_string))
    logger.debug(f"Parsed rule '{rule_string}' -> {rules!r}")
    return rules


def resolve_rule(rule: str) -> RuleSet:
    """Parse either a rule name from NAMED_RULES or a raw rule string."""
    named = NAMED_RULES.get(rule.strip().lower()) if isinstance(rule, str) else None
    return parse_rule(named if named is not None else rule)
