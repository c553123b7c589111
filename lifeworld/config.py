"""Configuration for lifeworld simulations."""

from dataclasses import dataclass, replace
from typing import Optional

from .core.errors import RuleFormatError
from .core.rules import CONWAY_RULE, parse_rule


@dataclass
class WorldConfig:
    """World configuration.

    Attributes:
        default_rule: Rule string used when init() is given no rule
        max_rows: Optional limit on board rows accepted by init()
        max_cols: Optional limit on board columns accepted by init()
        log_generations: Emit a DEBUG record for every generation
    """

    default_rule: str = CONWAY_RULE
    max_rows: Optional[int] = None
    max_cols: Optional[int] = None
    log_generations: bool = False

    def __post_init__(self):
        """Validate configuration after construction."""
        try:
            parse_rule(self.default_rule)
        except RuleFormatError as e:
            raise ValueError(f"default_rule is invalid: {e}") from e

        for name in ('max_rows', 'max_cols'):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, int) or value < 1):
                raise ValueError(f"{name} must be a positive integer or None, got {value!r}")

    def copy(self) -> 'WorldConfig':
        """Create an independent copy of the configuration."""
        return replace(self)
