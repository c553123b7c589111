"""Error types raised by the lifeworld engine.

Format errors subclass ValueError and bounds errors subclass IndexError, so
callers catching the builtin types keep working.
"""

from typing import Optional


class LifeWorldError(Exception):
    """Base class for all lifeworld errors."""


class BoardFormatError(LifeWorldError, ValueError):
    """Board text contains an illegal character or rows of unequal length."""

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.row = row
        self.col = col


class RuleFormatError(LifeWorldError, ValueError):
    """Rule string is missing its separator or has non-digit counts."""

    def __init__(self, message: str, rule_string: Optional[str] = None):
        super().__init__(message)
        self.rule_string = rule_string


class OutOfBoundsError(LifeWorldError, IndexError):
    """Location lies outside the grid."""


class WorldNotInitializedError(LifeWorldError, RuntimeError):
    """Operation needs a grid but the world was never initialized."""
