"""Pattern library and long-run behavior detection."""

from .library import Pattern, PATTERNS, get_pattern, place_pattern
from .detector import CycleKind, CycleDetection, detect_cycle

__all__ = [
    'Pattern',
    'PATTERNS',
    'get_pattern',
    'place_pattern',
    'CycleKind',
    'CycleDetection',
    'detect_cycle',
]
