"""
Shared utility functions for Invaders.

Small numeric helpers used by the entity models and the game loop.
"""

from __future__ import annotations

import math
from numbers import Real


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp *value* to the closed range [*lower*, *upper*]."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def centered_x(outer_x: float, outer_width: float, inner_width: float) -> float:
    """Return the x that horizontally centres an *inner_width* box on an outer one."""
    return outer_x + outer_width / 2 - inner_width / 2


def is_valid_timestamp(now: object) -> bool:
    """Return True if *now* is a finite real number.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(now, bool) or not isinstance(now, Real):
        return False
    return math.isfinite(now)
