"""User interface components."""

from .text import BANNER_LOST, BANNER_WON, RESTART_HINT, ScoreDisplay

__all__ = [
    "BANNER_LOST",
    "BANNER_WON",
    "RESTART_HINT",
    "ScoreDisplay",
]
