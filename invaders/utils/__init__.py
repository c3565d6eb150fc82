"""Utility functions and helpers."""

from .functions import (
    centered_x,
    clamp,
    is_valid_timestamp,
)
from .input_handler import IDLE, GameAction, InputIntent

__all__ = [
    "centered_x",
    "clamp",
    "is_valid_timestamp",
    "IDLE",
    "GameAction",
    "InputIntent",
]
