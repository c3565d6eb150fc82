"""
Input handler for Invaders.

Defines the per-frame intent snapshot the simulation consumes, and the
discrete actions the host reacts to outside of ``Game.step``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class GameAction(Enum):
    """Discrete (edge-triggered) actions handled by the host."""
    RESET = auto()
    QUIT = auto()
    NONE = auto()


@dataclass(frozen=True)
class InputIntent:
    """Held-input snapshot sampled once per step."""

    move_left: bool = False
    move_right: bool = False
    fire: bool = False

    @property
    def direction(self) -> int:
        """Net horizontal direction: -1, 0 or +1.

        Holding both directions cancels out to 0.
        """
        return int(bool(self.move_right)) - int(bool(self.move_left))


IDLE = InputIntent()
