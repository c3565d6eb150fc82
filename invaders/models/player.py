"""
Player cannon for Invaders.

The cannon slides along the bottom of the arena and fires upward,
limited by a cooldown between shots.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from invaders.config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    PLAYER_BOTTOM_MARGIN,
    PLAYER_HEIGHT,
    PLAYER_SHOT_COOLDOWN,
    PLAYER_SPEED,
    PLAYER_WIDTH,
)
from invaders.models.geometry import Box
from invaders.models.projectile import Projectile, player_projectile
from invaders.utils.functions import clamp


def start_position(
    arena_width: float = ARENA_WIDTH, arena_height: float = ARENA_HEIGHT
) -> tuple[float, float]:
    """Return the cannon's (x, y) at the start of a round."""
    x = arena_width / 2 - PLAYER_WIDTH / 2
    y = arena_height - PLAYER_HEIGHT - PLAYER_BOTTOM_MARGIN
    return (x, y)


@dataclass
class Player(Box):
    """The player's cannon.

    ``last_shot_time`` is None until the first shot of a round, so the
    very first fire request is never held back by the cooldown.
    """

    speed: float = PLAYER_SPEED
    shot_cooldown: float = PLAYER_SHOT_COOLDOWN
    last_shot_time: Optional[float] = None

    @classmethod
    def spawn(
        cls, arena_width: float = ARENA_WIDTH, arena_height: float = ARENA_HEIGHT
    ) -> Player:
        x, y = start_position(arena_width, arena_height)
        return cls(x=x, y=y, width=PLAYER_WIDTH, height=PLAYER_HEIGHT)

    def respawn(
        self, arena_width: float = ARENA_WIDTH, arena_height: float = ARENA_HEIGHT
    ) -> None:
        """Move back to the start position and forget the last shot."""
        self.x, self.y = start_position(arena_width, arena_height)
        self.last_shot_time = None

    # Movement ────────────────────────────────────────────────────────────

    def move(self, direction: int, arena_width: float = ARENA_WIDTH) -> None:
        """Slide by ``speed * direction`` and clamp inside the arena."""
        self.x = clamp(
            self.x + self.speed * direction, 0, arena_width - self.width
        )

    # Firing ──────────────────────────────────────────────────────────────

    def can_fire(self, now: float) -> bool:
        if self.last_shot_time is None:
            return True
        return now - self.last_shot_time > self.shot_cooldown

    def fire(self, now: float) -> Optional[Projectile]:
        """Fire if the cooldown has elapsed.

        Returns the new projectile, or None while cooling down.
        """
        if not self.can_fire(now):
            return None
        self.last_shot_time = now
        return player_projectile(self)
