"""
Enemies and the enemy formation for Invaders.

The formation is a rows × columns grid that sweeps sideways as one
block.  When any alive enemy would leave the arena the whole block
(dead slots included) drops by a fixed amount and reverses.  Dead
enemies are never removed from ``Formation.enemies``; they keep their
slot and keep moving so the grid stays aligned.

Every ``ENEMY_SHOT_INTERVAL`` ms one alive enemy, chosen uniformly at
random, fires downward.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from invaders.config import (
    ARENA_WIDTH,
    ENEMY_COLS,
    ENEMY_DESCENT,
    ENEMY_HEIGHT,
    ENEMY_HORIZONTAL_SPACING,
    ENEMY_ORIGIN_X,
    ENEMY_ORIGIN_Y,
    ENEMY_ROWS,
    ENEMY_SHOT_INTERVAL,
    ENEMY_SPEED,
    ENEMY_VERTICAL_SPACING,
    ENEMY_WIDTH,
    INVASION_LINE,
)
from invaders.models.geometry import Box
from invaders.models.projectile import Projectile, enemy_projectile

logger = logging.getLogger(__name__)


# ── Enemy ───────────────────────────────────────────────────────────────────


@dataclass
class Enemy(Box):
    """A single formation slot."""

    alive: bool = True

    def kill(self) -> bool:
        """Mark the enemy dead.

        Returns False if it was already dead, so a kill is only ever
        counted once.
        """
        if not self.alive:
            return False
        self.alive = False
        return True


def build_grid(
    rows: int = ENEMY_ROWS, cols: int = ENEMY_COLS
) -> list[Enemy]:
    """Create the startup grid, row-major from the top-left slot."""
    enemies: list[Enemy] = []
    for row in range(rows):
        for col in range(cols):
            enemies.append(Enemy(
                x=col * ENEMY_HORIZONTAL_SPACING + ENEMY_ORIGIN_X,
                y=row * ENEMY_VERTICAL_SPACING + ENEMY_ORIGIN_Y,
                width=ENEMY_WIDTH,
                height=ENEMY_HEIGHT,
            ))
    return enemies


# ── Formation ───────────────────────────────────────────────────────────────


@dataclass
class Formation:
    """The enemy grid, its sweep direction and its firing timer."""

    enemies: list[Enemy] = field(default_factory=build_grid)
    direction: int = 1
    speed: float = ENEMY_SPEED
    descent: float = ENEMY_DESCENT
    shot_interval: float = ENEMY_SHOT_INTERVAL
    last_shot_time: float = 0.0

    def reset(self) -> None:
        """Restore the startup grid, direction and firing timer."""
        self.enemies = build_grid()
        self.direction = 1
        self.last_shot_time = 0.0

    # Queries ─────────────────────────────────────────────────────────────

    @property
    def alive_enemies(self) -> list[Enemy]:
        return [e for e in self.enemies if e.alive]

    @property
    def alive_count(self) -> int:
        return sum(1 for e in self.enemies if e.alive)

    @property
    def all_destroyed(self) -> bool:
        return not any(e.alive for e in self.enemies)

    def has_invaded(self, line: float = INVASION_LINE) -> bool:
        """Return True if any alive enemy's bottom edge is past *line*."""
        return any(e.bottom > line for e in self.enemies if e.alive)

    # Movement ────────────────────────────────────────────────────────────

    def update(self, arena_width: float = ARENA_WIDTH) -> bool:
        """Sweep one frame; bounce and descend at the arena edges.

        Returns True if the formation bounced this frame.
        """
        step = self.speed * self.direction
        for enemy in self.enemies:
            enemy.x += step

        alive = self.alive_enemies
        if not alive:
            return False

        leftmost = min(e.left for e in alive)
        rightmost = max(e.right for e in alive)
        if leftmost < 0 or rightmost > arena_width:
            for enemy in self.enemies:
                enemy.y += self.descent
            self.direction = -self.direction
            logger.debug(
                "Formation bounced at x=[%s, %s], now heading %+d",
                leftmost, rightmost, self.direction,
            )
            return True
        return False

    # Firing ──────────────────────────────────────────────────────────────

    def try_fire(self, now: float, rng: random.Random) -> Optional[Projectile]:
        """Fire from a random alive enemy once the shot interval has passed.

        The timer is left untouched when no enemy is alive.
        """
        if now - self.last_shot_time <= self.shot_interval:
            return None
        alive = self.alive_enemies
        if not alive:
            return None
        shooter = rng.choice(alive)
        self.last_shot_time = now
        logger.debug("Enemy at (%s, %s) fired", shooter.x, shooter.y)
        return enemy_projectile(shooter)
