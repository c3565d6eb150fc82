"""
Projectiles for Invaders.

Both factions fire the same fixed-size shot; the sign of ``speed``
encodes its direction (negative = upward for the player, positive =
downward for enemies).  ``ProjectileManager`` owns the two live sets
and only ever removes shots by rebuilding a list, never by deleting
while iterating.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

from invaders.config import (
    ARENA_HEIGHT,
    ENEMY_PROJECTILE_SPEED,
    PLAYER_PROJECTILE_SPEED,
    PROJECTILE_HEIGHT,
    PROJECTILE_WIDTH,
)
from invaders.models.geometry import Box, HasBox
from invaders.utils.functions import centered_x


class Faction(Enum):
    PLAYER = auto()
    ENEMY = auto()


# ── Projectile ──────────────────────────────────────────────────────────────


@dataclass
class Projectile(Box):
    """A single shot travelling vertically at a constant signed speed."""

    speed: float = 0.0
    faction: Faction = Faction.PLAYER

    def update(self) -> None:
        """Advance one frame."""
        self.y += self.speed

    def is_off_screen(self, arena_height: float = ARENA_HEIGHT) -> bool:
        """Return True once the shot has fully left the arena vertically.

        Player shots are only checked against the top edge and enemy
        shots against the bottom edge, matching their direction of travel.
        """
        if self.faction is Faction.PLAYER:
            return self.bottom <= 0
        return self.top >= arena_height


def player_projectile(shooter: HasBox) -> Projectile:
    """Spawn an upward shot centred on *shooter*, just above its top edge."""
    return Projectile(
        x=centered_x(shooter.x, shooter.width, PROJECTILE_WIDTH),
        y=shooter.y - PROJECTILE_HEIGHT,
        width=PROJECTILE_WIDTH,
        height=PROJECTILE_HEIGHT,
        speed=-PLAYER_PROJECTILE_SPEED,
        faction=Faction.PLAYER,
    )


def enemy_projectile(shooter: HasBox) -> Projectile:
    """Spawn a downward shot centred under *shooter*."""
    return Projectile(
        x=centered_x(shooter.x, shooter.width, PROJECTILE_WIDTH),
        y=shooter.y + shooter.height,
        width=PROJECTILE_WIDTH,
        height=PROJECTILE_HEIGHT,
        speed=ENEMY_PROJECTILE_SPEED,
        faction=Faction.ENEMY,
    )


# ── Projectile Manager ──────────────────────────────────────────────────────


@dataclass
class ProjectileManager:
    """Live projectile sets for both factions."""

    player_projectiles: list[Projectile] = field(default_factory=list)
    enemy_projectiles: list[Projectile] = field(default_factory=list)

    # Spawning ────────────────────────────────────────────────────────────

    def add(self, projectile: Projectile) -> None:
        """Add *projectile* to the live set of its faction."""
        if projectile.faction is Faction.PLAYER:
            self.player_projectiles.append(projectile)
        else:
            self.enemy_projectiles.append(projectile)

    # Per-frame ───────────────────────────────────────────────────────────

    def update_all(self) -> None:
        """Advance every live projectile one frame."""
        for projectile in self.player_projectiles:
            projectile.update()
        for projectile in self.enemy_projectiles:
            projectile.update()

    def discard(self, spent: Iterable[Projectile]) -> None:
        """Remove the given projectiles from the live sets.

        Matching is by identity, so two shots that happen to share a
        position are never confused with each other.
        """
        spent_ids = {id(p) for p in spent}
        if not spent_ids:
            return
        self.player_projectiles = [
            p for p in self.player_projectiles if id(p) not in spent_ids
        ]
        self.enemy_projectiles = [
            p for p in self.enemy_projectiles if id(p) not in spent_ids
        ]

    def cull(self, arena_height: float = ARENA_HEIGHT) -> int:
        """Drop shots that have left the arena.  Returns how many were dropped."""
        before = self.total_count
        self.player_projectiles = [
            p for p in self.player_projectiles if not p.is_off_screen(arena_height)
        ]
        self.enemy_projectiles = [
            p for p in self.enemy_projectiles if not p.is_off_screen(arena_height)
        ]
        return before - self.total_count

    def reset(self) -> None:
        self.player_projectiles = []
        self.enemy_projectiles = []

    # Queries ─────────────────────────────────────────────────────────────

    @property
    def player_count(self) -> int:
        return len(self.player_projectiles)

    @property
    def enemy_count(self) -> int:
        return len(self.enemy_projectiles)

    @property
    def total_count(self) -> int:
        return self.player_count + self.enemy_count
