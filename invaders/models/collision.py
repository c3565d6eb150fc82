"""
Collision resolution for Invaders.

Resolution runs in two passes.  ``find_enemy_hits`` and
``find_player_hits`` only read state and return what was hit; the
caller (``resolve_collisions``) then applies every kill and removes
every spent projectile by filtering.  Nothing is removed from a list
while it is being scanned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from invaders.models.enemy import Enemy, Formation
from invaders.models.geometry import HasBox, intersects
from invaders.models.projectile import Projectile, ProjectileManager


@dataclass
class CollisionReport:
    """Outcome of one frame's collision pass."""

    killed: list[Enemy] = field(default_factory=list)
    spent: list[Projectile] = field(default_factory=list)
    player_hit: bool = False

    @property
    def kill_count(self) -> int:
        return len(self.killed)


# ── Detection (read-only) ───────────────────────────────────────────────────


def find_enemy_hits(
    projectiles: Sequence[Projectile], enemies: Sequence[Enemy]
) -> list[tuple[int, int]]:
    """Return (projectile_index, enemy_index) pairs for player shots.

    Each projectile claims at most one enemy: the first alive one, in
    formation order, that it overlaps and that no earlier projectile has
    already claimed this frame.
    """
    hits: list[tuple[int, int]] = []
    claimed: set[int] = set()
    for p_idx, projectile in enumerate(projectiles):
        for e_idx, enemy in enumerate(enemies):
            if not enemy.alive or e_idx in claimed:
                continue
            if intersects(projectile, enemy):
                hits.append((p_idx, e_idx))
                claimed.add(e_idx)
                break
    return hits


def find_player_hits(
    projectiles: Sequence[Projectile], player: HasBox
) -> list[int]:
    """Return indices of enemy shots overlapping *player*."""
    return [
        i for i, projectile in enumerate(projectiles)
        if intersects(projectile, player)
    ]


# ── Resolution ──────────────────────────────────────────────────────────────


def resolve_collisions(
    projectiles: ProjectileManager, formation: Formation, player: HasBox
) -> CollisionReport:
    """Detect all hits for this frame, then apply them.

    Killed enemies are flagged dead and every projectile that hit
    something is removed from its live set.  Scoring and phase changes
    are left to the caller, driven by the returned report.
    """
    player_shots = projectiles.player_projectiles
    enemy_shots = projectiles.enemy_projectiles

    enemy_hits = find_enemy_hits(player_shots, formation.enemies)
    player_hits = find_player_hits(enemy_shots, player)

    report = CollisionReport(player_hit=bool(player_hits))
    for p_idx, e_idx in enemy_hits:
        enemy = formation.enemies[e_idx]
        if enemy.kill():
            report.killed.append(enemy)
        report.spent.append(player_shots[p_idx])
    report.spent.extend(enemy_shots[i] for i in player_hits)

    projectiles.discard(report.spent)
    return report
