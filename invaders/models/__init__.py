from invaders.models.geometry import Box, intersects
from invaders.models.projectile import Faction, Projectile, ProjectileManager
from invaders.models.player import Player
from invaders.models.enemy import Enemy, Formation
from invaders.models.collision import CollisionReport, resolve_collisions

__all__ = [
    "Box", "intersects",
    "Faction", "Projectile", "ProjectileManager",
    "Player",
    "Enemy", "Formation",
    "CollisionReport", "resolve_collisions",
]
