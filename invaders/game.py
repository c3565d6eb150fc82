"""
Core game logic for Invaders.

Holds the whole simulation state in one ``Game`` value and advances it
one display frame at a time with ``Game.step``.  The step order is
fixed:

    1. move the player (clamped to the arena)
    2. player firing
    3. advance projectiles
    4. formation sweep, then formation firing
    5. collision resolution and scoring
    6. cull off-screen projectiles
    7. lose conditions, then the win condition

Losing takes precedence: a frame that both destroys the last enemy and
lets an enemy shot reach the player ends in ``GamePhase.LOST``.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from invaders.config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    INVASION_MARGIN,
    POINTS_PER_ENEMY,
)
from invaders.models.collision import CollisionReport, resolve_collisions
from invaders.models.enemy import Formation
from invaders.models.player import Player
from invaders.models.projectile import ProjectileManager
from invaders.utils.functions import is_valid_timestamp
from invaders.utils.input_handler import InputIntent

logger = logging.getLogger(__name__)


# ── Game phases ─────────────────────────────────────────────────────────────


class GamePhase(Enum):
    ACTIVE = "active"
    LOST = "lost"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self is not GamePhase.ACTIVE


# ── Game ────────────────────────────────────────────────────────────────────


@dataclass
class Game:
    """Top-level simulation state.

    Instances are fully independent; tests may build as many as they
    like in one process.  Pass a seeded ``random.Random`` as *rng* to
    make enemy targeting reproducible.

    With ``strict=True`` a step given a missing or malformed intent, or a
    non-finite timestamp, raises ``ValueError``; otherwise the step is skipped and a
    warning is logged.
    """

    arena_width: float = ARENA_WIDTH
    arena_height: float = ARENA_HEIGHT
    rng: random.Random = field(default_factory=random.Random, repr=False)
    strict: bool = False

    phase: GamePhase = field(default=GamePhase.ACTIVE, init=False)
    player: Player = field(init=False)
    formation: Formation = field(default_factory=Formation, init=False)
    projectiles: ProjectileManager = field(
        default_factory=ProjectileManager, init=False
    )
    score: int = field(default=0, init=False)
    frame_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.player = Player.spawn(self.arena_width, self.arena_height)

    # ── Read-only views for the renderer ────────────────────────────────

    @property
    def invasion_line(self) -> float:
        return self.arena_height - INVASION_MARGIN

    @property
    def is_terminal(self) -> bool:
        return self.phase.is_terminal

    # ── Lifecycle ───────────────────────────────────────────────────────

    def reset(self) -> None:
        """Reinitialise every entity to the startup layout.

        Valid in any phase; a reset while active restarts the round.
        """
        self.player.respawn(self.arena_width, self.arena_height)
        self.formation.reset()
        self.projectiles.reset()
        self.score = 0
        self.frame_count = 0
        if self.phase is not GamePhase.ACTIVE:
            logger.info("Reset from %s", self.phase.value)
        self.phase = GamePhase.ACTIVE

    # ── Per-frame update ────────────────────────────────────────────────

    def step(self, intent: InputIntent, now: float) -> None:
        """Advance the simulation by one frame.

        *now* is the host clock in milliseconds.  Does nothing once the
        game has reached a terminal phase.
        """
        if self.phase is not GamePhase.ACTIVE:
            return
        if not self._accept(intent, now):
            return

        self.frame_count += 1

        # 1-2. Player
        self.player.move(intent.direction, self.arena_width)
        if intent.fire:
            shot = self.player.fire(now)
            if shot is not None:
                self.projectiles.add(shot)

        # 3. Projectiles
        self.projectiles.update_all()

        # 4. Formation
        self.formation.update(self.arena_width)
        shot = self.formation.try_fire(now, self.rng)
        if shot is not None:
            self.projectiles.add(shot)

        # 5. Collisions
        report = resolve_collisions(self.projectiles, self.formation, self.player)
        if report.kill_count:
            self.score += report.kill_count * POINTS_PER_ENEMY

        # 6. Culling
        self.projectiles.cull(self.arena_height)

        # 7. Terminal conditions
        self._check_terminal(report)

    def _accept(self, intent: InputIntent, now: float) -> bool:
        """Validate the step inputs; reject or raise on a bad snapshot."""
        if intent is None:
            problem = "missing input intent"
        elif not isinstance(intent, InputIntent):
            problem = f"malformed input intent {intent!r}"
        elif not is_valid_timestamp(now):
            problem = f"invalid timestamp {now!r}"
        else:
            return True
        if self.strict:
            raise ValueError(f"step rejected: {problem}")
        logger.warning("Skipping step: %s", problem)
        return False

    def _check_terminal(self, report: CollisionReport) -> None:
        if report.player_hit or self.formation.has_invaded(self.invasion_line):
            self._set_phase(GamePhase.LOST)
        elif self.formation.all_destroyed:
            self._set_phase(GamePhase.WON)

    def _set_phase(self, phase: GamePhase) -> None:
        if phase is self.phase:
            return
        logger.info(
            "Phase %s -> %s at frame %d (score %d)",
            self.phase.value, phase.value, self.frame_count, self.score,
        )
        self.phase = phase
