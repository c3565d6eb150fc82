"""
Main entry point for Invaders.

Initializes pygame, samples the keyboard into an ``InputIntent`` each
frame, steps the simulation at 60 Hz and draws the result.  The
simulation itself never touches pygame; this module is the only
renderer, input source and clock.

Usage:
    python main.py [OPTIONS]

Options:
    --fullscreen         Launch in fullscreen mode
    --scale N            Display scale multiplier (1-2, default: 1)
    --debug              Debug overlay, verbose logging, strict stepping
    --seed N             Seed enemy targeting for a reproducible game

Controls:
    Left / Right         Move the cannon
    Space                Fire
    R                    Restart after the round has ended
    Esc                  Quit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass, field
from typing import Optional

import pygame

from invaders.config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    COLOR_BACKGROUND,
    COLOR_DEBUG,
    COLOR_ENEMY,
    COLOR_ENEMY_PROJECTILE,
    COLOR_PLAYER,
    COLOR_PLAYER_PROJECTILE,
    COLOR_TEXT,
    FONT_SIZE_BANNER,
    FONT_SIZE_DEBUG,
    FONT_SIZE_HUD,
    TITLE,
    UPDATE_RATE,
)
from invaders.game import Game, GamePhase
from invaders.ui.text import BANNER_LOST, BANNER_WON, RESTART_HINT, ScoreDisplay
from invaders.utils.input_handler import GameAction, InputIntent

logger = logging.getLogger(__name__)


# ── Constants ───────────────────────────────────────────────────────────────

DEFAULT_SCALE: int = 1
MIN_SCALE: int = 1
MAX_SCALE: int = 2

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Discrete key presses, handled outside of Game.step
KEY_ACTIONS: dict[int, GameAction] = {
    pygame.K_r: GameAction.RESET,
    pygame.K_ESCAPE: GameAction.QUIT,
}


# ── Argument parsing ───────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Invaders – fixed-screen shoot-'em-up",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    parser.add_argument(
        "--scale", type=int, default=DEFAULT_SCALE,
        choices=range(MIN_SCALE, MAX_SCALE + 1),
        metavar="N",
        help=f"Display scale multiplier ({MIN_SCALE}-{MAX_SCALE}, default: {DEFAULT_SCALE})",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug overlay, debug logging and strict stepping",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        metavar="N",
        help="Seed for enemy targeting (random if omitted)",
    )
    return parser.parse_args(argv)


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
    )


# ── Input sampling ─────────────────────────────────────────────────────────


def intent_from_keys(pressed) -> InputIntent:
    """Build the frame's intent from a ``pygame.key.get_pressed()`` result."""
    return InputIntent(
        move_left=bool(pressed[pygame.K_LEFT]),
        move_right=bool(pressed[pygame.K_RIGHT]),
        fire=bool(pressed[pygame.K_SPACE]),
    )


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class InvadersApp:
    """Top-level application wrapper.

    Owns the pygame display, the game state, and the main loop.
    """

    scale: int = DEFAULT_SCALE
    fullscreen: bool = False
    debug: bool = False
    seed: Optional[int] = None

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    game: Game = field(init=False)
    score_display: ScoreDisplay = field(default_factory=ScoreDisplay)
    running: bool = False

    # Performance tracking
    frame_times: list[float] = field(default_factory=list)
    fps: float = 0.0

    def __post_init__(self) -> None:
        self.game = Game(rng=random.Random(self.seed), strict=self.debug)

    # ── Initialisation ──────────────────────────────────────────────────

    def init(self) -> bool:
        """Initialise pygame and create the display surface.

        Returns True on success, False on failure.
        """
        try:
            pygame.init()
        except pygame.error as exc:
            print(f"Error initialising pygame: {exc}", file=sys.stderr)
            return False

        width = ARENA_WIDTH * self.scale
        height = ARENA_HEIGHT * self.scale

        flags = 0
        if self.fullscreen:
            flags |= pygame.FULLSCREEN

        try:
            self.screen = pygame.display.set_mode((width, height), flags)
        except pygame.error as exc:
            print(f"Error creating display: {exc}", file=sys.stderr)
            pygame.quit()
            return False

        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True
        logger.info("Display %dx%d ready (seed=%s)", width, height, self.seed)
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Execute the main game loop at 60 FPS."""
        if not self.running:
            return

        try:
            while self.running:
                frame_start = time.perf_counter()

                self._handle_events()
                self._update(float(pygame.time.get_ticks()))
                self._render()

                self.clock.tick(UPDATE_RATE)

                elapsed = time.perf_counter() - frame_start
                self.frame_times.append(elapsed)
                if len(self.frame_times) > UPDATE_RATE:
                    self.frame_times.pop(0)
                avg = sum(self.frame_times) / len(self.frame_times)
                self.fps = 1.0 / avg if avg > 0 else 0.0
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    # ── Event handling ──────────────────────────────────────────────────

    def _request_reset(self) -> bool:
        """Restart the round, but only once it has ended."""
        if not self.game.is_terminal:
            return False
        self.game.reset()
        self.score_display.track(self.game.score)
        return True

    def _dispatch(self, action: GameAction) -> None:
        if action is GameAction.RESET:
            self._request_reset()
        elif action is GameAction.QUIT:
            self.running = False

    def _handle_events(self) -> None:
        """Process queued pygame events (quit and restart)."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._dispatch(KEY_ACTIONS.get(event.key, GameAction.NONE))

    # ── Game logic update ───────────────────────────────────────────────

    def _update(self, now: float) -> None:
        """Run one frame of game logic with the currently held keys."""
        self.game.step(intent_from_keys(pygame.key.get_pressed()), now)
        self.score_display.track(self.game.score)

    # ── Rendering ───────────────────────────────────────────────────────

    def _scaled(self, rect: tuple[float, float, float, float]) -> pygame.Rect:
        x, y, w, h = rect
        s = self.scale
        return pygame.Rect(round(x * s), round(y * s), round(w * s), round(h * s))

    def _render(self) -> None:
        """Execute the rendering pipeline."""
        if self.screen is None:
            return

        self.screen.fill(COLOR_BACKGROUND)

        if self.game.phase is GamePhase.ACTIVE:
            self._render_playing()
        else:
            self._render_banner()

        if self.debug:
            self._render_debug()

        pygame.display.flip()

    def _render_playing(self) -> None:
        game = self.game
        pygame.draw.rect(self.screen, COLOR_PLAYER, self._scaled(game.player.rect))
        for enemy in game.formation.enemies:
            if enemy.alive:
                pygame.draw.rect(self.screen, COLOR_ENEMY, self._scaled(enemy.rect))
        for shot in game.projectiles.player_projectiles:
            pygame.draw.rect(
                self.screen, COLOR_PLAYER_PROJECTILE, self._scaled(shot.rect)
            )
        for shot in game.projectiles.enemy_projectiles:
            pygame.draw.rect(
                self.screen, COLOR_ENEMY_PROJECTILE, self._scaled(shot.rect)
            )

        font = pygame.font.Font(None, FONT_SIZE_HUD * self.scale)
        score_surf = font.render(self.score_display.format_score(), True, COLOR_TEXT)
        self.screen.blit(score_surf, (10 * self.scale, 10 * self.scale))

    def _render_banner(self) -> None:
        """Draw the end-of-round screen with a restart hint."""
        w = ARENA_WIDTH * self.scale
        h = ARENA_HEIGHT * self.scale
        title = BANNER_WON if self.game.phase is GamePhase.WON else BANNER_LOST

        big = pygame.font.Font(None, FONT_SIZE_BANNER * self.scale)
        small = pygame.font.Font(None, FONT_SIZE_HUD * self.scale)
        lines = [
            big.render(title, True, COLOR_TEXT),
            small.render(self.score_display.format_score(), True, COLOR_TEXT),
            small.render(self.score_display.format_high_score(), True, COLOR_TEXT),
            small.render(RESTART_HINT, True, COLOR_TEXT),
        ]
        y = h // 2 - lines[0].get_height()
        for surf in lines:
            self.screen.blit(surf, (w // 2 - surf.get_width() // 2, y))
            y += surf.get_height() + 8 * self.scale

    def _render_debug(self) -> None:
        """Draw debug overlays (FPS, entity counts)."""
        font = pygame.font.Font(None, FONT_SIZE_DEBUG)
        game = self.game
        texts = [
            f"FPS: {self.fps:.1f}",
            f"Frame: {game.frame_count}",
            f"Enemies: {game.formation.alive_count}/{len(game.formation.enemies)}",
            f"Shots: {game.projectiles.player_count} up / "
            f"{game.projectiles.enemy_count} down",
            f"Phase: {game.phase.value}",
        ]
        y = ARENA_HEIGHT * self.scale - 18 * len(texts) - 5
        for text in texts:
            surface = font.render(text, True, COLOR_DEBUG)
            self.screen.blit(surface, (5, y))
            y += 18

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean up and quit pygame."""
        self.running = False
        pygame.quit()


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    configure_logging(args.debug)

    app = InvadersApp(
        scale=args.scale,
        fullscreen=args.fullscreen,
        debug=args.debug,
        seed=args.seed,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
