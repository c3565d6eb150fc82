"""
Configuration constants for Invaders.

All distances are in arena pixels (origin top-left, y increasing
downward) and all durations in milliseconds.
"""

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
ARENA_WIDTH: int = 800
ARENA_HEIGHT: int = 600
UPDATE_RATE: int = 60  # Hz – one step per display frame
TITLE: str = "Invaders"

# ---------------------------------------------------------------------------
# Player cannon
# ---------------------------------------------------------------------------
PLAYER_WIDTH: int = 50
PLAYER_HEIGHT: int = 20
PLAYER_SPEED: int = 5            # pixels per frame
PLAYER_BOTTOM_MARGIN: int = 10   # gap between cannon and arena bottom
PLAYER_SHOT_COOLDOWN: float = 500.0

# ---------------------------------------------------------------------------
# Enemy formation
# ---------------------------------------------------------------------------
ENEMY_WIDTH: int = 40
ENEMY_HEIGHT: int = 30
ENEMY_SPEED: int = 1             # pixels per frame
ENEMY_ROWS: int = 5
ENEMY_COLS: int = 10
ENEMY_HORIZONTAL_SPACING: int = 60
ENEMY_VERTICAL_SPACING: int = 40
ENEMY_ORIGIN_X: int = 50
ENEMY_ORIGIN_Y: int = 50
ENEMY_DESCENT: int = 20          # drop per bounce
ENEMY_SHOT_INTERVAL: float = 1000.0

# An alive enemy whose bottom edge passes this line has invaded.
INVASION_MARGIN: int = 50
INVASION_LINE: int = ARENA_HEIGHT - INVASION_MARGIN

# ---------------------------------------------------------------------------
# Projectiles
# ---------------------------------------------------------------------------
PROJECTILE_WIDTH: int = 5
PROJECTILE_HEIGHT: int = 10
PLAYER_PROJECTILE_SPEED: int = 7   # upward
ENEMY_PROJECTILE_SPEED: int = 3    # downward

# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------
POINTS_PER_ENEMY: int = 10

# ---------------------------------------------------------------------------
# Colors (RGB)
# ---------------------------------------------------------------------------
COLOR_BACKGROUND: tuple[int, int, int] = (0, 0, 0)
COLOR_PLAYER: tuple[int, int, int] = (0, 128, 0)
COLOR_ENEMY: tuple[int, int, int] = (255, 0, 0)
COLOR_PLAYER_PROJECTILE: tuple[int, int, int] = (255, 255, 0)
COLOR_ENEMY_PROJECTILE: tuple[int, int, int] = (255, 255, 255)
COLOR_TEXT: tuple[int, int, int] = (255, 255, 255)
COLOR_DEBUG: tuple[int, int, int] = (0, 255, 0)

# ---------------------------------------------------------------------------
# HUD fonts (pygame default font sizes)
# ---------------------------------------------------------------------------
FONT_SIZE_HUD: int = 28
FONT_SIZE_BANNER: int = 56
FONT_SIZE_DEBUG: int = 20
