"""
UI text utilities for Invaders.

Score formatting for the HUD and the banner lines shown when a round ends.
"""

from __future__ import annotations

from dataclasses import dataclass

BANNER_LOST: str = "Game Over"
BANNER_WON: str = "You Win!"
RESTART_HINT: str = "Press R to restart"


@dataclass
class ScoreDisplay:
    """Mirrors the round score and keeps the best score of the session.

    The high score lives only in memory; it survives a reset but not a
    restart of the program.
    """

    player_score: int = 0
    high_score: int = 0

    def track(self, score: int) -> None:
        """Show *score* as the current score and update the high score."""
        if score < 0:
            raise ValueError(f"score must be non-negative, got {score}")
        self.player_score = score
        if score > self.high_score:
            self.high_score = score

    def format_score(self) -> str:
        return f"Score: {self.player_score}"

    def format_high_score(self) -> str:
        return f"High: {self.high_score}"
