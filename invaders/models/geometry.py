"""
Axis-aligned bounding boxes for Invaders.

Every entity in the arena is a ``Box``: origin at the top-left corner,
y increasing downward.  ``intersects`` is the single hit test used by
all collision checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class HasBox(Protocol):
    x: float
    y: float
    width: float
    height: float


@dataclass
class Box:
    """Axis-aligned rectangle in arena coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """(x, y, width, height), as a renderer expects it."""
        return (self.x, self.y, self.width, self.height)


def intersects(a: HasBox, b: HasBox) -> bool:
    """Return True if *a* and *b* overlap by a non-zero amount on both axes.

    Boxes that only share an edge or a corner do not intersect.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )
