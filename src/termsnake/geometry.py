# geometry.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Grid coordinates are unsigned 16-bit values.
COORD_MAX = 0xFFFF


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def _in_range(v: int) -> bool:
    return 0 <= v <= COORD_MAX


def checked_add(lhs: Point, rhs: Point) -> Optional[Point]:
    """Component-wise sum, or None if either coordinate leaves the coordinate range."""
    x, y = lhs.x + rhs.x, lhs.y + rhs.y
    if _in_range(x) and _in_range(y):
        return Point(x, y)
    return None


def checked_sub(lhs: Point, rhs: Point) -> Optional[Point]:
    """Component-wise difference, or None on underflow."""
    x, y = lhs.x - rhs.x, lhs.y - rhs.y
    if _in_range(x) and _in_range(y):
        return Point(x, y)
    return None


class Bounds:
    """
    Playfield rectangle from (1, 1) to (width, height).
    The outermost rows and columns are the wall, so only strictly
    interior points are inside.
    """

    def __init__(self, width: int, height: int):
        if width <= 1 or height <= 1:
            raise ValueError(f"Bounds must be larger than 1x1, got {width}x{height}")
        self.top_left = Point(1, 1)
        self.bottom_right = Point(width, height)
        self.width = width
        self.height = height

    def contains(self, pt: Point) -> bool:
        return (
            self.top_left.x < pt.x < self.bottom_right.x
            and self.top_left.y < pt.y < self.bottom_right.y
        )

    @property
    def center(self) -> Point:
        return Point(self.width // 2, self.height // 2)

    def interior(self):
        """Yield every point inside the wall, row by row."""
        for y in range(self.top_left.y + 1, self.bottom_right.y):
            for x in range(self.top_left.x + 1, self.bottom_right.x):
                yield Point(x, y)

    def __repr__(self) -> str:
        return f"Bounds({self.width}, {self.height})"


# ----- Directions (dx, dy), y grows downwards -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    def apply(self, pt: Point) -> Optional[Point]:
        """Move pt one cell this way; None when the move underflows/overflows."""
        dx, dy = self.delta
        if dx < 0 or dy < 0:
            return checked_sub(pt, Point(-dx, -dy))
        return checked_add(pt, Point(dx, dy))
