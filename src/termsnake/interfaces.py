# interfaces.py
from __future__ import annotations
from typing import Dict, Optional, Protocol

from .geometry import Direction, Point

# ----- Key vocabulary -----
# Printable keys are plain one-character strings; arrows use curses key names.
KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_QUIT = "q"
KEY_BEGIN = "b"

KEY_DIRECTIONS: Dict[str, Direction] = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}


def direction_for(key: Optional[str]) -> Optional[Direction]:
    """Arrow keys map to a direction; anything else means keep going."""
    if key is None:
        return None
    return KEY_DIRECTIONS.get(key)


class Renderer(Protocol):
    """Where the game draws. Points are 1-based terminal cells."""

    def draw(self, position: Point, text: str) -> None: ...

    def clear(self) -> None: ...

    def update(self) -> None: ...


class InputSource(Protocol):
    def last(self) -> Optional[str]:
        """Most recent key since the previous call, or None. Never blocks."""
        ...
