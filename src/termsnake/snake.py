# snake.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .geometry import Direction, Point


@dataclass(frozen=True)
class Snake:
    """
    Immutable snake snapshot.

    body runs from tail to head, so the head is always the last element.
    Every operation returns a new Snake; the engine validates a candidate
    before adopting it.
    """
    body: Tuple[Point, ...]
    direction: Direction

    def __post_init__(self):
        if not self.body:
            raise ValueError("Snake body must not be empty")

    @classmethod
    def new(cls, head: Point, direction: Direction) -> "Snake":
        return cls(body=(head,), direction=direction)

    @property
    def head(self) -> Point:
        return self.body[-1]

    @property
    def tail(self) -> Point:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.body)

    def crawl(self) -> "Snake":
        """Advance one cell without growing. Stalls if the move underflows."""
        new_head = self.direction.apply(self.head)
        if new_head is None:
            return self
        return Snake(body=self.body[1:] + (new_head,), direction=self.direction)

    def eat(self, food: Point) -> Optional["Snake"]:
        """Grow by one (duplicating the tail) if the head is on the food."""
        if self.head != food:
            return None
        return Snake(body=(self.tail,) + self.body, direction=self.direction)

    def update(self, requested: Optional[Direction]) -> "Snake":
        """Apply a turn (90° only, never a reversal) and crawl."""
        direction = self.direction
        if requested is not None and requested.is_vertical != direction.is_vertical:
            direction = requested
        turned = self if direction is self.direction else Snake(self.body, direction)
        return turned.crawl()

    def self_cross(self) -> bool:
        return len(self.body) > 1 and self.body.count(self.head) != 1
