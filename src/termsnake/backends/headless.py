# headless.py
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from ..config import BLANK
from ..geometry import Point


class BufferRenderer:
    """
    In-memory Renderer: a width x height character grid plus a log of
    every call, so a run can be inspected or printed afterwards.
    Writes that fall outside the grid are dropped.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.calls: List[Tuple] = []
        self.flushes = 0
        self._grid = self._blank()

    def _blank(self) -> List[List[str]]:
        return [[BLANK] * self.width for _ in range(self.height)]

    def draw(self, position: Point, text: str) -> None:
        self.calls.append(("draw", position, text))
        row = position.y - 1
        if not 0 <= row < self.height:
            return
        for i, ch in enumerate(text):
            col = position.x - 1 + i
            if 0 <= col < self.width:
                self._grid[row][col] = ch

    def clear(self) -> None:
        self.calls.append(("clear",))
        self._grid = self._blank()
        self.update()

    def update(self) -> None:
        self.calls.append(("update",))
        self.flushes += 1

    def at(self, position: Point) -> str:
        return self._grid[position.y - 1][position.x - 1]

    def screen(self) -> str:
        return "".join("".join(row).rstrip() + "\n" for row in self._grid)


class ScriptedInput:
    """InputSource that replays a fixed key sequence, then reports no input."""

    def __init__(self, keys: Iterable[Optional[str]]):
        self._keys = list(keys)
        self._pos = 0

    @property
    def exhausted(self) -> bool:
        return self._pos >= len(self._keys)

    def last(self) -> Optional[str]:
        if self.exhausted:
            return None
        key = self._keys[self._pos]
        self._pos += 1
        return key
