# terminal.py
from __future__ import annotations
from typing import Optional
import curses
import locale
import logging

from ..config import CFG, Config
from ..game import FixedRateScheduler, Game
from ..geometry import Bounds, Point

logger = logging.getLogger(__name__)


class CursesRenderer:
    """Renderer over a curses window. Game points are 1-based, curses cells 0-based."""

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def draw(self, position: Point, text: str) -> None:
        try:
            self.stdscr.addstr(position.y - 1, position.x - 1, text)
        except curses.error:
            # addstr reports an error after filling the bottom-right cell
            # because the cursor cannot advance past it.
            rows, cols = self.stdscr.getmaxyx()
            if (position.y, position.x + len(text) - 1) != (rows, cols):
                raise

    def clear(self) -> None:
        self.stdscr.erase()
        self.stdscr.move(0, 0)
        self.update()

    def update(self) -> None:
        self.stdscr.refresh()


class CursesInput:
    """Non-blocking keyboard reader keeping only the newest key per call."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        stdscr.nodelay(True)
        stdscr.keypad(True)

    def last(self) -> Optional[str]:
        key = None
        while True:
            code = self.stdscr.getch()
            if code == -1:
                return key
            key = curses.keyname(code).decode("utf-8", "replace")


def run_terminal(bounds: Bounds, config: Config = CFG) -> None:
    """Play in the current terminal until the player quits."""
    # box drawing glyphs need the user's locale
    locale.setlocale(locale.LC_ALL, "")

    def _main(stdscr):
        curses.curs_set(0)
        game = Game(CursesRenderer(stdscr), CursesInput(stdscr), bounds, config)
        game.run(FixedRateScheduler(config.tick_ms))

    logger.info("Starting terminal game on %r, tick %d ms", bounds, config.tick_ms)
    curses.wrapper(_main)
    logger.info("Terminal game finished")
