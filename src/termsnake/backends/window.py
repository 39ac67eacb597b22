# window.py
from __future__ import annotations
from typing import Dict, Optional, Tuple
import logging

import pygame # type: ignore

from ..config import (
    BLANK, SNAKE_HEAD, SNAKE_BODY, SNAKE_FOOD,
    BG, GREEN, RED, TEXT, FONT_SIZE,
    CFG, Config,
)
from ..game import Game
from ..geometry import Bounds, Point
from ..interfaces import KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_QUIT

logger = logging.getLogger(__name__)

ARROWS = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
}

GLYPH_COLORS = {
    SNAKE_HEAD: GREEN,
    SNAKE_BODY: GREEN,
    SNAKE_FOOD: RED,
}


class PygameRenderer:
    """
    Draws the game's character cells into a pygame window.
    Cells are buffered by draw() and painted all at once by update().
    """

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font):
        self.screen = screen
        self.font = font
        self.cell_w, self.cell_h = font.size("M")
        self._cells: Dict[Tuple[int, int], str] = {}

    def draw(self, position: Point, text: str) -> None:
        for i, ch in enumerate(text):
            self._cells[(position.x + i, position.y)] = ch

    def clear(self) -> None:
        self._cells.clear()
        self.update()

    def update(self) -> None:
        self.screen.fill(BG)
        for (x, y), ch in self._cells.items():
            if ch == BLANK:
                continue
            glyph = self.font.render(ch, True, GLYPH_COLORS.get(ch, TEXT))
            self.screen.blit(glyph, ((x - 1) * self.cell_w, (y - 1) * self.cell_h))
        pygame.display.flip()


class PygameInput:
    """Drains the pygame event queue; closing the window counts as 'q' from then on."""

    def __init__(self):
        self.closed = False

    def last(self) -> Optional[str]:
        key = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True
            elif event.type == pygame.KEYDOWN:
                key = ARROWS.get(event.key) or event.unicode or None
        if self.closed:
            return KEY_QUIT
        return key


def run_window(bounds: Bounds, config: Config = CFG) -> None:
    """Play in a pygame window sized to the board."""
    pygame.init()
    try:
        font = pygame.font.SysFont("dejavusansmono,menlo,consolas,monospace", FONT_SIZE)
        cell_w, cell_h = font.size("M")
        screen = pygame.display.set_mode((bounds.width * cell_w, bounds.height * cell_h))
        pygame.display.set_caption("termsnake")
        clock = pygame.time.Clock()

        game = Game(PygameRenderer(screen, font), PygameInput(), bounds, config)
        logger.info("Starting window game on %r, tick %d ms", bounds, config.tick_ms)
        game.run(lambda: clock.tick(1000 / config.tick_ms))
    finally:
        pygame.quit()
