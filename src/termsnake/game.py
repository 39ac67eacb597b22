# game.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Union
import logging
import random
import time

from .config import (
    BLANK, SNAKE_HEAD, SNAKE_BODY, SNAKE_FOOD, GAME_OVER_TEXT,
    HORZ_BOUNDARY, VERT_BOUNDARY,
    TOP_LEFT_CORNER, TOP_RIGHT_CORNER, BOTTOM_LEFT_CORNER, BOTTOM_RIGHT_CORNER,
    FOOD_RANDOM, CFG, Config,
)
from .geometry import Bounds, Direction, Point
from .interfaces import InputSource, Renderer, KEY_BEGIN, KEY_QUIT, direction_for
from .snake import Snake

logger = logging.getLogger(__name__)

# ---------- Phases ----------
@dataclass(frozen=True)
class Begin:
    pass

@dataclass(frozen=True)
class InGame:
    key: Optional[str] = None   # last key observed

@dataclass(frozen=True)
class GameOver:
    pass

@dataclass(frozen=True)
class Quit:
    pass

Phase = Union[Begin, InGame, GameOver, Quit]


def next_phase(phase: Phase, key: Optional[str]) -> Phase:
    """Pick the phase for the next tick from the current phase and this tick's key."""
    if isinstance(phase, Begin):
        return InGame(key)
    if isinstance(phase, InGame):
        return Quit() if key == KEY_QUIT else InGame(key)
    if isinstance(phase, GameOver):
        if key == KEY_BEGIN:
            return Begin()
        if key == KEY_QUIT:
            return Quit()
        return phase
    return phase

# ---------- Helpers ----------
def draw_border(renderer: Renderer, width: int, height: int) -> None:
    """Frame the board: rows 1 and height, columns 1 and width."""
    horz = HORZ_BOUNDARY * (width - 2)
    renderer.draw(Point(1, 1), TOP_LEFT_CORNER + horz + TOP_RIGHT_CORNER)
    for y in range(2, height):
        renderer.draw(Point(1, y), VERT_BOUNDARY)
        renderer.draw(Point(width, y), VERT_BOUNDARY)
    renderer.draw(Point(1, height), BOTTOM_LEFT_CORNER + horz + BOTTOM_RIGHT_CORNER)

def initial_snake(bounds: Bounds) -> Snake:
    return Snake.new(bounds.center, Direction.UP)

def initial_food(bounds: Bounds) -> Point:
    return Point(bounds.width // 4, bounds.height // 3)

def swap_food(food: Point, snake: Snake, bounds: Bounds, rng: random.Random) -> Point:
    # Placeholder relocation: no re-roll on overlap or when off the board.
    moved = Point(food.y, food.x)
    if not bounds.contains(moved):
        logger.warning("Relocated food %s lies outside %r and cannot be reached", moved, bounds)
    elif moved in snake.body:
        logger.warning("Relocated food %s overlaps the snake", moved)
    return moved

def random_food(food: Point, snake: Snake, bounds: Bounds, rng: random.Random) -> Point:
    occupied = set(snake.body)
    free = [p for p in bounds.interior() if p not in occupied]
    if not free:
        return food
    return rng.choice(free)

FoodPolicy = Callable[[Point, Snake, Bounds, random.Random], Point]

def food_policy(name: str) -> FoodPolicy:
    return random_food if name == FOOD_RANDOM else swap_food

# ---------- Pacing ----------
class FixedRateScheduler:
    """Sleeps whatever is left of the tick interval since the previous call."""

    def __init__(self, interval_ms: int,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self.interval = interval_ms / 1000.0
        self._clock = clock
        self._sleep = sleep
        self._before = clock()

    def __call__(self) -> None:
        elapsed = self._clock() - self._before
        if elapsed < self.interval:
            self._sleep(self.interval - elapsed)
        self._before = self._clock()

# ---------- Engine ----------
class Game:
    """
    The snake state machine. Owns the snake, the food and the phase, and
    talks to the outside world only through a Renderer and an InputSource.
    """

    def __init__(self, renderer: Renderer, input_source: InputSource,
                 bounds: Bounds, config: Config = CFG):
        self.renderer = renderer
        self.input = input_source
        self.bounds = bounds
        self.config = config
        self.rng = random.Random(config.seed)
        self.relocate_food = food_policy(config.food_policy)
        self.snake = initial_snake(bounds)
        self.food = initial_food(bounds)
        self.phase: Phase = Begin()

    def tick(self) -> Phase:
        """Run one tick: sample input, run the phase body, transition."""
        key = self.input.last()
        phase = self.phase

        if isinstance(phase, Begin):
            self._begin()
        elif isinstance(phase, InGame):
            phase = self._play(key)
        elif isinstance(phase, GameOver):
            self._game_over()
        else:
            self.renderer.clear()

        nxt = next_phase(phase, key)
        if type(nxt) is not type(self.phase):
            logger.debug("Phase %s -> %s (key=%r)", type(self.phase).__name__, type(nxt).__name__, key)
        self.phase = nxt
        return nxt

    def run(self, pace: Callable[[], None]) -> None:
        """Tick until the Quit phase has run, calling pace() between ticks."""
        while True:
            quitting = isinstance(self.phase, Quit)
            self.tick()
            if quitting:
                return
            pace()

    # --- phase bodies ---
    def _begin(self) -> None:
        # fresh board, also after `b` restarts from GameOver
        self.snake = initial_snake(self.bounds)
        self.food = initial_food(self.bounds)
        self.renderer.clear()
        draw_border(self.renderer, self.bounds.width, self.bounds.height)
        self.renderer.update()

    def _play(self, key: Optional[str]) -> Phase:
        for cell in self.snake:
            self.renderer.draw(cell, BLANK)

        candidate = self.snake.update(direction_for(key))
        if not self.bounds.contains(candidate.head):
            logger.info("Game over: hit the wall at %s", candidate.head)
            self.renderer.update()
            return GameOver()
        if candidate.self_cross():
            logger.info("Game over: crossed itself at %s", candidate.head)
            self.renderer.update()
            return GameOver()

        self.snake = candidate
        grown = self.snake.eat(self.food)
        if grown is not None:
            self.snake = grown
            self.food = self.relocate_food(self.food, grown, self.bounds, self.rng)
            logger.debug("Ate food, length now %d", len(grown))

        # swapped food may land on the wall or off screen
        if self.bounds.contains(self.food):
            self.renderer.draw(self.food, SNAKE_FOOD)
        self._draw_snake()
        self.renderer.update()
        return self.phase

    def _draw_snake(self) -> None:
        for cell in self.snake.body[:-1]:
            self.renderer.draw(cell, SNAKE_BODY)
        self.renderer.draw(self.snake.head, SNAKE_HEAD)

    def _game_over(self) -> None:
        self.renderer.clear()
        pos = Point(max((self.bounds.width - len(GAME_OVER_TEXT)) // 2, 1), self.bounds.height // 2)
        self.renderer.draw(pos, GAME_OVER_TEXT)
        self.renderer.update()
