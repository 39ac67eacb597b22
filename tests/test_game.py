from __future__ import annotations

import logging
import random
from typing import List, Optional

import pytest

from termsnake.backends.headless import BufferRenderer, ScriptedInput
from termsnake.config import SNAKE_BODY, SNAKE_FOOD, SNAKE_HEAD, Config
from termsnake.game import (
    Begin,
    FixedRateScheduler,
    Game,
    GameOver,
    InGame,
    Quit,
    draw_border,
    next_phase,
    random_food,
    swap_food,
)
from termsnake.geometry import Bounds, Direction, Point
from termsnake.interfaces import KEY_LEFT, KEY_UP
from termsnake.snake import Snake


def make_game(keys: List[Optional[str]], width: int = 10, height: int = 10, **cfg) -> Game:
    return Game(BufferRenderer(width, height), ScriptedInput(keys), Bounds(width, height), Config(**cfg))


# ---------- transition table ----------
@pytest.mark.parametrize("key", [None, "x", "q", "b", KEY_UP])
def test_begin_always_enters_game(key: Optional[str]) -> None:
    assert next_phase(Begin(), key) == InGame(key)


def test_in_game_transitions() -> None:
    assert next_phase(InGame("x"), "q") == Quit()
    assert next_phase(InGame(None), KEY_LEFT) == InGame(KEY_LEFT)
    assert next_phase(InGame(KEY_LEFT), None) == InGame(None)


@pytest.mark.parametrize("key", [None, "x", KEY_UP])
def test_game_over_self_loops(key: Optional[str]) -> None:
    assert next_phase(GameOver(), key) == GameOver()


def test_game_over_exits() -> None:
    assert next_phase(GameOver(), "b") == Begin()
    assert next_phase(GameOver(), "q") == Quit()


@pytest.mark.parametrize("key", [None, "b", "q"])
def test_quit_is_terminal(key: Optional[str]) -> None:
    assert next_phase(Quit(), key) == Quit()


# ---------- engine ----------
def test_begin_tick_draws_border() -> None:
    game = make_game(["x"], width=6, height=5)
    assert game.tick() == InGame("x")

    screen = game.renderer.screen().splitlines()
    assert screen == ["┌────┐", "│    │", "│    │", "│    │", "└────┘"]
    assert game.renderer.calls[0] == ("clear",)
    assert game.renderer.calls[-1] == ("update",)


def test_snake_driven_into_wall_ends_game() -> None:
    game = make_game([None] * 5)
    game.tick()
    assert game.snake.head == Point(5, 5)

    phases = [game.tick() for _ in range(3)]
    assert all(isinstance(p, InGame) for p in phases)
    assert game.snake.head == Point(5, 2)

    # next step would land on the wall row
    assert game.tick() == GameOver()
    assert game.snake.head == Point(5, 2)


def test_quit_wins_on_colliding_tick() -> None:
    game = make_game([None, None, None, None, "q"])
    for _ in range(4):
        game.tick()
    assert game.tick() == Quit()


def test_eating_grows_and_swaps_food() -> None:
    game = make_game([None, KEY_LEFT, None, None, KEY_UP, None, None])
    assert game.food == Point(2, 3)
    for _ in range(6):
        game.tick()

    assert game.snake.head == Point(2, 3)
    assert len(game.snake) == 2
    assert game.food == Point(3, 2)
    assert game.renderer.at(Point(2, 3)) == SNAKE_HEAD
    assert game.renderer.at(Point(3, 2)) == SNAKE_FOOD

    game.tick()
    assert game.snake.body == (Point(2, 3), Point(2, 2))
    assert game.renderer.at(Point(2, 3)) == SNAKE_BODY
    assert game.renderer.at(Point(2, 2)) == SNAKE_HEAD


def test_in_game_erases_previous_cells() -> None:
    game = make_game([None, None])
    game.tick()
    game.tick()
    assert game.renderer.at(Point(5, 5)) == " "
    assert game.renderer.at(Point(5, 4)) == SNAKE_HEAD


def test_snake_is_drawn_over_food() -> None:
    game = make_game(["x"])
    game.phase = InGame()
    game.snake = Snake(body=(Point(3, 5), Point(4, 5)), direction=Direction.RIGHT)
    game.food = Point(4, 5)
    game.tick()

    assert game.snake.body == (Point(4, 5), Point(5, 5))
    assert game.renderer.at(Point(4, 5)) == SNAKE_BODY
    draws = [c for c in game.renderer.calls if c[0] == "draw"]
    assert draws.index(("draw", Point(4, 5), SNAKE_FOOD)) < draws.index(("draw", Point(4, 5), SNAKE_BODY))


def test_self_cross_ends_game_without_committing() -> None:
    game = make_game(["x"])
    game.phase = InGame()
    looped = Snake(
        body=(Point(4, 3), Point(4, 4), Point(5, 4), Point(5, 5), Point(4, 5)),
        direction=Direction.UP,
    )
    game.snake = looped
    assert game.tick() == GameOver()
    assert game.snake is looped


def test_game_over_screen_then_restart() -> None:
    game = make_game([None] * 5 + ["x", "b", None])
    for _ in range(5):
        game.tick()
    assert game.phase == GameOver()

    assert game.tick() == GameOver()
    assert "Game Over" in game.renderer.screen()

    assert game.tick() == Begin()
    game.tick()
    assert game.snake.body == (Point(5, 5),)
    assert game.food == Point(2, 3)
    assert isinstance(game.phase, InGame)


def test_run_stops_after_quit_body() -> None:
    game = make_game([None, "q", None])
    paced = []
    game.run(lambda: paced.append(game.phase))

    assert paced == [InGame(None), Quit()]
    assert game.phase == Quit()
    assert game.renderer.calls[-2:] == [("clear",), ("update",)]


# ---------- food ----------
def test_swap_food_warns_when_unreachable(caplog: pytest.LogCaptureFixture) -> None:
    bounds = Bounds(10, 10)
    snake = Snake.new(Point(5, 5), Direction.UP)
    with caplog.at_level(logging.WARNING, logger="termsnake.game"):
        moved = swap_food(Point(2, 40), snake, bounds, random.Random(0))
    assert moved == Point(40, 2)
    assert "outside" in caplog.text


def test_random_food_picks_free_cell() -> None:
    bounds = Bounds(4, 4)
    snake = Snake(body=(Point(2, 2), Point(3, 2), Point(3, 3)), direction=Direction.DOWN)
    assert random_food(Point(3, 3), snake, bounds, random.Random(1)) == Point(2, 3)

    full = Snake(body=(Point(2, 2), Point(3, 2), Point(3, 3), Point(2, 3)), direction=Direction.LEFT)
    assert random_food(Point(3, 3), full, bounds, random.Random(1)) == Point(3, 3)


def test_random_policy_is_used_by_game() -> None:
    game = make_game([None, KEY_LEFT, None, None, KEY_UP, None], food_policy="random", seed=3)
    for _ in range(6):
        game.tick()
    assert len(game.snake) == 2
    assert game.bounds.contains(game.food)
    assert game.food not in game.snake.body


# ---------- helpers ----------
def test_draw_border_corners() -> None:
    r = BufferRenderer(5, 4)
    draw_border(r, 5, 4)
    assert r.screen().splitlines() == ["┌───┐", "│   │", "│   │", "└───┘"]


def test_fixed_rate_scheduler_sleeps_remainder() -> None:
    now = [0.0]
    slept = []

    def sleep(s: float) -> None:
        slept.append(round(s, 3))
        now[0] += s

    pace = FixedRateScheduler(100, clock=lambda: now[0], sleep=sleep)
    now[0] += 0.03
    pace()
    now[0] += 0.25
    pace()
    assert slept == [0.07]


def test_config_validation() -> None:
    with pytest.raises(ValueError):
        Config(tick_ms=0)
    with pytest.raises(ValueError):
        Config(food_policy="teleport")
