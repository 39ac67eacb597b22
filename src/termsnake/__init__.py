# __init__.py
"""Snake for the terminal: the game engine and its capability interfaces."""

from .geometry import Bounds, Direction, Point, checked_add, checked_sub
from .snake import Snake
from .interfaces import InputSource, Renderer
from .game import Begin, InGame, GameOver, Quit, Game, next_phase

__all__ = [
    "Bounds", "Direction", "Point", "checked_add", "checked_sub",
    "Snake", "InputSource", "Renderer",
    "Begin", "InGame", "GameOver", "Quit", "Game", "next_phase",
]
