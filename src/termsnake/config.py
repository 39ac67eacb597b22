# config.py
from dataclasses import dataclass

# ----- Board -----
DEFAULT_WIDTH, DEFAULT_HEIGHT = 70, 30

# ----- Border glyphs -----
HORZ_BOUNDARY = "─"
VERT_BOUNDARY = "│"
TOP_LEFT_CORNER = "┌"
TOP_RIGHT_CORNER = "┐"
BOTTOM_LEFT_CORNER = "└"
BOTTOM_RIGHT_CORNER = "┘"

# ----- Sprites -----
SNAKE_HEAD = "@"
SNAKE_BODY = "■"
SNAKE_FOOD = "□"
BLANK = " "

GAME_OVER_TEXT = "Game Over"

# ----- Window colors (pygame backend) -----
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)
FONT_SIZE = 18

# ----- Food relocation policies -----
FOOD_SWAP = "swap"
FOOD_RANDOM = "random"
FOOD_POLICIES = (FOOD_SWAP, FOOD_RANDOM)

# ----- Tunables -----
@dataclass
class Config:
    tick_ms: int = 100
    food_policy: str = FOOD_SWAP
    seed: int = 0

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.food_policy not in FOOD_POLICIES:
            raise ValueError(f"Unknown food policy: {self.food_policy}")

CFG = Config()
