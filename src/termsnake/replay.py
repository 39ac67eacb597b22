# replay.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union
import json

from .backends.headless import BufferRenderer, ScriptedInput
from .config import CFG, DEFAULT_WIDTH, DEFAULT_HEIGHT, Config
from .game import Game, Quit
from .geometry import Bounds


@dataclass(frozen=True)
class Replay:
    width: int
    height: int
    keys: List[Optional[str]]


def load_replay(path: Union[str, Path],
                width: Optional[int] = None,
                height: Optional[int] = None) -> Replay:
    """
    Read a key script: {"keys": ["KEY_UP", null, "q"], "width": 20, "height": 10}.
    width/height arguments override the file; both default to 70x30.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("replay must be a JSON object")

    keys = data.get("keys")
    if not isinstance(keys, list):
        raise ValueError("replay needs a 'keys' list")
    for k in keys:
        if k is not None and not isinstance(k, str):
            raise ValueError(f"invalid key in replay: {k!r}")

    w = width if width is not None else data.get("width", DEFAULT_WIDTH)
    h = height if height is not None else data.get("height", DEFAULT_HEIGHT)
    if not isinstance(w, int) or not isinstance(h, int) or w <= 1 or h <= 1:
        raise ValueError(f"invalid board size: {w!r}x{h!r}")

    return Replay(width=w, height=h, keys=keys)


def run_replay(replay: Replay, config: Config = CFG) -> Tuple[Game, BufferRenderer]:
    """Drive the engine with the scripted keys, one per tick, until Quit or the script ends."""
    renderer = BufferRenderer(replay.width, replay.height)
    source = ScriptedInput(replay.keys)
    game = Game(renderer, source, Bounds(replay.width, replay.height), config)
    while not source.exhausted and not isinstance(game.phase, Quit):
        game.tick()
    return game, renderer
