# main.py
from __future__ import annotations
from typing import List, Optional
import argparse
import logging
import shutil
import sys

from .config import DEFAULT_WIDTH, DEFAULT_HEIGHT, FOOD_POLICIES, FOOD_SWAP, Config
from .geometry import Bounds

logger = logging.getLogger(__name__)


def terminal_size():
    """Columns and rows of the controlling terminal, 70x30 when unknown."""
    size = shutil.get_terminal_size((DEFAULT_WIDTH, DEFAULT_HEIGHT))
    return size.columns, size.lines


def setup_logging(log_file: Optional[str], level: str) -> None:
    # Never log to the terminal: it would scribble over the game.
    if log_file is None:
        root = logging.getLogger("termsnake")
        if not root.handlers:
            root.addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake in your terminal.")
    sub = parser.add_subparsers(dest="command")

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--width", type=int, default=None, help="board width (default: terminal width)")
        p.add_argument("--height", type=int, default=None, help="board height (default: terminal height)")
        p.add_argument("--food", choices=FOOD_POLICIES, default=FOOD_SWAP,
                       help="how food moves after it is eaten")
        p.add_argument("--seed", type=int, default=0, help="seed for --food random")
        p.add_argument("--tick-ms", type=int, default=100, help="milliseconds per tick")
        p.add_argument("--log-file", type=str, default=None, help="write logs here")
        p.add_argument("--log-level", type=str, default="info",
                       choices=["debug", "info", "warning", "error"])

    play = sub.add_parser("play", help="play the game (default)")
    add_common(play)
    play.add_argument("--backend", choices=["terminal", "window"], default="terminal",
                      help="curses in this terminal, or a pygame window")

    replay = sub.add_parser("replay", help="run a JSON key script headless and print the last frame")
    replay.add_argument("file", type=str)
    add_common(replay)
    return parser


def _config(args: argparse.Namespace) -> Config:
    return Config(tick_ms=args.tick_ms, food_policy=args.food, seed=args.seed)


def cmd_play(args: argparse.Namespace) -> int:
    cols, rows = terminal_size()
    width = cols if args.width is None else args.width
    height = rows if args.height is None else args.height
    bounds = Bounds(width, height)
    config = _config(args)
    if args.backend == "window":
        from .backends.window import run_window
        run_window(bounds, config)
    else:
        from .backends.terminal import run_terminal
        run_terminal(bounds, config)
    return 0


def cmd_replay(args: argparse.Namespace) -> int:
    from .replay import load_replay, run_replay
    try:
        replay = load_replay(args.file, args.width, args.height)
    except (OSError, ValueError) as e:
        print(f"termsnake: cannot load replay {args.file}: {e}", file=sys.stderr)
        return 1
    game, renderer = run_replay(replay, _config(args))
    sys.stdout.write(renderer.screen())
    logger.info("Replay finished in phase %s", type(game.phase).__name__)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    # bare `termsnake [options]` means play
    if not argv or argv[0] not in ("play", "replay", "-h", "--help"):
        argv = ["play"] + argv
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.log_level)
    try:
        if args.command == "replay":
            return cmd_replay(args)
        return cmd_play(args)
    except ValueError as e:
        logger.error("Invalid setup: %s", e)
        print(f"termsnake: {e}", file=sys.stderr)
        return 2
    except Exception:
        logger.exception("Game crashed")
        raise


if __name__ == "__main__":
    sys.exit(main())
