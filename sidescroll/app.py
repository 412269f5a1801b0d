"""Terminal front end: console setup, keyboard mapping and the main loop."""

from __future__ import annotations

import argparse
import subprocess
import sys
from typing import Iterable, Optional, Sequence

from .game import Game, Key
from .render import render_frame
from .screen import SCREEN_HEIGHT, SCREEN_WIDTH, ScreenBuffer
from .world import SEED_MAP_FILE, World

RESIZE_SEQUENCE = f"\x1b[8;{SCREEN_HEIGHT};{SCREEN_WIDTH}t"
HIDE_CURSOR = "\x1b[?25l"
QUIT_KEY = "KEY_ESCAPE"

_NAMED_KEYS = {
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_UP": Key.UP,
}

# Terminals cannot report a bare Ctrl press, so jumping uses Ctrl+Space or 'z'.
_CHAR_KEYS = {
    "\x00": Key.JUMP,
    "z": Key.JUMP,
    "w": Key.W,
    "s": Key.S,
    "a": Key.A,
    "d": Key.D,
    "1": Key.WEAPON_1,
    "2": Key.WEAPON_2,
    "3": Key.WEAPON_3,
    " ": Key.SPACE,
}


def set_console_size() -> str:
    """Resize the console to the screen size and return the setup sequence.

    On Windows the console is resized with the ``mode`` command; elsewhere the
    returned escape sequence asks the terminal to resize. Either way the
    sequence also hides the cursor.
    """
    if sys.platform == "win32":
        subprocess.run(
            ["cmd", "/c", f"mode con cols={SCREEN_WIDTH} lines={SCREEN_HEIGHT}"],
            check=False,
        )
        return HIDE_CURSOR
    return RESIZE_SEQUENCE + HIDE_CURSOR


def keys_from_input(pressed: Iterable[str]) -> set[Key]:
    """Map keystrokes (plain strings or terminal keystrokes) to game keys."""
    keys: set[Key] = set()
    for stroke in pressed:
        name = getattr(stroke, "name", None)
        if name in _NAMED_KEYS:
            keys.add(_NAMED_KEYS[name])
            continue
        key = _CHAR_KEYS.get(str(stroke).lower())
        if key is not None:
            keys.add(key)
    return keys


def _pending_keys(term) -> list:
    strokes = []
    stroke = term.inkey(timeout=0)
    while stroke:
        strokes.append(stroke)
        stroke = term.inkey(timeout=0)
    return strokes


def run(game: Game, term, frames: Optional[int] = None) -> int:
    """Run the input/update/render loop; return the number of frames drawn.

    Stops after ``frames`` frames when given, or when Escape is pressed.
    """
    buffer = ScreenBuffer()
    drawn = 0
    while frames is None or drawn < frames:
        strokes = _pending_keys(term)
        if any(getattr(stroke, "name", None) == QUIT_KEY for stroke in strokes):
            break
        game.handle_input(keys_from_input(strokes))
        game.update()
        render_frame(buffer, game)
        term.stream.write(term.home + buffer.to_ansi())
        term.stream.flush()
        drawn += 1
    return drawn


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game in the current terminal."""
    parser = argparse.ArgumentParser(prog="sidescroll", description="Side-scrolling shooter.")
    parser.add_argument("--seed-map", default=SEED_MAP_FILE, help="seed map file")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    try:
        world = World.from_file(args.seed_map)
    except OSError as exc:
        print(f"Failed to open {args.seed_map}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"ERROR - Seed world not loaded: {exc}", file=sys.stderr)
        return 1

    from blessed import Terminal

    term = Terminal()
    game = Game(world)
    term.stream.write(set_console_size())
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        run(game, term, args.frames)
    return 0