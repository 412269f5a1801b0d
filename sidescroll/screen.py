"""Character cell screen buffer with colour attributes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Iterable, TextIO

SCREEN_WIDTH = 180
SCREEN_HEIGHT = 45


class Color(IntFlag):
    """Console colour attribute bits."""

    BLACK = 0x00
    BLUE = 0x01
    GREEN = 0x02
    RED = 0x04
    INTENSITY = 0x08
    CYAN = 0x03
    YELLOW = 0x06
    WHITE = 0x07
    BACKGROUND_BLUE = 0x10
    BACKGROUND_GREEN = 0x20
    BACKGROUND_RED = 0x40
    BACKGROUND_INTENSITY = 0x80
    BACKGROUND_CYAN = 0x30
    BACKGROUND_WHITE = 0x70


BG_COLOR = Color.BLACK


class BorderThickness(Enum):
    LIGHT = 0
    MEDIUM = 1
    HEAVY = 2


class TextAlignment(Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


# horizontal, vertical, top-left, top-right, bottom-left, bottom-right
_BORDERS = {
    BorderThickness.LIGHT: "─│┌┐└┘",
    BorderThickness.MEDIUM: "═║╔╗╚╝",
    BorderThickness.HEAVY: "██████",
}

SAMPLE_BOX = (
    "╔═══╗",
    "║   ║",
    "║ █ ║",
    "║   ║",
    "╚═══╝",
)

# Console colour bit -> ANSI colour bit (ANSI orders red, green, blue).
_ANSI_BITS = (
    (int(Color.RED), 1),
    (int(Color.GREEN), 2),
    (int(Color.BLUE), 4),
)


def attributes(fg: int, bg: int) -> int:
    """Combine a foreground and background colour into one attribute word."""
    return (int(fg) | (int(bg) << 4)) & 0xFFFF


@dataclass(frozen=True)
class Cell:
    """One character cell."""

    char: str = " "
    attributes: int = int(BG_COLOR)


def _ansi_index(bits: int) -> int:
    """Map console colour bits to the ANSI 0-7 colour index."""
    index = 0
    for console_bit, ansi_bit in _ANSI_BITS:
        if bits & console_bit:
            index |= ansi_bit
    return index


def _sgr(attr: int) -> str:
    fg = attr & 0x0F
    bg = (attr >> 4) & 0x0F
    fg_code = (90 if fg & Color.INTENSITY else 30) + _ansi_index(fg)
    bg_code = (100 if bg & Color.INTENSITY else 40) + _ansi_index(bg)
    return f"\x1b[{fg_code};{bg_code}m"


class ScreenBuffer:
    """A width x height grid of cells drawn to as a flat buffer."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [Cell()] * (width * height)

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the screen")
        return self._cells[y * self.width + x]

    def clear(self) -> None:
        """Blank every cell."""
        self._cells = [Cell(" ", int(BG_COLOR))] * (self.width * self.height)

    def draw_char(self, x: int, y: int, ch: str, fg: int, bg: int) -> None:
        """Put a character at (x, y); positions past the buffer are ignored.

        The buffer is addressed linearly, so an x beyond the row width
        continues on the next row.
        """
        index = y * self.width + x
        if 0 <= index < len(self._cells):
            self._cells[index] = Cell(ch, attributes(fg, bg))

    def draw_hline(self, y: int, start_x: int, end_x: int, ch: str, fg: int, bg: int) -> None:
        """Draw ch from start_x up to, not including, end_x."""
        for x in range(start_x, end_x):
            self.draw_char(x, y, ch, fg, bg)

    def draw_vline(self, x: int, start_y: int, end_y: int, ch: str, fg: int, bg: int) -> None:
        """Draw ch from start_y up to, not including, end_y."""
        for y in range(start_y, end_y):
            self.draw_char(x, y, ch, fg, bg)

    def draw_text(
        self,
        x: int,
        end_x: int,
        y: int,
        text: str,
        fg: int,
        bg: int,
        alignment: TextAlignment,
    ) -> None:
        """Draw text aligned within columns x..end_x inclusive, truncating it."""
        span = end_x - x + 1
        if span <= 0:
            return
        text = text[:span]
        if alignment is TextAlignment.CENTER:
            start = x + (span - len(text)) // 2
        elif alignment is TextAlignment.RIGHT:
            start = end_x - len(text) + 1
        else:
            start = x
        for offset, ch in enumerate(text, start):
            if x <= offset <= end_x:
                self.draw_char(offset, y, ch, fg, bg)

    def draw_rect(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        fg: int,
        bg: int,
        thickness: BorderThickness,
    ) -> None:
        """Draw a rectangle outline."""
        horiz, vert, tl, tr, bl, br = _BORDERS.get(
            thickness, _BORDERS[BorderThickness.MEDIUM]
        )
        right = x + width - 1
        bottom = y + height - 1
        self.draw_hline(y, x, x + width, horiz, fg, bg)
        self.draw_hline(bottom, x, x + width, horiz, fg, bg)
        self.draw_vline(x, y, y + height, vert, fg, bg)
        self.draw_vline(right, y, y + height, vert, fg, bg)
        self.draw_char(x, y, tl, fg, bg)
        self.draw_char(right, y, tr, fg, bg)
        self.draw_char(x, bottom, bl, fg, bg)
        self.draw_char(right, bottom, br, fg, bg)

    def _row_cells(self) -> Iterable[list[Cell]]:
        for row in range(self.height):
            yield self._cells[row * self.width:(row + 1) * self.width]

    def rows(self) -> list[str]:
        """The characters of each row."""
        return ["".join(cell.char for cell in cells) for cells in self._row_cells()]

    def to_ansi(self) -> str:
        """Render the buffer as text with ANSI colour escapes."""
        current = None
        lines = []
        for cells in self._row_cells():
            parts = []
            for cell in cells:
                if cell.attributes != current:
                    current = cell.attributes
                    parts.append(_sgr(current))
                parts.append(cell.char)
            lines.append("".join(parts))
        return "\n".join(lines) + "\x1b[0m"


def print_unicode_array(stream: TextIO, rows: Iterable[str], fg: int, bg: int) -> None:
    """Write a rectangular block of characters in one colour to stream."""
    grid = list(rows)
    if not grid or not grid[0]:
        raise ValueError("nothing to print")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")
    buffer = ScreenBuffer(width, len(grid))
    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            buffer.draw_char(x, y, ch, int(fg) & 0x0F, int(bg) & 0x0F)
    stream.write(buffer.to_ansi())