"""Tile world built from a coarse seed map of chunks."""

from __future__ import annotations

from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Iterable, Optional, Union

SEED_MAP_FILE = "seed_map.txt"

SEED_WORLD_WIDTH = 30
SEED_WORLD_HEIGHT = 4
WORLD_WIDTH = 900
WORLD_HEIGHT = 32
SKY_Y_BIAS = 8
CHUNK_WIDTH = WORLD_WIDTH // SEED_WORLD_WIDTH
CHUNK_HEIGHT = (WORLD_HEIGHT - SKY_Y_BIAS) // SEED_WORLD_HEIGHT

NO_GROUND = 99999
RAMP_STEP = 5


class TileType(Enum):
    """Kinds of tile a world cell can hold."""

    GROUND = 0
    RAMP_UP = 1
    RAMP_DOWN = 2
    HEALING = 3
    TRAP = 4
    AIR = 5
    STAR = 6


class FillType(Enum):
    """How a seed chunk is filled in the full world."""

    BLOCK = 0
    RAMP_UP = 1
    RAMP_DOWN = 2


_SEED_FILLS = {
    "G": FillType.BLOCK,
    "U": FillType.RAMP_UP,
    "D": FillType.RAMP_DOWN,
}


def parse_seed(text: str) -> tuple[str, ...]:
    """Split seed text into rows, ignoring line breaks.

    Only the first SEED_WORLD_WIDTH * SEED_WORLD_HEIGHT characters are used.
    """
    chars = [c for c in text if c not in "\r\n"]
    needed = SEED_WORLD_WIDTH * SEED_WORLD_HEIGHT
    if len(chars) < needed:
        raise ValueError(
            f"seed map needs {needed} characters, got {len(chars)}"
        )
    return tuple(
        "".join(chars[row * SEED_WORLD_WIDTH:(row + 1) * SEED_WORLD_WIDTH])
        for row in range(SEED_WORLD_HEIGHT)
    )


def _chunk_tile(fill: FillType, i: int, j: int) -> Optional[TileType]:
    """Tile placed at row i, column j inside a chunk, or None to leave it."""
    step = j // RAMP_STEP
    if fill is FillType.BLOCK:
        return TileType.GROUND
    if fill is FillType.RAMP_UP:
        if CHUNK_HEIGHT - 1 - i == step and j % RAMP_STEP == 0:
            return TileType.RAMP_UP
        if step >= CHUNK_HEIGHT - 1 - i:
            return TileType.GROUND
        return None
    if i == step and j % RAMP_STEP == RAMP_STEP - 1:
        return TileType.RAMP_DOWN
    if step <= i:
        return TileType.GROUND
    return None


class World:
    """The full tile map, generated from a seed map of chunk codes."""

    def __init__(self, seed_rows: Iterable[str]) -> None:
        rows = tuple(seed_rows)
        if len(rows) != SEED_WORLD_HEIGHT or any(
            len(row) != SEED_WORLD_WIDTH for row in rows
        ):
            raise ValueError(
                f"seed map must be {SEED_WORLD_HEIGHT} rows of "
                f"{SEED_WORLD_WIDTH} characters"
            )
        self.seed_rows = rows
        self._tiles: list[list[TileType]] = []
        self.generate()

    @classmethod
    def from_file(cls, path: Union[str, PathLike] = SEED_MAP_FILE) -> "World":
        """Load a world from a seed map file."""
        return cls.from_text(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def from_text(cls, text: str) -> "World":
        """Build a world from seed map text."""
        return cls(parse_seed(text))

    def generate(self) -> None:
        """Rebuild the tile map from the seed rows."""
        self._tiles = [[TileType.AIR] * WORLD_WIDTH for _ in range(WORLD_HEIGHT)]
        for y, row in enumerate(self.seed_rows):
            for x, code in enumerate(row):
                fill = _SEED_FILLS.get(code)
                if fill is not None:
                    self.fill_chunk(x, y, fill)

    def fill_chunk(self, x: int, y: int, fill: FillType) -> None:
        """Fill the chunk at seed coordinates (x, y)."""
        if not (0 <= x < SEED_WORLD_WIDTH and 0 <= y < SEED_WORLD_HEIGHT):
            raise IndexError(f"chunk ({x}, {y}) is outside the seed map")
        top = SKY_Y_BIAS + y * CHUNK_HEIGHT
        left = x * CHUNK_WIDTH
        for i in range(CHUNK_HEIGHT):
            row = self._tiles[top + i]
            for j in range(CHUNK_WIDTH):
                tile = _chunk_tile(fill, i, j)
                if tile is not None:
                    row[left + j] = tile

    def tile(self, x: int, y: int) -> TileType:
        """Tile at world coordinates (x, y)."""
        if not (0 <= x < WORLD_WIDTH and 0 <= y < WORLD_HEIGHT):
            raise IndexError(f"tile ({x}, {y}) is outside the world")
        return self._tiles[y][x]

    def ground_level(self, x: int) -> int:
        """Topmost row holding ground in column x, or NO_GROUND."""
        if not 0 <= x < WORLD_WIDTH:
            raise IndexError(f"column {x} is outside the world")
        return next(
            (y for y, row in enumerate(self._tiles) if row[x] is TileType.GROUND),
            NO_GROUND,
        )