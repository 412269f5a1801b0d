"""Drawing the game world and the interface into a screen buffer."""

from __future__ import annotations

from .game import Game
from .screen import (
    BG_COLOR,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    BorderThickness,
    Color,
    ScreenBuffer,
    TextAlignment,
)
from .world import WORLD_WIDTH, TileType

GAME_WIDTH = SCREEN_WIDTH
GAME_HEIGHT = 32
PANEL_TOP = 34
SEPARATOR_ROW = 33

_TILE_CHARS = {
    TileType.AIR: " ",
    TileType.GROUND: "█",
    TileType.RAMP_UP: "╱",
    TileType.RAMP_DOWN: "╲",
}

_WEAPON_SLOTS = (
    (3, "Weapon #1", "Pistol"),
    (3 + 25 + 2, "Weapon #2", "Shotgun"),
    (3 + 25 + 2 + 25 + 2, "Weapon #3", "Minigun"),
)
_SLOT_WIDTH = 25
_SLOT_HEIGHT = 10

_HINT_WIDTH = 48
_HINT_HEIGHT = 12


def _camera_x(game: Game) -> int:
    camera = int(game.player.x - GAME_WIDTH // 3)
    if camera < 0:
        camera = 0
    if camera + GAME_WIDTH > WORLD_WIDTH:
        camera = WORLD_WIDTH - SCREEN_WIDTH
    return camera


def draw_world(buffer: ScreenBuffer, game: Game) -> None:
    """Draw the visible part of the world, the player and the bullets."""
    camera = _camera_x(game)
    white = Color.WHITE
    for row in range(GAME_HEIGHT):
        for col in range(GAME_WIDTH):
            world_x = camera + col
            if 0 <= world_x < WORLD_WIDTH:
                tile = game.world.tile(world_x, row)
                buffer.draw_char(col, row + 1, _TILE_CHARS.get(tile, "█"), white, BG_COLOR)

    player_col = int(game.player.x - camera)
    buffer.draw_char(player_col, int(game.player.y), "█", Color.RED, BG_COLOR)
    buffer.draw_char(player_col, int(game.player.y + 1), "█", Color.RED, BG_COLOR)

    for bullet in game.bullets:
        offset = bullet.x - camera
        if offset > SCREEN_WIDTH or offset < 0:
            continue
        buffer.draw_char(int(offset), int(bullet.y), "⏺", Color.YELLOW, BG_COLOR)


def draw_ui(buffer: ScreenBuffer, game: Game) -> None:
    """Draw the frame, weapon panel, rate counters and the hint box."""
    white = Color.WHITE
    for row in range(PANEL_TOP, SCREEN_HEIGHT):
        buffer.draw_hline(row, 0, SCREEN_WIDTH, " ", white, BG_COLOR)

    buffer.draw_rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT, white, BG_COLOR, BorderThickness.MEDIUM)
    buffer.draw_hline(SEPARATOR_ROW, 0, SCREEN_WIDTH, "═", white, BG_COLOR)
    buffer.draw_char(0, SEPARATOR_ROW, "╠", white, BG_COLOR)
    buffer.draw_char(SCREEN_WIDTH - 1, SEPARATOR_ROW, "╣", white, BG_COLOR)

    for left, _, _ in _WEAPON_SLOTS:
        buffer.draw_rect(left, PANEL_TOP, _SLOT_WIDTH, _SLOT_HEIGHT, white, BG_COLOR,
                         BorderThickness.LIGHT)
    if 0 <= game.weapon_selected < len(_WEAPON_SLOTS):
        left = _WEAPON_SLOTS[game.weapon_selected][0]
        buffer.draw_rect(left, PANEL_TOP, _SLOT_WIDTH, _SLOT_HEIGHT, white, BG_COLOR,
                         BorderThickness.HEAVY)

    label_row = PANEL_TOP + 5 - 1
    for left, label, name in _WEAPON_SLOTS:
        right = left + _SLOT_WIDTH
        buffer.draw_text(left, right, label_row, label, white, BG_COLOR, TextAlignment.CENTER)
        buffer.draw_text(left, right, label_row + 1, name, white, BG_COLOR, TextAlignment.CENTER)

    buffer.draw_text(SCREEN_WIDTH - 15, SCREEN_WIDTH - 3, 1, game.fps.text,
                     white, BG_COLOR, TextAlignment.RIGHT)
    buffer.draw_text(SCREEN_WIDTH - 15, SCREEN_WIDTH - 3, 2, game.tps.text,
                     white, BG_COLOR, TextAlignment.RIGHT)

    if game.hint_box_visible:
        left = SCREEN_WIDTH // 2 - _HINT_WIDTH // 2
        top = SCREEN_HEIGHT // 2 - _HINT_HEIGHT // 2
        for row in range(top, top + _HINT_HEIGHT):
            buffer.draw_hline(row, left, left + _HINT_WIDTH, " ", white, BG_COLOR)
        buffer.draw_rect(left, top, _HINT_WIDTH, _HINT_HEIGHT, white, BG_COLOR,
                         BorderThickness.MEDIUM)
        right = SCREEN_WIDTH // 2 + _HINT_WIDTH // 2
        buffer.draw_text(left, right, top + 4, game.hint_box_text, white, BG_COLOR,
                         TextAlignment.CENTER)
        # The restart button passes its colours in swapped roles.
        buffer.draw_text(left, right, top + 7, " Restart ", Color.BACKGROUND_CYAN,
                         Color.BLACK, TextAlignment.CENTER)


def render_frame(buffer: ScreenBuffer, game: Game) -> None:
    """Clear the buffer and draw a complete frame."""
    buffer.clear()
    draw_world(buffer, game)
    draw_ui(buffer, game)