"""The player character and its movement physics."""

from __future__ import annotations

from dataclasses import dataclass

from .world import WORLD_HEIGHT, WORLD_WIDTH, TileType, World

START_X = 5.0
START_Y = 5.0
JUMP_HEIGHT = 10.0
JUMP_VELOCITY = -1.5
FRICTION = 0.5

_RAMPS = (TileType.RAMP_UP, TileType.RAMP_DOWN)


def _tile_at(world: World, x: int, y: int) -> TileType:
    """Tile at (x, y), with everything outside the world counted as air."""
    if 0 <= x < WORLD_WIDTH and 0 <= y < WORLD_HEIGHT:
        return world.tile(x, y)
    return TileType.AIR


@dataclass
class Player:
    """Position, velocity and state of the player."""

    x: float = START_X
    y: float = START_Y
    vertical_velocity: float = 0.0
    horizontal_velocity: float = 0.0
    jump_height: float = JUMP_HEIGHT
    speed_limit: float = 1.0
    airborne: bool = True
    facing_direction: int = 1

    def reset(self) -> None:
        """Put the player back at the start, keeping speed limit and facing."""
        self.x = START_X
        self.y = START_Y
        self.vertical_velocity = 0.0
        self.horizontal_velocity = 0.0
        self.jump_height = JUMP_HEIGHT
        self.airborne = True

    def jump(self) -> None:
        """Start a jump if standing on something."""
        if not self.airborne:
            self.airborne = True
            self.vertical_velocity = JUMP_VELOCITY

    def update(self, world: World, gravity: float) -> bool:
        """Advance the player one tick; return True if the player has died."""
        if self.y >= WORLD_HEIGHT - 1:
            return True

        limit = self.speed_limit
        if self.horizontal_velocity > limit:
            self.horizontal_velocity = limit
        elif self.horizontal_velocity < -limit:
            self.horizontal_velocity = -limit

        ahead = _tile_at(world, int(self.x + self.horizontal_velocity), int(self.y))
        if self.x == 0 or ahead is TileType.GROUND:
            self.horizontal_velocity = 0.0

        self.x += self.horizontal_velocity

        if self.horizontal_velocity > 0:
            self.facing_direction = 1
        elif self.horizontal_velocity < 0:
            self.facing_direction = -1

        if self.x > WORLD_WIDTH - 2:
            self.x = WORLD_WIDTH - 2
        elif self.x < 1:
            self.x = 1

        if _tile_at(world, int(self.x), int(self.y)) in _RAMPS:
            self.y -= 1

        self.horizontal_velocity *= FRICTION

        if _tile_at(world, int(self.x), int(self.y) + 1) is TileType.AIR:
            self.airborne = True

        if self.airborne:
            self.vertical_velocity += gravity
            self.y += self.vertical_velocity
            ground = world.ground_level(int(self.x)) - 1
            if self.y >= ground:
                self.y = ground
                self.airborne = False
                self.vertical_velocity = 0.0
        return False