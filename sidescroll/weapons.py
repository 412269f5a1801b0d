"""Weapons and the bullets they fire."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from .world import WORLD_HEIGHT, WORLD_WIDTH

MAX_BULLETS = 2000
PI = 3.14159265
BASE_BULLET_SPEED = 5.0
RANDOM_SPEED_RANGE = 0.1


class RandomSource(Protocol):
    def random(self) -> float: ...


class BulletSource(Enum):
    """Who fired a bullet."""

    PLAYER = 0
    ENEMY = 1


@dataclass
class Bullet:
    """A bullet in flight."""

    x: float
    y: float
    velocity_x: float
    velocity_y: float
    damage: int
    source: BulletSource

    def advance(self) -> None:
        """Move the bullet by one tick of its velocity."""
        self.x += self.velocity_x
        self.y += self.velocity_y

    def out_of_bounds(self) -> bool:
        """Whether the bullet has left the world."""
        return not (0 <= self.x <= WORLD_WIDTH and 0 <= self.y <= WORLD_HEIGHT)


@dataclass
class Weapon:
    """A weapon's firing characteristics and cooldown state."""

    damage: int
    spread: float
    bullet_speed_multiplier: float
    bullet_count: int
    fire_cooldown_time: int
    fire_cooldown_counter: int = 0

    def fire(
        self,
        x: float,
        y: float,
        facing_direction: int,
        upwards: int,
        source: BulletSource,
        rng: Optional[RandomSource] = None,
    ) -> list[Bullet]:
        """Fire a volley, returning the new bullets; nothing while cooling down."""
        if self.fire_cooldown_counter > 0:
            return []
        self.fire_cooldown_counter = self.fire_cooldown_time
        draw = rng.random if rng is not None else random.random

        start_x, start_y = int(x), int(y)
        base_angle = math.atan2(int(upwards), facing_direction)
        bullets = []
        for _ in range(self.bullet_count):
            angle_offset = draw() * self.spread - self.spread / 2.0
            angle = base_angle + angle_offset * (PI / 180.0)
            speed_jitter = (
                1.0 + draw() * RANDOM_SPEED_RANGE - RANDOM_SPEED_RANGE / 2.0
            )
            speed = BASE_BULLET_SPEED * self.bullet_speed_multiplier * speed_jitter
            bullets.append(
                Bullet(
                    x=start_x,
                    y=start_y,
                    velocity_x=math.cos(angle) * speed,
                    velocity_y=math.sin(angle) * speed,
                    damage=self.damage,
                    source=source,
                )
            )
        return bullets

    def cool_down(self) -> None:
        """Count the cooldown down by one tick, stopping at zero."""
        self.fire_cooldown_counter = max(0, self.fire_cooldown_counter - 1)


def default_weapons() -> list[Weapon]:
    """The pistol, shotgun and minigun."""
    return [
        Weapon(damage=10, spread=3.0, bullet_speed_multiplier=0.7,
               bullet_count=1, fire_cooldown_time=20),
        Weapon(damage=10, spread=10.0, bullet_speed_multiplier=0.7,
               bullet_count=5, fire_cooldown_time=60),
        Weapon(damage=10, spread=7.0, bullet_speed_multiplier=1.0,
               bullet_count=1, fire_cooldown_time=3),
    ]


def update_bullets(bullets: list[Bullet]) -> None:
    """Advance every bullet in place and drop those that left the world."""
    for bullet in bullets:
        bullet.advance()
    bullets[:] = [bullet for bullet in bullets if not bullet.out_of_bounds()]