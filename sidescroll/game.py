"""Game state and the per-tick update."""

from __future__ import annotations

import random
import time
from enum import Enum, auto
from typing import Callable, Iterable, Optional

from .player import Player
from .timing import RateCounter
from .weapons import MAX_BULLETS, Bullet, BulletSource, default_weapons, update_bullets
from .weapons import RandomSource
from .world import World

TARGET_TPS = 60
TARGET_TICK_TIME = 1.0 / TARGET_TPS
GRAVITY = 0.1
MOVE_STEP = 0.01
DEATH_TEXT = "You have died!"


class Key(Enum):
    """Keys the game reacts to."""

    JUMP = auto()
    W = auto()
    UP = auto()
    S = auto()
    LEFT = auto()
    A = auto()
    RIGHT = auto()
    D = auto()
    WEAPON_1 = auto()
    WEAPON_2 = auto()
    WEAPON_3 = auto()
    SPACE = auto()


_WEAPON_KEYS = ((Key.WEAPON_1, 0), (Key.WEAPON_2, 1), (Key.WEAPON_3, 2))


class Game:
    """Everything that changes while playing: player, weapons, bullets, UI state."""

    def __init__(
        self,
        world: World,
        rng: Optional[RandomSource] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.world = world
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else time.perf_counter
        self.gravity = GRAVITY
        self.weapon_selected = 0
        self.weapon_fired = False
        self.weapon_upwards = False
        self.weapons = default_weapons()
        self.bullets: list[Bullet] = []
        self.player = Player()
        self.hint_box_visible = False
        self.hint_box_text = DEATH_TEXT
        now = self.clock()
        self.fps = RateCounter("FPS", now)
        self.tps = RateCounter("TPS", now)

    def reset(self) -> None:
        """Restart after death, keeping weapons and bullets."""
        self.player.reset()
        self.hint_box_visible = False
        self.hint_box_text = DEATH_TEXT
        now = self.clock()
        self.fps.reset(now)
        self.tps.reset(now)

    def handle_input(self, keys: Iterable[Key]) -> None:
        """Apply the set of currently held keys."""
        held = set(keys)
        if Key.JUMP in held:
            self.player.jump()
        # Both W and the up arrow are polled, but the arrow is checked last
        # and its state is the one that sticks.
        self.weapon_upwards = Key.UP in held
        for key in (Key.LEFT, Key.A):
            if key in held:
                self.player.horizontal_velocity -= MOVE_STEP
        for key in (Key.RIGHT, Key.D):
            if key in held:
                self.player.horizontal_velocity += MOVE_STEP
        for key, index in _WEAPON_KEYS:
            if key in held:
                self.weapon_selected = index
        if Key.SPACE in held:
            if self.hint_box_visible:
                self.hint_box_visible = False
                self.reset()
            else:
                self.weapon_fired = True

    def tick_due(self) -> bool:
        """Whether enough time has passed for the next game tick."""
        return self.tps.elapsed(self.clock()) >= TARGET_TICK_TIME

    def update(self) -> bool:
        """Count a frame and run a game tick if one is due; return whether it ran."""
        self.fps.tick(self.clock())
        if not self.tick_due():
            return False
        self.tps.tick(self.clock())

        if self.player.update(self.world, self.gravity):
            self.hint_box_visible = True
            self.hint_box_text = DEATH_TEXT

        self._update_weapon()
        update_bullets(self.bullets)
        return True

    def _update_weapon(self) -> None:
        weapon = self.weapons[self.weapon_selected]
        if self.weapon_fired:
            self.weapon_fired = False
            fired = weapon.fire(
                self.player.x,
                self.player.y,
                self.player.facing_direction,
                int(self.weapon_upwards),
                BulletSource.PLAYER,
                self.rng,
            )
            room = MAX_BULLETS - len(self.bullets)
            self.bullets.extend(fired[:max(0, room)])
        weapon.cool_down()