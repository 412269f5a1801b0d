import pytest

from sidescroll.player import JUMP_VELOCITY, START_X, START_Y, Player
from sidescroll.world import WORLD_HEIGHT, WORLD_WIDTH, TileType, World

GRAVITY = 0.1


def _seed(rows):
    return World.from_text("\n".join(rows))


@pytest.fixture
def flat_world():
    return _seed(["." * 30, "." * 30, "." * 30, "G" * 30])


def _standing(world, x):
    return Player(x=x, y=world.ground_level(int(x)) - 1, airborne=False)


def test_reset_restores_start_but_keeps_facing():
    player = Player(x=100.0, y=20.0, vertical_velocity=2.0,
                    horizontal_velocity=0.7, airborne=False, facing_direction=-1)
    player.reset()
    assert (player.x, player.y) == (START_X, START_Y)
    assert player.vertical_velocity == 0
    assert player.horizontal_velocity == 0
    assert player.airborne is True
    assert player.facing_direction == -1


def test_jump_from_ground():
    player = Player(airborne=False)
    player.jump()
    assert player.airborne is True
    assert player.vertical_velocity == JUMP_VELOCITY


def test_jump_in_air_does_nothing():
    player = Player(airborne=True, vertical_velocity=0.3)
    player.jump()
    assert player.vertical_velocity == 0.3


def test_falls_onto_ground(flat_world):
    player = Player()
    for _ in range(200):
        assert player.update(flat_world, GRAVITY) is False
        if not player.airborne:
            break
    assert player.airborne is False
    assert player.y == flat_world.ground_level(int(player.x)) - 1
    assert player.vertical_velocity == 0


def test_speed_is_limited_and_friction_applied(flat_world):
    player = _standing(flat_world, 10)
    player.horizontal_velocity = 5.0
    player.update(flat_world, GRAVITY)
    assert player.x == 10 + player.speed_limit
    assert player.horizontal_velocity == player.speed_limit * 0.5
    assert player.facing_direction == 1
    assert player.airborne is False


def test_moving_left_faces_left(flat_world):
    player = _standing(flat_world, 10)
    player.horizontal_velocity = -0.5
    player.update(flat_world, GRAVITY)
    assert player.facing_direction == -1
    assert player.x < 10


def test_position_bounded_to_world(flat_world):
    player = _standing(flat_world, WORLD_WIDTH - 2)
    player.horizontal_velocity = 1.0
    player.update(flat_world, GRAVITY)
    assert player.x == WORLD_WIDTH - 2


def test_dead_when_at_bottom(flat_world):
    player = Player(x=10, y=WORLD_HEIGHT - 1)
    assert player.update(flat_world, GRAVITY) is True
    assert player.x == 10
    assert player.y == WORLD_HEIGHT - 1


def test_wall_stops_movement():
    world = _seed(["." * 30, "." * 30, "." + "G" + "." * 28, "G" * 30])
    player = _standing(world, 29)
    assert world.tile(30, int(player.y)) is TileType.GROUND
    player.horizontal_velocity = 1.0
    player.update(world, GRAVITY)
    assert player.x == 29
    assert player.horizontal_velocity == 0


def test_ramp_lifts_player():
    world = _seed(["." * 30, "." * 30, "." * 30, "G" + "U" + "G" * 28])
    assert world.tile(55, 26) is TileType.RAMP_UP
    player = Player(x=55, y=26, airborne=False)
    player.update(world, GRAVITY)
    assert player.y == 25
    assert player.airborne is False


def test_falling_with_no_ground_eventually_dies():
    world = _seed(["." * 30] * 4)
    player = Player()
    died = False
    for _ in range(500):
        if player.update(world, GRAVITY):
            died = True
            break
    assert died is True
    assert player.y >= WORLD_HEIGHT - 1