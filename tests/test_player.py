import math

import pytest

from cubed.player import Controls, Player, rotate_vector
from cubed.scene import Direction, parse_map

GRID = parse_map(["11111\n", "10001\n", "10N01\n", "10001\n", "11111\n"])


@pytest.mark.parametrize(
    ("direction", "dir_vec", "plane_vec"),
    [
        (Direction.NORTH, (0, -1), (0.66, 0)),
        (Direction.SOUTH, (0, 1), (-0.66, 0)),
        (Direction.EAST, (1, 0), (0, 0.66)),
        (Direction.WEST, (-1, 0), (0, -0.66)),
    ],
)
def test_from_start(direction, dir_vec, plane_vec):
    player = Player.from_start(2, 3, direction)
    assert (player.x, player.y) == (2.5, 3.5)
    assert (player.dir_x, player.dir_y) == pytest.approx(dir_vec)
    assert (player.plane_x, player.plane_y) == pytest.approx(plane_vec)


def test_rotate_vector_quarter_turn():
    assert rotate_vector(1.0, 0.0, math.pi / 2) == pytest.approx((0.0, 1.0), abs=1e-12)


def test_rotate_preserves_length_and_reverses():
    player = Player.from_start(2, 2, Direction.EAST)
    player.rotate(0.7)
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)
    player.rotate(-0.7)
    assert (player.dir_x, player.dir_y) == pytest.approx((1.0, 0.0), abs=1e-12)


def test_turn_left_then_right_restores():
    player = Player.from_start(2, 2, Direction.NORTH)
    player.turn(Controls(turn_left=True))
    assert player.dir_x < 0
    player.turn(Controls(turn_right=True))
    assert (player.dir_x, player.dir_y) == pytest.approx((0.0, -1.0), abs=1e-12)


def test_turn_without_keys_keeps_direction():
    player = Player.from_start(2, 2, Direction.NORTH)
    before = (player.dir_x, player.dir_y, player.plane_x, player.plane_y)
    player.turn(Controls())
    assert (player.dir_x, player.dir_y, player.plane_x, player.plane_y) == before


def test_move_forward_and_backward():
    player = Player.from_start(2, 2, Direction.NORTH)
    player.move(GRID, Controls(forward=True))
    assert player.y == pytest.approx(2.4)
    assert player.x == pytest.approx(2.5)
    player.move(GRID, Controls(backward=True))
    assert (player.x, player.y) == pytest.approx((2.5, 2.5))


def test_forward_wins_over_backward():
    player = Player.from_start(2, 2, Direction.NORTH)
    player.move(GRID, Controls(forward=True, backward=True))
    assert player.y < 2.5


def test_strafe_left_and_right():
    player = Player.from_start(2, 2, Direction.NORTH)
    player.move(GRID, Controls(left=True))
    assert player.x < 2.5
    assert player.y == pytest.approx(2.5)
    player.move(GRID, Controls(right=True))
    assert (player.x, player.y) == pytest.approx((2.5, 2.5))


def test_no_keys_no_movement():
    player = Player.from_start(2, 2, Direction.NORTH)
    player.move(GRID, Controls())
    assert (player.x, player.y) == (2.5, 2.5)


def test_walls_stop_movement():
    player = Player.from_start(2, 2, Direction.NORTH)
    for _ in range(40):
        player.move(GRID, Controls(forward=True))
    assert player.y >= 1.0
    assert GRID[int(player.y)][int(player.x)] != 1


def test_mouse_turn_left_edge():
    player = Player.from_start(2, 2, Direction.NORTH)
    alpha = player.mouse_turn(10, 450, 1400, 900)
    assert alpha == pytest.approx(-math.pi / 72)
    expected = rotate_vector(0.0, -1.0, alpha)
    assert (player.dir_x, player.dir_y) == pytest.approx(expected)


def test_mouse_turn_right_edge():
    player = Player.from_start(2, 2, Direction.NORTH)
    assert player.mouse_turn(1390, 450, 1400, 900) == pytest.approx(math.pi / 72)
    assert player.dir_x > 0


@pytest.mark.parametrize(("x", "y"), [(10, 100), (10, 800), (700, 450)])
def test_mouse_turn_outside_zone(x, y):
    player = Player.from_start(2, 2, Direction.NORTH)
    assert player.mouse_turn(x, y, 1400, 900) == 0.0
    assert (player.dir_x, player.dir_y) == pytest.approx((0.0, -1.0))