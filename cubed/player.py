"""Player position, view direction and movement."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from cubed.scene import WALL, Direction

VELOCITY = 0.1
TURN_STEP = math.pi / 36
MOUSE_STEP = math.pi / 72
MOUSE_BAND = 150
PLANE = 0.66

_START_VECTORS = {
    Direction.NORTH: ((0.0, -1.0), (PLANE, 0.0)),
    Direction.SOUTH: ((0.0, 1.0), (-PLANE, 0.0)),
    Direction.EAST: ((1.0, 0.0), (0.0, PLANE)),
    Direction.WEST: ((-1.0, 0.0), (0.0, -PLANE)),
}


@dataclass
class Controls:
    """Which movement keys are held and whether mouse look is on."""

    turn_left: bool = False
    turn_right: bool = False
    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    mouse_on: bool = False


def rotate_vector(x: float, y: float, alpha: float) -> tuple[float, float]:
    """Rotate (x, y) by alpha radians."""
    cos_a = math.cos(alpha)
    sin_a = math.sin(alpha)
    return cos_a * x - sin_a * y, sin_a * x + cos_a * y


@dataclass
class Player:
    """Position in map cells, view direction and camera plane."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float

    @classmethod
    def from_start(cls, x: int, y: int, direction: Direction) -> Player:
        """Place a player in the middle of a start cell, facing direction."""
        (dir_x, dir_y), (plane_x, plane_y) = _START_VECTORS[Direction(direction)]
        return cls(x + 0.5, y + 0.5, dir_x, dir_y, plane_x, plane_y)

    def rotate(self, alpha: float) -> None:
        """Turn the view direction and camera plane by alpha radians."""
        self.dir_x, self.dir_y = rotate_vector(self.dir_x, self.dir_y, alpha)
        self.plane_x, self.plane_y = rotate_vector(self.plane_x, self.plane_y, alpha)

    def turn(self, controls: Controls) -> None:
        """Apply one turning step for the held turn keys."""
        if controls.turn_left:
            self.rotate(-TURN_STEP)
        elif controls.turn_right:
            self.rotate(TURN_STEP)

    def move(self, grid: Sequence[Sequence[int]], controls: Controls) -> None:
        """Apply one movement step, sliding along walls."""
        step_x = self.dir_x * VELOCITY
        step_y = self.dir_y * VELOCITY
        if controls.forward:
            new_x, new_y = self.x + step_x, self.y + step_y
        elif controls.backward:
            new_x, new_y = self.x - step_x, self.y - step_y
        elif controls.left:
            new_x, new_y = self.x + step_y, self.y - step_x
        elif controls.right:
            new_x, new_y = self.x - step_y, self.y + step_x
        else:
            return
        if grid[int(self.y)][int(new_x)] != WALL:
            self.x = new_x
        if grid[int(new_y)][int(self.x)] != WALL:
            self.y = new_y

    def mouse_turn(self, x: int, y: int, width: int, height: int) -> float:
        """Turn when the pointer sits near the left or right screen edge.

        Returns the angle applied; 0.0 when the pointer is outside the
        vertical band around the screen middle or away from the edges.
        """
        middle = height // 2
        if not middle - MOUSE_BAND < y < middle + MOUSE_BAND:
            return 0.0
        if 0 <= x <= MOUSE_BAND:
            alpha = -MOUSE_STEP
        elif width - MOUSE_BAND <= x <= width:
            alpha = MOUSE_STEP
        else:
            alpha = 0.0
        self.rotate(alpha)
        return alpha