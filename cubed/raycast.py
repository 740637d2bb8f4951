"""Grid ray casting and textured wall columns."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from cubed.image import Image
from cubed.player import Player
from cubed.scene import WALL, Direction

SIDE_X = 0
SIDE_Y = 1


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall.

    ``side`` is SIDE_X when a vertical grid line was crossed last and
    SIDE_Y when a horizontal one was.  ``distance`` is the perpendicular
    distance from the camera plane to the wall.
    """

    ray_x: float
    ray_y: float
    map_x: int
    map_y: int
    side: int
    distance: float
    origin_x: float
    origin_y: float

    def face(self) -> Direction | None:
        """Return which wall texture the hit shows, or None for none."""
        if self.side == SIDE_X:
            if self.ray_x < 0:
                return Direction.EAST
            if self.ray_x > 0:
                return Direction.WEST
        else:
            if self.ray_y < 0:
                return Direction.NORTH
            if self.ray_y > 0:
                return Direction.SOUTH
        return None


def _axis(origin: float, cell: int, ray: float) -> tuple[int, float, float]:
    delta = abs(1.0 / ray) if ray else math.inf
    if ray < 0:
        return -1, delta, (origin - cell) * delta
    return 1, delta, (cell + 1.0 - origin) * delta


def cast_ray(grid: Sequence[Sequence[int]], player: Player, camera_x: float) -> RayHit:
    """Step a ray through the grid until it enters a wall cell.

    ``camera_x`` runs from -1 (left screen edge) to 1 (right edge).
    """
    ray_x = player.dir_x + player.plane_x * camera_x
    ray_y = player.dir_y + player.plane_y * camera_x
    map_x = int(player.x)
    map_y = int(player.y)
    step_x, delta_x, side_x = _axis(player.x, map_x, ray_x)
    step_y, delta_y, side_y = _axis(player.y, map_y, ray_y)

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = SIDE_X
        else:
            side_y += delta_y
            map_y += step_y
            side = SIDE_Y
        if not (0 <= map_y < len(grid) and 0 <= map_x < len(grid[map_y])):
            raise ValueError("ray left the map without hitting a wall")
        if grid[map_y][map_x] == WALL:
            break

    distance = side_x - delta_x if side == SIDE_X else side_y - delta_y
    return RayHit(ray_x, ray_y, map_x, map_y, side, distance, player.x, player.y)


def wall_span(distance: float, screen_height: int) -> tuple[int, int, int]:
    """Return (line height, first row, last row) of a wall slice."""
    if distance <= 0:
        raise ValueError(f"wall distance must be positive, got {distance}")
    line_height = int(screen_height / distance / 2)
    middle = screen_height // 2
    start = max(middle - line_height // 2, 0)
    end = min(middle + line_height // 2, screen_height - 1)
    return line_height, start, end


def texture_column(hit: RayHit, texture_width: int) -> float:
    """Return the texture x coordinate where the ray struck the wall."""
    if hit.side == SIDE_X:
        coordinate = hit.origin_y + hit.distance * hit.ray_y
    else:
        coordinate = hit.origin_x + hit.distance * hit.ray_x
    return (coordinate - int(coordinate)) * texture_width


def draw_wall_column(
    image: Image, texture: Image, hit: RayHit, column: int, screen_height: int
) -> None:
    """Paint one textured wall slice into column ``column`` of ``image``."""
    line_height, start, end = wall_span(hit.distance, screen_height)
    tex_x = min(int(texture_column(hit, texture.width)), texture.width - 1)
    step = texture.height / max(line_height, 1)
    tex_y = (start - screen_height // 2 + line_height // 2) * step
    for y in range(start, end + 1):
        image.put_pixel(column, y, texture.get_pixel(tex_x, int(tex_y)))
        tex_y += step
        if tex_y >= texture.height:
            tex_y = texture.height - 1