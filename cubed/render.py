"""Frame composition: background, walls and minimap."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from cubed.image import Image
from cubed.player import Player
from cubed.raycast import cast_ray, draw_wall_column
from cubed.scene import EMPTY, WALL, Direction, Scene

MINIMAP_WALL = 0x000000
MINIMAP_EMPTY = 0xA0A0A0
MINIMAP_OPEN = 0xFFFFFF
MINIMAP_PLAYER = 0xFF0000


def draw_background(image: Image, ceiling: int, floor: int) -> None:
    """Fill the upper half with the ceiling colour and the rest with floor."""
    middle = image.height // 2
    for x in range(image.width):
        for y in range(image.height):
            image.put_pixel(x, y, ceiling if y < middle else floor)


def _fill_cell(image: Image, col: int, row: int, size: int, color: int) -> None:
    left = col * size
    top = row * size
    for x in range(left, left + size):
        if x >= image.height or x >= image.width:
            break
        for y in range(top, top + size):
            if y >= image.width or y >= image.height:
                break
            image.put_pixel(x, y, color)


def draw_minimap(image: Image, grid: Sequence[Sequence[int]], player: Player) -> None:
    """Draw the map and the player's cell in the top-left corner."""
    if not grid:
        return
    size = (image.height // 8) // len(grid)
    if size <= 0:
        return
    for row, cells in enumerate(grid):
        for col, value in enumerate(cells):
            if value == WALL:
                color = MINIMAP_WALL
            elif value == EMPTY:
                color = MINIMAP_EMPTY
            else:
                color = MINIMAP_OPEN
            _fill_cell(image, col, row, size, color)
    _fill_cell(image, int(player.x), int(player.y), size, MINIMAP_PLAYER)


def render_frame(
    scene: Scene,
    player: Player,
    textures: Mapping[Direction, Image],
    width: int,
    height: int,
) -> Image:
    """Render one complete view of the scene from the player's position."""
    image = Image(width, height)
    draw_background(image, scene.ceiling_color(), scene.floor_color())
    for column in range(width):
        camera_x = 2 * column / width - 1
        hit = cast_ray(scene.grid, player, camera_x)
        face = hit.face()
        if face is None:
            continue
        draw_wall_column(image, textures[face], hit, column, height)
    draw_minimap(image, scene.grid, player)
    return image