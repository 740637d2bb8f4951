"""Reading and validating ``.cub`` scene descriptions."""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

EMPTY = -1
OPEN = 0
WALL = 1

_ELEMENTS = {
    "0": OPEN,
    "1": WALL,
    "N": 2,
    "S": 3,
    "E": 4,
    "W": 5,
    " ": EMPTY,
    "\n": EMPTY,
}
_SEPARATORS = (" ", "\t", "\n")
_TEXTURE_KEYS = {"NO ": "north", "SO ": "south", "WE ": "west", "EA ": "east"}
_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?)(\d*)")


class SceneError(ValueError):
    """Raised when a scene description is invalid."""


class Direction(IntEnum):
    """Facing of the player's start position, as stored in the map grid."""

    NORTH = 2
    SOUTH = 3
    EAST = 4
    WEST = 5


@dataclass
class Scene:
    """A parsed scene: textures, colours, map grid and start position."""

    grid: list[list[int]]
    start_x: int
    start_y: int
    start_direction: Direction
    floor: tuple[int, int, int]
    ceiling: tuple[int, int, int]
    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def ceiling_color(self) -> int:
        """Return the ceiling colour as 0xRRGGBB."""
        return _pack(self.ceiling)

    def floor_color(self) -> int:
        """Return the floor colour as 0xRRGGBB."""
        return _pack(self.floor)


def _pack(rgb: tuple[int, int, int]) -> int:
    red, green, blue = rgb
    return (((red << 8) + green) << 8) + blue


def check_filename(filename: str) -> bool:
    """Tell whether a scene file name is acceptable.

    Everything from the first dot onwards must be exactly ``.cub`` and
    the name must not be ``.cub`` alone.
    """
    if filename == ".cub":
        return False
    dot = filename.find(".")
    if dot == -1:
        return False
    return filename[dot:] == ".cub"


def map_element(char: str) -> int:
    """Return the grid value of one map character."""
    try:
        return _ELEMENTS[char]
    except KeyError:
        raise SceneError("Map Element Invalid") from None


def is_walkable(value: int) -> bool:
    """Tell whether a grid value is open floor or a start position."""
    return value == OPEN or value in Direction._value2member_map_


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def parse_rgb(text: str) -> tuple[int, int, int]:
    """Parse three comma-separated colour components in 0..255."""
    parts = [part for part in text.split(",") if part]
    values: list[int] = []
    for index in range(3):
        if index >= len(parts):
            raise SceneError("RGB Values Are Not Enough")
        value = _atoi(parts[index])
        if not 0 <= value <= 255:
            raise SceneError("RGB Values Parsed Are Invalid")
        values.append(value)
    if len(parts) > 3:
        raise SceneError("RGB Values Are Exceed")
    return values[0], values[1], values[2]


def parse_map(lines: Iterable[str]) -> list[list[int]]:
    """Turn map lines into a rectangular grid, padding with empty cells."""
    rows = list(lines)
    width = max((len(row) for row in rows), default=0)
    grid: list[list[int]] = []
    for row in rows:
        cells = [map_element(char) for char in row]
        cells.extend([EMPTY] * (width - len(cells)))
        grid.append(cells)
    return grid


def find_start(grid: Sequence[Sequence[int]]) -> tuple[int, int, Direction] | None:
    """Return the single start position as (x, y, direction), or None."""
    start: tuple[int, int, Direction] | None = None
    for y, row in enumerate(grid):
        for x, value in enumerate(row):
            if value in Direction._value2member_map_:
                if start is not None:
                    raise SceneError("More Than One Start Position")
                start = (x, y, Direction(value))
    return start


def _on_border(grid: Sequence[Sequence[int]], i: int, j: int) -> bool:
    height = len(grid)
    width = len(grid[0])
    if i == 0 or i == height - 1 or j == 0 or j == width - 1:
        return True
    return EMPTY in (grid[i - 1][j], grid[i][j - 1], grid[i][j + 1], grid[i + 1][j])


def check_walls(grid: Sequence[Sequence[int]]) -> None:
    """Raise if any walkable cell touches the map edge or empty space."""
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if is_walkable(value) and _on_border(grid, i, j):
                raise SceneError("Not Surrounded By Wall")


def _value_starts(line: str, offset: int) -> bool:
    return line[offset:offset + 1] not in _SEPARATORS


def parse_scene(lines: Iterable[str]) -> Scene:
    """Parse the lines of a scene file, newlines included."""
    textures: dict[str, str] = {}
    floor: tuple[int, int, int] | None = None
    ceiling: tuple[int, int, int] | None = None
    grid: list[list[int]] = []
    start: tuple[int, int, Direction] | None = None

    rows = iter(lines)
    for line in rows:
        attribute = _TEXTURE_KEYS.get(line[:3])
        if attribute and _value_starts(line, 3) and attribute not in textures:
            textures[attribute] = line[3:].removesuffix("\n")
        elif line.startswith("F ") and _value_starts(line, 2) and floor is None:
            floor = parse_rgb(line[2:])
        elif line.startswith("C ") and _value_starts(line, 2) and ceiling is None:
            ceiling = parse_rgb(line[2:])
        elif line[:1] != "\n":
            grid = parse_map(itertools.chain([line], rows))
            start = find_start(grid)
            check_walls(grid)
            break

    if start is None:
        raise SceneError("No Start Point")
    if floor is None or ceiling is None:
        raise SceneError("No RGB Value")
    x, y, direction = start
    return Scene(
        grid=grid,
        start_x=x,
        start_y=y,
        start_direction=direction,
        floor=floor,
        ceiling=ceiling,
        **textures,
    )


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def load_scene(path: str | Path) -> Scene:
    """Read and parse a scene file."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_scene(_split_lines(text))