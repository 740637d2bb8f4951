# cubed

A small raycasting maze viewer. It reads a `.cub` scene file that names four
XPM wall textures, a floor and a ceiling colour and a grid map, then opens a
1400x900 pygame window titled `cub3D` with a first-person view of the maze and
a minimap in the top-left corner.

## Installing

```
pip install .
```

## Running

```
cubed path/to/level.cub
```

The command takes exactly one argument. Everything from the first dot of the
file name on must be `.cub`; otherwise it prints `wrong argument` to standard
error and exits with status 1. A mistake in the scene or a texture that
cannot be loaded is reported as `Error` followed by a short description
(for example `Not Surrounded By Wall` or `Invalid Image Directory`), and the
command exits with status 255.

## Scene files

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `NO`, `SO`, `WE`, `EA`: paths to the wall textures in XPM format. Only the
  first line of each kind counts.
- `F`, `C`: floor and ceiling colours as exactly three comma-separated
  values from 0 to 255.
- Blank lines before the map are skipped. The first other line starts the
  map, which runs to the end of the file.
- The map uses `1` for walls, `0` for open floor, spaces for empty space,
  and exactly one of `N`, `S`, `E`, `W` for the starting position and
  facing direction. Every walkable cell must be enclosed by walls; rows
  shorter than the longest are padded with empty space.

## Controls

| Key         | Action                         |
|-------------|--------------------------------|
| W / S       | move forward / backward        |
| A / D       | strafe left / right            |
| Left/Right  | turn                           |
| 1           | toggle mouse look              |
| Esc         | quit                           |

Movement slides along walls rather than stopping dead. With mouse look on,
holding the pointer within 150 pixels of the left or right edge of the
window, and within 150 pixels above or below its middle, turns the view.

## Using it as a library

The pieces can be used on their own:

```python
from cubed.scene import load_scene
from cubed.player import Player
from cubed.render import render_frame
from cubed.app import load_textures

scene = load_scene("level.cub")
player = Player.from_start(scene.start_x, scene.start_y, scene.start_direction)
image = render_frame(scene, player, load_textures(scene), 640, 400)
rgb = image.to_rgb_bytes()
```

- `cubed.scene`: `parse_scene`, `load_scene`, `parse_rgb`, `parse_map`,
  `find_start`, `check_walls`, `check_filename`; invalid scenes raise
  `SceneError`.
- `cubed.player`: `Player` (position, direction, camera plane) with
  `rotate`, `turn`, `move` and `mouse_turn`, driven by a `Controls` record.
- `cubed.raycast`: `cast_ray` returns a `RayHit`; `wall_span`,
  `texture_column` and `draw_wall_column` turn it into a textured slice.
- `cubed.render`: `draw_background`, `draw_minimap` and `render_frame`.
- `cubed.app`: `Game` holds the state behind the window (`key_press`,
  `key_release`, `update`, `frame`); `main` is the `cubed` command.
- `cubed.xpm`: `parse_xpm`, `parse_xpm_lines` and `load_xpm` decode XPM
  images into `cubed.image.Image`; bad data raises `XpmError`.
- `cubed.colors.lookup_color` resolves X11 colour names to `0xRRGGBB`.

## What it does not do

There are no sprites, doors, sound or saved games: the view shows only
textured walls, flat floor and ceiling colours and the minimap. Textures must
be XPM files; other image formats are not read.