"""Game state, key handling and the interactive window."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from enum import Enum, auto

from cubed.image import Image
from cubed.player import Controls, Player
from cubed.render import render_frame
from cubed.scene import Direction, Scene, SceneError, check_filename, load_scene
from cubed.xpm import XpmError, load_xpm

WIDTH = 1400
HEIGHT = 900
TITLE = "cub3D"
_FAILURE = 255


class Key(Enum):
    """Actions bound to keyboard keys."""

    ESCAPE = auto()
    TURN_LEFT = auto()
    TURN_RIGHT = auto()
    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    MOUSE = auto()


_TEXTURE_FIELDS = {
    Direction.NORTH: "north",
    Direction.SOUTH: "south",
    Direction.EAST: "east",
    Direction.WEST: "west",
}


def load_textures(scene: Scene) -> dict[Direction, Image]:
    """Load the four wall textures named by the scene."""
    textures: dict[Direction, Image] = {}
    for direction, field in _TEXTURE_FIELDS.items():
        path = getattr(scene, field)
        if path is None:
            raise SceneError("Invalid Image Directory")
        try:
            textures[direction] = load_xpm(path)
        except (OSError, XpmError) as exc:
            raise SceneError("Invalid Image Directory") from exc
    return textures


class Game:
    """Player state driven by key presses and pointer position."""

    def __init__(self, scene: Scene, textures: Mapping[Direction, Image]) -> None:
        self.scene = scene
        self.textures = dict(textures)
        self.player = Player.from_start(
            scene.start_x, scene.start_y, scene.start_direction
        )
        self.controls = Controls()
        self.running = True
        self.width = WIDTH
        self.height = HEIGHT
        self.mouse = (0, 0)

    def key_press(self, key: Key) -> None:
        """Record a pressed key and advance the game by one step."""
        if key is Key.ESCAPE:
            self.running = False
            return
        controls = self.controls
        if key is Key.TURN_LEFT:
            controls.turn_left = True
        elif key is Key.TURN_RIGHT:
            controls.turn_right = True
        if key is Key.FORWARD:
            controls.forward = True
        elif key is Key.BACKWARD:
            controls.backward = True
        if key is Key.LEFT:
            controls.left = True
        elif key is Key.RIGHT:
            controls.right = True
        if key is Key.MOUSE:
            if controls.mouse_on:
                controls.mouse_on = False
            else:
                self.mouse = (self.width // 2, self.height // 2)
                controls.mouse_on = True
        self.update(*self.mouse)

    def key_release(self, key: Key) -> None:
        """Record a released key."""
        controls = self.controls
        if key is Key.TURN_LEFT:
            controls.turn_left = False
        elif key is Key.TURN_RIGHT:
            controls.turn_right = False
        if key is Key.FORWARD:
            controls.forward = False
        elif key is Key.BACKWARD:
            controls.backward = False
        if key is Key.LEFT:
            controls.left = False
        elif key is Key.RIGHT:
            controls.right = False

    def update(self, mouse_x: int, mouse_y: int) -> None:
        """Apply held keys and mouse look for one step."""
        self.player.turn(self.controls)
        self.player.move(self.scene.grid, self.controls)
        self.mouse = (mouse_x, mouse_y)
        if self.controls.mouse_on:
            self.player.mouse_turn(mouse_x, mouse_y, self.width, self.height)

    def frame(self) -> Image:
        """Render the current view."""
        return render_frame(
            self.scene, self.player, self.textures, self.width, self.height
        )


def _run_window(game: Game) -> int:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    bindings = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.TURN_LEFT,
        pygame.K_RIGHT: Key.TURN_RIGHT,
        pygame.K_w: Key.FORWARD,
        pygame.K_s: Key.BACKWARD,
        pygame.K_a: Key.LEFT,
        pygame.K_d: Key.RIGHT,
        pygame.K_1: Key.MOUSE,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width, game.height))
        pygame.display.set_caption(TITLE)
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                key = bindings.get(getattr(event, "key", None))
                if key is None:
                    continue
                if event.type == pygame.KEYDOWN:
                    was_on = game.controls.mouse_on
                    game.key_press(key)
                    if game.controls.mouse_on and not was_on:
                        pygame.mouse.set_pos(game.mouse)
                elif event.type == pygame.KEYUP:
                    game.key_release(key)
            if not game.running:
                break
            game.update(*pygame.mouse.get_pos())
            image = game.frame()
            surface = pygame.image.frombuffer(
                image.to_rgb_bytes(), (image.width, image.height), "RGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the scene file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not check_filename(args[0]):
        sys.stderr.write("wrong argument\n")
        return 1
    try:
        scene = load_scene(args[0])
    except OSError as exc:
        sys.stderr.write(f"Error\n: {exc.strerror or exc}\n")
        return _FAILURE
    except SceneError as exc:
        sys.stdout.write(f"Error\n{exc}")
        return _FAILURE
    try:
        textures = load_textures(scene)
    except SceneError as exc:
        sys.stdout.write(f"Error\n{exc}")
        return _FAILURE
    return _run_window(Game(scene, textures))