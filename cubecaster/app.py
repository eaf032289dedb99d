"""The command line entry point and the interactive game loop."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .config import HEIGHT, WIDTH, CubError, Key
from .player import move, rotate
from .render import Frame, draw_scene
from .scene import Scene, parse_scene_file

_EXTENSION = ".cub"
_MOVE_KEYS = frozenset({Key.W, Key.A, Key.S, Key.D})
_TURN_KEYS = frozenset({Key.LEFT, Key.RIGHT})


def has_cub_extension(path: str) -> bool:
    """Return True if ``path`` names a ``.cub`` scene file."""
    return path.endswith(_EXTENSION)


def check_args(argv: Sequence[str]) -> str:
    """Validate the command-line arguments and return the scene path."""
    if len(argv) != 1:
        raise CubError("Usage: cubecaster <Map>")
    path = argv[0]
    if not has_cub_extension(path):
        raise CubError("Invalid map file")
    return path


class Game:
    """A running game: the parsed scene, the player and the current frame."""

    def __init__(self, scene: Scene, frame: Optional[Frame] = None) -> None:
        self.scene = scene
        self.frame = frame if frame is not None else Frame(WIDTH, HEIGHT)
        self.running = True
        self.render()

    @property
    def state(self):
        return self.scene.state

    def handle_key(self, key: int) -> bool:
        """React to a key press; return False once the game should close."""
        rows = self.scene.grid.rows
        if key in _MOVE_KEYS:
            move(key, self.scene.state, rows)
            self.render()
        elif key in _TURN_KEYS:
            rotate(key, self.scene.state)
            self.render()
        if key == Key.ESC:
            self.running = False
        return self.running

    def render(self) -> Frame:
        """Draw the current view into the frame and return it."""
        return draw_scene(
            self.frame,
            self.scene.textures,
            self.scene.colors,
            self.scene.state,
            self.scene.grid.rows,
        )


def _frame_bytes(frame: Frame) -> bytes:
    data = bytearray()
    for pixel in frame.pixels:
        data += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    return bytes(data)


def _run_window(game: Game) -> None:
    import pygame

    keymap = {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_ESCAPE: Key.ESC,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.frame.width, game.frame.height))
        pygame.display.set_caption("cubecaster")
        pygame.key.set_repeat(200, 30)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    key = keymap.get(event.key)
                    if key is not None:
                        game.handle_key(key)
            if not game.running:
                break
            image = pygame.image.frombuffer(
                _frame_bytes(game.frame),
                (game.frame.width, game.frame.height),
                "RGB",
            )
            screen.blit(image, (0, 0))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse a scene file given on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_args(args)
        game = Game(parse_scene_file(path))
    except CubError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    _run_window(game)
    return 0