"""Drawing the background and the textured wall columns into a frame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .config import CEILING, FLOOR, HEIGHT, TEXTURE_SIZE, WIDTH, Face, Side
from .level import PlayerState, Vector
from .raycast import Ray, camera_x, cast_ray


@dataclass
class Texture:
    """A wall texture: packed ``0xRRGGBB`` pixels in row-major order."""

    width: int
    height: int
    pixels: list[int]

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture size")

    def color_at(self, x: int, y: int) -> int:
        """Return the colour of the texel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) outside texture")
        return self.pixels[y * self.width + x]


@dataclass
class Frame:
    """The image the scene is drawn into."""

    width: int = WIDTH
    height: int = HEIGHT
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match frame size")

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside frame")
        return y * self.width + x

    def put(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)``."""
        self.pixels[self._index(x, y)] = color

    def get(self, x: int, y: int) -> int:
        """Return the pixel at ``(x, y)``."""
        return self.pixels[self._index(x, y)]


@dataclass
class WallSlice:
    """Where a wall column lands on screen and how its texture is sampled."""

    line_h: int
    ratio: float
    start_y: int
    end_y: int
    tex_x: int
    tex_pos: float


def texture_column(pos: Vector, ray: Ray) -> int:
    """Return the texture column hit by ``ray`` cast from ``pos``."""
    if ray.side == Side.X:
        wall = pos.y + ray.wall_dist * ray.ray_dir.y
    else:
        wall = pos.x + ray.wall_dist * ray.ray_dir.x
    wall -= math.floor(wall)
    column = int(wall * TEXTURE_SIZE)
    if ray.side == Side.X and ray.ray_dir.x < 0:
        column = TEXTURE_SIZE - column - 1
    if ray.side == Side.Y and ray.ray_dir.y > 0:
        column = TEXTURE_SIZE - column - 1
    return column


def wall_slice(ray: Ray, state: PlayerState) -> WallSlice:
    """Work out the screen span and texture mapping of the wall hit by ``ray``."""
    line_h = int(HEIGHT / ray.wall_dist)
    ratio = TEXTURE_SIZE / line_h if line_h else math.inf
    half = HEIGHT // 2
    start_y = max(half - line_h // 2, 0)
    end_y = min(half + line_h // 2, HEIGHT)
    offset = start_y - half + line_h // 2
    tex_pos = offset * ratio if offset else 0.0
    return WallSlice(
        line_h=line_h,
        ratio=ratio,
        start_y=start_y,
        end_y=end_y,
        tex_x=texture_column(state.pos, ray),
        tex_pos=tex_pos,
    )


def draw_background(frame: Frame, ceiling: int, floor: int) -> None:
    """Fill the upper half with ``ceiling`` and the lower half with ``floor``."""
    half = frame.height // 2
    for y in range(half):
        for x in range(frame.width):
            frame.put(x, y, ceiling)
            frame.put(x, y + half, floor)


def _face(ray: Ray) -> Optional[Face]:
    if ray.side == Side.X:
        if ray.ray_dir.x > 0:
            return Face.WE
        if ray.ray_dir.x < 0:
            return Face.EA
    else:
        if ray.ray_dir.y > 0:
            return Face.NO
        if ray.ray_dir.y < 0:
            return Face.SO
    return None


def draw_wall(
    frame: Frame,
    textures: Sequence[Texture],
    ray: Ray,
    state: PlayerState,
    x: int,
) -> None:
    """Draw the textured wall column for ``ray`` at screen column ``x``."""
    face = _face(ray)
    if face is None:
        return
    texture = textures[face]
    info = wall_slice(ray, state)
    tex_pos = info.tex_pos
    for y in range(info.start_y, info.end_y):
        tex_y = int(tex_pos) & (TEXTURE_SIZE - 1)
        frame.put(x, y, texture.color_at(info.tex_x, tex_y))
        tex_pos += info.ratio


def draw_scene(
    frame: Frame,
    textures: Sequence[Texture],
    colors: Sequence[int],
    state: PlayerState,
    rows: list[str],
) -> Frame:
    """Render the whole view from ``state`` into ``frame`` and return it."""
    draw_background(frame, colors[CEILING], colors[FLOOR])
    for column in range(WIDTH):
        ray = cast_ray(state, rows, camera_x(column))
        draw_wall(frame, textures, ray, state, column)
    return frame