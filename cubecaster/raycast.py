"""Grid ray casting (DDA) from the player's viewpoint."""

from __future__ import annotations

from dataclasses import dataclass

from .config import WIDTH, CubError, Side
from .level import PlayerState, Vector


@dataclass
class Ray:
    """One cast ray and where it hit a wall."""

    ray_dir: Vector
    delta_dist: Vector
    side_dist: Vector
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    side: Side = Side.X
    wall_dist: float = 0.0

    def _advance(self, axis: Side) -> None:
        if axis == Side.X:
            self.side_dist.x += self.delta_dist.x
            self.map_x += self.step_x
        else:
            self.side_dist.y += self.delta_dist.y
            self.map_y += self.step_y
        self.side = axis


def camera_x(column: int) -> float:
    """Map a screen column to the camera plane coordinate in [-1, 1]."""
    return 2 * column / WIDTH - 1


def _delta(own: float, other: float) -> float:
    if other == 0:
        return 0.0
    if own == 0:
        return 1.0
    return abs(1 / own)


def setup_ray(state: PlayerState, camera: float) -> Ray:
    """Prepare a ray through ``camera`` on the plane, before any stepping."""
    ray_dir = Vector(
        state.dir.x + state.plane.x * camera,
        state.dir.y + state.plane.y * camera,
    )
    map_x = int(state.pos.x)
    map_y = int(state.pos.y)
    delta = Vector(_delta(ray_dir.x, ray_dir.y), _delta(ray_dir.y, ray_dir.x))
    step_x = -1 if ray_dir.x < 0 else 1
    step_y = -1 if ray_dir.y < 0 else 1
    if ray_dir.x < 0:
        side_x = (state.pos.x - map_x) * delta.x
    else:
        side_x = (map_x + 1.0 - state.pos.x) * delta.x
    if ray_dir.y < 0:
        side_y = (state.pos.y - map_y) * delta.y
    else:
        side_y = (map_y + 1.0 - state.pos.y) * delta.y
    return Ray(
        ray_dir=ray_dir,
        delta_dist=delta,
        side_dist=Vector(side_x, side_y),
        map_x=map_x,
        map_y=map_y,
        step_x=step_x,
        step_y=step_y,
    )


def _cell(rows: list[str], x: int, y: int) -> str:
    if not 0 <= y < len(rows) or not 0 <= x < len(rows[y]):
        raise CubError("Ray left the map")
    return rows[y][x]


def cast_ray(state: PlayerState, rows: list[str], camera: float) -> Ray:
    """Step the ray through the grid until it enters a wall cell."""
    ray = setup_ray(state, camera)
    while True:
        if ray.side_dist.x < ray.side_dist.y:
            ray._advance(Side.X)
        elif ray.side_dist.x > ray.side_dist.y:
            ray._advance(Side.Y)
        else:
            ray._advance(Side.X)
            ray._advance(Side.Y)
        if _cell(rows, ray.map_x, ray.map_y) == "1":
            break
    if ray.side == Side.X:
        ray.wall_dist = (
            ray.map_x - state.pos.x + (1 - ray.step_x) / 2.0
        ) / ray.ray_dir.x
    else:
        ray.wall_dist = (
            ray.map_y - state.pos.y + (1 - ray.step_y) / 2.0
        ) / ray.ray_dir.y
    return ray