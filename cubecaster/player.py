"""Player movement, rotation and wall collision."""

from __future__ import annotations

import math

from .config import STEP, THETA, WIDTH, Key
from .level import PlayerState, Vector
from .raycast import camera_x, cast_ray

_MARGIN = STEP + 0.01


def collides(next_pos: Vector, state: PlayerState, rows: list[str]) -> bool:
    """Return True if moving from ``state.pos`` to ``next_pos`` hits a wall."""
    probe = PlayerState(pos=Vector(state.pos.x, state.pos.y))
    probe.set_dir(next_pos.x - state.pos.x, next_pos.y - state.pos.y)
    probe.set_plane()
    return any(
        cast_ray(probe, rows, camera_x(column)).wall_dist < _MARGIN
        for column in range(WIDTH)
    )


def move(key: int, state: PlayerState, rows: list[str]) -> bool:
    """Step the player for a movement key; return True if the player moved."""
    pos = state.pos
    if key == Key.W:
        target = Vector(pos.x + STEP * state.dir.x, pos.y + STEP * state.dir.y)
    elif key == Key.D:
        target = Vector(pos.x + STEP * state.plane.x, pos.y + STEP * state.plane.y)
    elif key == Key.A:
        target = Vector(pos.x - STEP * state.plane.x, pos.y - STEP * state.plane.y)
    elif key == Key.S:
        target = Vector(pos.x - STEP * state.dir.x, pos.y - STEP * state.dir.y)
    else:
        return False
    if collides(target, state, rows):
        return False
    state.pos = target
    return True


def _rotated(vec: Vector, angle: float) -> Vector:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Vector(vec.x * cos_a - vec.y * sin_a, vec.x * sin_a + vec.y * cos_a)


def rotate(key: int, state: PlayerState) -> None:
    """Turn the view right or left by a fixed angle for the arrow keys."""
    if key == Key.RIGHT:
        angle = THETA
    elif key == Key.LEFT:
        angle = -THETA
    else:
        return
    state.dir = _rotated(state.dir, angle)
    state.plane = _rotated(state.plane, angle)