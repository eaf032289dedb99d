"""Textured raycasting maze explorer for .cub scene files."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "config",
    "level",
    "player",
    "raycast",
    "render",
    "scene",
    "textutil",
    "xpm",
    "xpm_colors",
]