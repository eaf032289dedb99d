"""Parsing a scene file: wall textures, colours and the map."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO

from .config import CEILING, FLOOR, CubError, Face
from .level import GridMap, PlayerState, find_player, read_map, validate_map
from .textutil import to_rgb, trim
from .xpm import load_xpm

Loader = Callable[[str], Any]

_TEXTURE_IDS = (("NO", Face.NO), ("SO", Face.SO), ("WE", Face.WE), ("EA", Face.EA))
_GRAPHICS_ENTRIES = 6


@dataclass
class Scene:
    """Everything a scene file describes."""

    textures: list[Any]
    colors: list[int]
    grid: GridMap
    state: PlayerState


def read_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield the lines of ``stream`` without their trailing newline."""
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line


def _next_entry(lines: Iterator[str]) -> Optional[str]:
    for raw in lines:
        line = trim(raw)
        if line:
            return line
    return None


def _parse_color(line: str, colors: dict[int, int]) -> None:
    if line.startswith("F"):
        kind = FLOOR
    elif line.startswith("C"):
        kind = CEILING
    else:
        raise CubError("Unknown color type")
    value = trim(line[2:])
    if kind in colors:
        raise CubError("Found duplicate in graphics")
    colors[kind] = to_rgb(value)


def _parse_entry(
    line: str, textures: dict[Face, Any], colors: dict[int, int], loader: Loader
) -> None:
    for prefix, face in _TEXTURE_IDS:
        if line.startswith(prefix):
            if face in textures:
                raise CubError("Found duplicate in graphics")
            textures[face] = loader(trim(line[2:]))
            return
    _parse_color(line, colors)


def parse_graphics(
    lines: Iterable[str], loader: Loader = load_xpm
) -> tuple[list[Any], list[int]]:
    """Read the six texture and colour entries from the front of ``lines``.

    Returns the textures in ``Face`` order and the colours as
    ``[floor, ceiling]``. Lines after the sixth entry are left unread.
    """
    it = iter(lines)
    textures: dict[Face, Any] = {}
    colors: dict[int, int] = {}
    for count in range(_GRAPHICS_ENTRIES):
        line = _next_entry(it)
        if line is None:
            if count == 0:
                raise CubError("File is empty")
            break
        _parse_entry(line, textures, colors, loader)
    if len(textures) != len(Face):
        raise CubError("Cant find a texture")
    if len(colors) != 2:
        raise CubError("Cant find a color")
    return [textures[face] for face in Face], [colors[FLOOR], colors[CEILING]]


def parse_scene(stream: Iterable[str], loader: Loader = load_xpm) -> Scene:
    """Parse a whole scene from a text stream and validate its map."""
    lines = read_lines(stream)
    textures, colors = parse_graphics(lines, loader)
    grid = read_map(lines)
    validate_map(grid)
    return Scene(textures, colors, grid, find_player(grid))


def parse_scene_file(path: str | os.PathLike[str]) -> Scene:
    """Open and parse the scene file at ``path``."""
    try:
        handle: TextIO = open(path, encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise CubError("Cant open a file") from exc
    with handle:
        return parse_scene(handle)