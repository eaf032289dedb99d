"""Loading wall textures from XPM image files."""

from __future__ import annotations

import os
import re
from typing import Optional

from .config import CubError
from .render import Texture
from .xpm_colors import lookup_color

TRANSPARENT = 0xFF000000

_QUOTED = re.compile(r'"([^"]*)"')
_FIELD_SEP = re.compile(r"[ \t]+")
_DECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_HEX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_NAME_LIMIT = 63


class XpmError(CubError):
    """Raised when an XPM image cannot be read or decoded."""


def split_fields(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty fields."""
    return [field for field in _FIELD_SEP.split(text) if field]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    out: list[str] = []
    in_quote = False
    index = 0
    size = len(text)
    while index < size:
        ch = text[index]
        if ch == '"':
            in_quote = not in_quote
        elif not in_quote and text.startswith(opener, index):
            end = text.find(closer, index + len(opener))
            stop = size if end == -1 else end + len(closer)
            out.append(" " * (stop - index))
            index = stop
            continue
        out.append(ch)
        index += 1
    return "".join(out)


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside quotes.

    The result has the same length as ``text``.
    """
    return _blank_comments(_blank_comments(text, "/*", "*/"), "//", "\n")


def _atoi(text: str) -> int:
    match = _DECIMAL.match(text)
    return int(match.group(1)) if match else 0


def _hex_value(text: str) -> int:
    match = _HEX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, end: Optional[str]) -> int:
    """Resolve an XPM colour spec to a packed ``0xRRGGBB`` value.

    ``#RRGGBB`` is read as hexadecimal; otherwise ``name`` (joined with
    ``end`` when given) is looked up among the named colours. ``None`` gives
    ``-1``; unknown names give ``0``.
    """
    if name.startswith("#"):
        return _hex_value(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    color = lookup_color(name)
    return 0 if color is None else color


def _read_palette(lines: list[str], cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    for line in lines:
        key = line[:cpp]
        fields = split_fields(line[cpp:])
        try:
            pos = fields.index("c")
        except ValueError:
            raise XpmError("XPM colour line has no colour key") from None
        if pos + 1 >= len(fields):
            raise XpmError("XPM colour line has no colour value")
        end = fields[pos + 2] if pos + 2 < len(fields) else None
        rgb = text_to_rgb(fields[pos + 1], end)
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)
    return palette


def parse_xpm(text: str) -> Texture:
    """Decode the contents of an XPM file into a texture."""
    lines = _QUOTED.findall(strip_comments(text))
    if not lines:
        raise XpmError("XPM data has no header")
    header = split_fields(lines[0])
    if len(header) < 4:
        raise XpmError("XPM header is incomplete")
    width, height, ncolors, cpp = (_atoi(field) for field in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("XPM header is invalid")
    if len(lines) < 1 + ncolors + height:
        raise XpmError("XPM data is truncated")
    palette = _read_palette(lines[1 : 1 + ncolors], cpp)
    pixels: list[int] = []
    for line in lines[1 + ncolors : 1 + ncolors + height]:
        if len(line) < width * cpp:
            raise XpmError("XPM pixel row is too short")
        for x in range(width):
            color = palette.get(line[x * cpp : (x + 1) * cpp], 0)
            pixels.append(TRANSPARENT if color == -1 else color)
    return Texture(width, height, pixels)


def load_xpm(path: str | os.PathLike[str]) -> Texture:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"XPM Error: cannot read {path}") from exc
    return parse_xpm(text)