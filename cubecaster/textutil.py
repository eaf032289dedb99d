"""Text helpers: trimming, splitting and colour parsing."""

from __future__ import annotations

from .config import DELIMITERS, CubError

_DIGITS = "0123456789"


def trim(text: str, chars: str = DELIMITERS) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def trim_back(text: str, chars: str = DELIMITERS) -> str:
    """Remove any of ``chars`` from the end of ``text`` only."""
    return text.rstrip(chars)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def parse_color_value(text: str) -> int:
    """Parse one colour channel in the range 0 to 255."""
    rest = text.lstrip(DELIMITERS)
    if not rest:
        raise CubError("RGB value is empty")
    value = 0
    index = 0
    while index < len(rest) and rest[index] in _DIGITS:
        value = value * 10 + int(rest[index])
        if value > 255:
            raise CubError("Color out of range")
        index += 1
    tail = rest[index:].lstrip(DELIMITERS)
    if tail and tail[0] not in _DIGITS:
        raise CubError("RGB must be integer")
    return value


def to_rgb(text: str) -> int:
    """Turn ``"R,G,B"`` into a packed ``0xRRGGBB`` integer."""
    parts = split_words(text, ",")
    if len(parts) != 3:
        raise CubError("RGB required")
    red, green, blue = (parse_color_value(trim(part)) for part in parts)
    return (red << 16) + (green << 8) + blue