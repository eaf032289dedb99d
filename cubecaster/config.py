"""Shared constants, enumerations and the error type of the game."""

from __future__ import annotations

from enum import IntEnum

WIDTH = 340
HEIGHT = 180
DELIMITERS = " \t\v\f\r\n"
TEXTURE_SIZE = 64
STEP = 0.1
THETA = 0.03

FLOOR = 0
CEILING = 1


class CubError(Exception):
    """Raised when a scene file, a map or the command line is invalid."""


class Key(IntEnum):
    """Key codes the game reacts to."""

    NONE = -1
    ESC = 53
    W = 13
    S = 1
    D = 2
    A = 0
    LEFT = 123
    RIGHT = 124


class Face(IntEnum):
    """Wall faces, each with its own texture."""

    NO = 0
    SO = 1
    WE = 2
    EA = 3


class Side(IntEnum):
    """The grid axis a ray crossed when it hit a wall."""

    X = 0
    Y = 1