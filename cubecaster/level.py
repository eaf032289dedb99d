"""Reading, validating and locating the player on the grid map."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .config import DELIMITERS, CubError
from .textutil import trim_back

PLAYER_CHARS = "NSEW"

_DIRECTIONS = {
    "N": (0, -1),
    "S": (0, 1),
    "W": (-1, 0),
    "E": (1, 0),
}


@dataclass
class Vector:
    """A point or direction in map space."""

    x: float = 0.0
    y: float = 0.0


def _sign(value: float) -> float:
    if value < 0:
        return -1.0
    if value > 0:
        return 1.0
    return 0.0


@dataclass
class PlayerState:
    """Position, facing direction and camera plane of the player."""

    pos: Vector = field(default_factory=Vector)
    dir: Vector = field(default_factory=Vector)
    plane: Vector = field(default_factory=Vector)

    def set_dir(self, x: float, y: float) -> None:
        """Face along the signs of ``x`` and ``y``."""
        self.dir = Vector(_sign(x), _sign(y))

    def set_plane(self) -> None:
        """Set the camera plane perpendicular to the current direction."""
        if self.dir.x == 0:
            self.plane = Vector(-1.0 if self.dir.y == 1 else 1.0, 0.0)
        else:
            self.plane = Vector(0.0, 1.0 if self.dir.x == 1 else -1.0)


@dataclass
class GridMap:
    """The map rows as read from the scene file."""

    rows: list[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

    def padded(self) -> list[str]:
        """Return the rows right-padded with spaces to the map width."""
        width = self.width
        return [row.ljust(width) for row in self.rows]


def read_map(lines: Iterable[str]) -> GridMap:
    """Build a map from the remaining lines, skipping leading blank ones."""
    it = iter(lines)
    for raw in it:
        first = trim_back(raw, DELIMITERS)
        if first:
            break
    else:
        raise CubError("Empty file")
    rows = [first]
    rows.extend(trim_back(raw, DELIMITERS) for raw in it)
    return GridMap(rows)


def validate_edges(line: str, height: int, row: int) -> None:
    """Check that a row starts with a wall and that border rows are closed."""
    start = line.find("1")
    if start == -1:
        raise CubError("Invalid edges")
    last = line.rfind("1")
    if line[:start].strip(" "):
        raise CubError("Invalid edges")
    if row in (0, height - 1):
        if any(ch not in "1 " for ch in line[start:last]):
            raise CubError("Invalid edges")


def _check_neighbour(rows: list[str], row: int, col: int) -> None:
    if 0 <= row < len(rows) and 0 <= col < len(rows[row]):
        if rows[row][col] not in " 1":
            raise CubError("Invalid inner wall")


def validate_inners(line: str, rows: list[str], height: int, row: int) -> None:
    """Check that every space in ``line`` touches only spaces or walls."""
    length = len(rows[row])
    for col, ch in enumerate(line):
        if ch != " ":
            continue
        if row == 0:
            vertical = (1,)
        elif row == height - 1:
            vertical = (-1,)
        else:
            vertical = (-1, 1)
        for offset in vertical:
            _check_neighbour(rows, row + offset, col)
        if col == 0:
            horizontal = (1,)
        elif col == length - 1:
            horizontal = (-1,)
        else:
            horizontal = (-1, 1)
        for offset in horizontal:
            _check_neighbour(rows, row, col + offset)


def validate_map(grid: GridMap) -> None:
    """Raise ``CubError`` unless the map is closed and has exactly one player."""
    rows = grid.padded()
    count = 0
    for row, line in enumerate(rows):
        for ch in line:
            if ch in PLAYER_CHARS:
                count += 1
                if count != 1:
                    raise CubError("Invalid number of player position")
        validate_edges(line, grid.height, row)
        validate_inners(line, rows, grid.height, row)
    if count != 1:
        raise CubError("Invalid number of player position")


def find_player(grid: GridMap) -> PlayerState:
    """Return the starting state given by the first player mark on the map."""
    state = PlayerState()
    for row, line in enumerate(grid.rows):
        for col, ch in enumerate(line):
            if ch in PLAYER_CHARS:
                state.pos = Vector(col + 0.5, row + 0.5)
                state.set_dir(*_DIRECTIONS[ch])
                state.set_plane()
                return state
    return state